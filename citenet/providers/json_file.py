"""
json corpus provider - reads a store export from disk.
supports a bare list of records or one wrapped under papers/results/data/items.
"""

import json
import logging
from pathlib import Path
from typing import List

from ..core.models import PaperRecord
from .base import CorpusProvider, CorpusUnavailableError

logger = logging.getLogger("citenet.providers")

WRAPPER_KEYS = ["papers", "results", "data", "items"]


class JsonCorpusProvider(CorpusProvider):
    """corpus from a JSON export file."""

    def __init__(self, path: str):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return "json"

    def fetch_corpus(self) -> List[PaperRecord]:
        if not self.path.exists():
            raise CorpusUnavailableError(self.name, f"corpus file not found: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers both bad JSON and bad UTF-8
            raise CorpusUnavailableError(self.name, f"cannot read {self.path}: {e}") from e

        # handle both list and dict formats
        if isinstance(data, dict):
            for key in WRAPPER_KEYS:
                if key in data:
                    data = data[key]
                    break

        if not isinstance(data, list):
            raise CorpusUnavailableError(self.name, f"unexpected JSON format in {self.path}")

        records = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(f"skipping non-object entry #{i} in {self.path}")
                continue
            records.append(PaperRecord.from_dict(item))

        logger.info(f"loaded {len(records)} papers from {self.path}")
        return records
