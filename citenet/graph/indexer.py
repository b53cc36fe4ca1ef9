"""
record indexer - O(1) id lookup over the raw corpus.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..core.models import PaperRecord

logger = logging.getLogger("citenet.graph")


class RecordIndexer:
    """
    id -> record index, built once per corpus snapshot.
    first record wins when ids repeat.
    """

    def __init__(self, records: Iterable[PaperRecord]):
        self.index: Dict[str, PaperRecord] = {}
        self.duplicate_ids: List[str] = []

        for record in records:
            if not record.is_valid:
                continue
            if record.id in self.index:
                if record.id not in self.duplicate_ids:
                    self.duplicate_ids.append(record.id)
                continue
            self.index[record.id] = record

        if self.duplicate_ids:
            logger.warning(
                f"{len(self.duplicate_ids)} duplicate paper ids in corpus, "
                f"keeping first occurrence: {self.duplicate_ids[:5]}"
            )

    @classmethod
    def build(cls, records: Iterable[PaperRecord]) -> Dict[str, PaperRecord]:
        return cls(records).index

    def __contains__(self, paper_id: str) -> bool:
        return paper_id in self.index

    def __len__(self) -> int:
        return len(self.index)

    def get(self, paper_id: str) -> Optional[PaperRecord]:
        return self.index.get(paper_id)
