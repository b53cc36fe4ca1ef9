"""
base provider interface for corpus stores.
all providers must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import List, Iterable, Union, Dict, Any

from ..core.models import PaperRecord


class CorpusUnavailableError(RuntimeError):
    """the corpus store could not be read; nothing is built."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"[{provider}] {message}")


class CorpusProvider(ABC):
    """
    abstract base class for paper corpus sources.
    a provider returns the whole corpus in one fetch.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """provider name for logging."""
        pass

    @abstractmethod
    def fetch_corpus(self) -> List[PaperRecord]:
        """
        fetch every paper record.
        raises CorpusUnavailableError when the store is unreachable.
        """
        pass


class InMemoryCorpusProvider(CorpusProvider):
    """corpus held in memory - records or raw dicts."""

    def __init__(self, records: Iterable[Union[PaperRecord, Dict[str, Any]]]):
        self.records = [
            r if isinstance(r, PaperRecord) else PaperRecord.from_dict(r)
            for r in records
        ]

    @property
    def name(self) -> str:
        return "memory"

    def fetch_corpus(self) -> List[PaperRecord]:
        return list(self.records)
