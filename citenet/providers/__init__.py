from .base import CorpusProvider, CorpusUnavailableError, InMemoryCorpusProvider
from .json_file import JsonCorpusProvider
