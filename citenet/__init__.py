"""
citenet - citation network explorer for a paper corpus.
"""

from .core.config import CitenetConfig, LayoutConfig, LinkConfig, ExportConfig
from .core.models import PaperRecord, Node, Edge, Graph
from .graph import (
    RecordIndexer, GraphBuilder, Deduplicator,
    ConnectivityAnalyzer, LayoutEngine, LayoutStrategy, SubgraphFilter
)
from .providers import CorpusProvider, CorpusUnavailableError, InMemoryCorpusProvider, JsonCorpusProvider
from .pipeline import CitationPipeline, ExplorerSession, PipelineResult, build_citation_network
from .export.formats import GraphExporter

__version__ = "0.1.0"

__all__ = [
    "CitenetConfig",
    "LayoutConfig",
    "LinkConfig",
    "ExportConfig",
    "PaperRecord",
    "Node",
    "Edge",
    "Graph",
    "RecordIndexer",
    "GraphBuilder",
    "Deduplicator",
    "ConnectivityAnalyzer",
    "LayoutEngine",
    "LayoutStrategy",
    "SubgraphFilter",
    "CorpusProvider",
    "CorpusUnavailableError",
    "InMemoryCorpusProvider",
    "JsonCorpusProvider",
    "CitationPipeline",
    "ExplorerSession",
    "PipelineResult",
    "build_citation_network",
    "GraphExporter"
]
