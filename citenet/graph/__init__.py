# graph - construction, dedup, connectivity, layout and filtering
from .indexer import RecordIndexer
from .builder import GraphBuilder, BuildResult
from .dedup import Deduplicator, dedupe_nodes, dedupe_edges
from .connectivity import ConnectivityAnalyzer, connected_ids
from .layout import LayoutEngine, LayoutStrategy
from .filter import SubgraphFilter, induced_subgraph
