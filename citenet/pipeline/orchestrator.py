"""
pipeline orchestrator - corpus in, laid-out citation network out.

usage:
    pipeline = CitationPipeline(config)
    result = pipeline.run(provider.fetch_corpus())
    print(result.summary())

session with filter/reset:
    session = ExplorerSession(provider, config)
    session.load()
    view = session.filter("neural")
    full = session.reset()
"""

import logging
import random
import threading
import time
from typing import List, Optional, Sequence

from ..core.config import CitenetConfig
from ..core.models import PaperRecord, Graph
from ..graph import (
    RecordIndexer, GraphBuilder, Deduplicator,
    ConnectivityAnalyzer, LayoutEngine, SubgraphFilter
)
from ..providers.base import CorpusProvider
from .results import PipelineResult


logger = logging.getLogger("citenet.pipeline")


class CitationPipeline:
    """
    runs the stages in order:
    1. index records by id
    2. build nodes and validated edges
    3. dedupe nodes and edges
    4. classify connectivity
    5. lay out

    every stage returns fresh objects; inputs are never mutated.
    """

    def __init__(
        self,
        config: Optional[CitenetConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or CitenetConfig()
        self.builder = GraphBuilder(self.config.links)
        self.deduplicator = Deduplicator()
        self.connectivity = ConnectivityAnalyzer()
        self.layout_engine = LayoutEngine(self.config.layout, rng=rng, seed=self.config.seed)

    def run(self, records: Sequence[PaperRecord]) -> PipelineResult:
        start = time.time()
        logger.info(f"processing {len(records)} papers for connections")

        indexer = RecordIndexer(records)
        built = self.builder.build(records, indexer.index)
        graph = self.deduplicator.apply(built.to_graph())
        graph = self.connectivity.classify(graph)

        strategy = self.layout_engine.choose_strategy(len(graph.nodes)) if graph.nodes else None
        graph = self.layout_engine.layout(graph)

        result = PipelineResult(
            graph=graph,
            strategy=strategy,
            record_count=len(records),
            duplicate_ids=list(indexer.duplicate_ids),
            skipped_records=built.skipped_records,
            unresolved_references=built.unresolved_references,
            duration_seconds=time.time() - start
        )
        logger.info(
            f"network ready: {len(graph.nodes)} papers, {len(graph.edges)} citations "
            f"in {result.duration_seconds:.3f}s"
        )
        return result


def build_citation_network(
    records: Sequence[PaperRecord],
    config: Optional[CitenetConfig] = None,
    seed: Optional[int] = None
) -> Graph:
    """one-shot build; seed overrides config.seed."""
    rng = random.Random(seed) if seed is not None else None
    return CitationPipeline(config, rng=rng).run(records).graph


class ExplorerSession:
    """
    one corpus snapshot per session.
    the full graph is built once and cached; filter/reset derive views from it.
    safe to share across request threads: loading and filter state are locked.
    """

    def __init__(
        self,
        provider: CorpusProvider,
        config: Optional[CitenetConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.provider = provider
        self.config = config or CitenetConfig()
        self.pipeline = CitationPipeline(self.config, rng=rng)

        self.result: Optional[PipelineResult] = None
        self._filter: Optional[SubgraphFilter] = None
        self._lock = threading.RLock()

    @property
    def is_loaded(self) -> bool:
        return self._filter is not None

    @property
    def graph(self) -> Graph:
        """full cached graph, loading on first access."""
        return self._ensure_filter().full_graph

    @property
    def current(self) -> Graph:
        """graph currently shown (full or filtered)."""
        return self._ensure_filter().current

    @property
    def query(self) -> str:
        return self._filter.query if self._filter else ""

    def load(self, force: bool = False) -> Graph:
        """
        fetch the corpus and build the network.
        a failed fetch propagates and leaves any previous cache intact.
        """
        with self._lock:
            if self._filter is not None and not force:
                return self._filter.full_graph

            records: List[PaperRecord] = self.provider.fetch_corpus()
            result = self.pipeline.run(records)

            self.result = result
            self._filter = SubgraphFilter(result.graph)
            logger.info(f"session loaded from {self.provider.name}")
            return result.graph

    def filter(self, query: Optional[str]) -> Graph:
        with self._lock:
            return self._ensure_filter().filter(query)

    def reset(self) -> Graph:
        with self._lock:
            return self._ensure_filter().reset()

    def _ensure_filter(self) -> SubgraphFilter:
        with self._lock:
            if self._filter is None:
                self.load()
            return self._filter
