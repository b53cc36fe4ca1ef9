"""
graph builder - derives nodes and validated citation edges from the corpus.

nodes: one per record (label + resolved url)
edges: record -> referenced record, only when the reference is in the corpus

usage:
    from citenet.graph import RecordIndexer, GraphBuilder

    records = provider.fetch_corpus()
    result = GraphBuilder().build(records, RecordIndexer.build(records))
    print(f"nodes: {len(result.nodes)}, edges: {len(result.edges)}")
"""

import logging
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Set, Sequence
from urllib.parse import quote

from ..core.config import LinkConfig
from ..core.models import PaperRecord, Node, Edge, Graph

logger = logging.getLogger("citenet.graph")


@dataclass
class BuildResult:
    """raw graph material before dedup and layout."""
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    connected_ids: Set[str] = field(default_factory=set)

    # stats
    skipped_records: int = 0        # records without an id
    unresolved_references: int = 0  # references to papers outside the corpus

    def to_graph(self) -> Graph:
        return Graph(nodes=list(self.nodes), edges=list(self.edges))


class GraphBuilder:
    """
    builds the citation graph from paper records.

    usage:
        builder = GraphBuilder(config.links)
        result = builder.build(records, index)
    """

    def __init__(self, config: Optional[LinkConfig] = None):
        self.config = config or LinkConfig()

    def resolve_label(self, record: PaperRecord) -> str:
        title = (record.title or "").strip()
        return title or self.config.untitled_label

    def resolve_url(self, record: PaperRecord) -> str:
        """
        own url, else paper viewer url by id, else a title search url.
        empty and placeholder urls count as missing.
        """
        url = (record.url or "").strip()
        if url and url != self.config.placeholder_url:
            return url

        if record.id:
            return self.config.paper_url_template.format(id=record.id)

        query = quote(record.title or self.config.search_fallback_phrase, safe="")
        return self.config.search_url_template.format(query=query)

    def build_node(self, record: PaperRecord) -> Node:
        return Node(
            id=record.id,
            label=self.resolve_label(record),
            year=record.year,
            url=self.resolve_url(record)
        )

    def build(
        self,
        records: Sequence[PaperRecord],
        index: Dict[str, PaperRecord]
    ) -> BuildResult:
        """
        nodes in corpus order, edges in reference order.
        repeated ids still yield a node each here; dedup collapses them.
        """
        result = BuildResult()

        for record in records:
            if not record.is_valid:
                result.skipped_records += 1
                continue
            result.nodes.append(self.build_node(record))

        for record in records:
            if not record.is_valid:
                continue
            for ref_id in record.references:
                if ref_id not in index:
                    result.unresolved_references += 1
                    logger.debug(f"reference {record.id} -> {ref_id} not in corpus")
                    continue
                result.edges.append(Edge(source=record.id, target=ref_id))
                result.connected_ids.add(record.id)
                result.connected_ids.add(ref_id)

        if result.skipped_records:
            logger.warning(f"skipped {result.skipped_records} records without an id")

        logger.info(
            f"built {len(result.nodes)} nodes, {len(result.edges)} edges "
            f"({result.unresolved_references} references outside corpus)"
        )
        return result
