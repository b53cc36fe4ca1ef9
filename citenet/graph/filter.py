"""
subgraph filter - title search over an already laid-out graph.
"""

import logging
from typing import Optional

from ..core.models import Graph

logger = logging.getLogger("citenet.graph")


def induced_subgraph(graph: Graph, query: Optional[str]) -> Graph:
    """
    nodes whose label contains the query (case-insensitive), plus the edges
    with both endpoints among them. blank query returns the graph itself.
    surrounding whitespace only decides blankness; a non-blank query is
    matched as typed, so " neural" needs a space before the word.
    """
    query = query or ""
    if not query.strip():
        return graph

    needle = query.casefold()
    nodes = [n for n in graph.nodes if needle in n.label.casefold()]
    keep = {n.id for n in nodes}
    edges = [e for e in graph.edges if e.source in keep and e.target in keep]
    return Graph(nodes=nodes, edges=edges)


class SubgraphFilter:
    """
    filter/reset over the cached full graph.
    coordinates are reused as-is, so filter/reset cycles stay visually stable.
    """

    def __init__(self, full_graph: Graph):
        self.full_graph = full_graph
        self.query: str = ""
        self.current: Graph = full_graph

    def filter(self, query: Optional[str]) -> Graph:
        query = query or ""
        self.query = query if query.strip() else ""
        self.current = induced_subgraph(self.full_graph, self.query)
        if self.query:
            logger.info(
                f"filter {self.query!r}: {len(self.current.nodes)} nodes, "
                f"{len(self.current.edges)} edges"
            )
        return self.current

    def reset(self) -> Graph:
        self.query = ""
        self.current = self.full_graph
        return self.current
