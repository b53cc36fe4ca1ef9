"""
deduplication of nodes and edges, first-seen order preserved.
"""

import logging
from typing import List, Iterable, Set, Tuple

from ..core.models import Node, Edge, Graph

logger = logging.getLogger("citenet.graph")


def dedupe_nodes(nodes: Iterable[Node]) -> List[Node]:
    """keep the first node for each id."""
    seen: Set[str] = set()
    result = []
    for node in nodes:
        if node.id in seen:
            continue
        seen.add(node.id)
        result.append(node)
    return result


def dedupe_edges(edges: Iterable[Edge]) -> List[Edge]:
    """keep the first edge for each ordered (source, target) pair."""
    seen: Set[Tuple[str, str]] = set()
    result = []
    for edge in edges:
        if edge.key in seen:
            continue
        seen.add(edge.key)
        result.append(edge)
    return result


class Deduplicator:
    """removes repeated nodes and edges; idempotent."""

    def apply(self, graph: Graph) -> Graph:
        nodes = dedupe_nodes(graph.nodes)
        node_ids = {n.id for n in nodes}

        # edges must land on surviving nodes
        edges = [
            e for e in dedupe_edges(graph.edges)
            if e.source in node_ids and e.target in node_ids
        ]

        dropped_nodes = len(graph.nodes) - len(nodes)
        dropped_edges = len(graph.edges) - len(edges)
        if dropped_nodes or dropped_edges:
            logger.info(f"dedup removed {dropped_nodes} nodes, {dropped_edges} edges")

        return Graph(nodes=nodes, edges=edges)
