"""
connectivity analyzer - flags each node as connected or isolated.
"""

import logging
from dataclasses import replace
from typing import Iterable, Set

import networkx as nx

from ..core.models import Edge, Graph

logger = logging.getLogger("citenet.graph")


def connected_ids(edges: Iterable[Edge]) -> Set[str]:
    """union of all edge endpoints."""
    ids = set()
    for edge in edges:
        ids.add(edge.source)
        ids.add(edge.target)
    return ids


class ConnectivityAnalyzer:
    """
    a node is connected if it has at least one incident edge, in either direction.
    no component sizes are computed.
    """

    def classify(self, graph: Graph) -> Graph:
        G = nx.DiGraph()
        G.add_nodes_from(n.id for n in graph.nodes)
        G.add_edges_from(e.key for e in graph.edges)
        isolated = set(nx.isolates(G))

        nodes = [replace(n, is_connected=n.id not in isolated) for n in graph.nodes]

        logger.info(
            f"connectivity: {len(nodes) - len(isolated)} connected, "
            f"{len(isolated)} isolated"
        )
        return Graph(nodes=nodes, edges=list(graph.edges))
