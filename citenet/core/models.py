"""
core data models for citenet.
paper records in, laid-out citation graph out.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, List, Dict, Any, Set, Tuple

import networkx as nx


@dataclass
class PaperRecord:
    """
    raw paper record as supplied by the corpus store.
    references may point at ids outside the corpus.
    """
    id: str = ""
    title: str = ""
    year: Optional[int] = None
    url: Optional[str] = None
    references: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """records without an id cannot become nodes."""
        return bool(self.id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PaperRecord':
        """parse a raw store document."""
        paper_id = data.get("id") or data.get("paperId") or ""

        year = data.get("year")
        if year is not None:
            try:
                year = int(year)
            except (ValueError, TypeError):
                year = None

        title = data.get("title")
        title = "" if title is None else str(title)

        references = []
        for ref in data.get("references") or []:
            # stores keep either bare ids or {paperId, title} stubs
            if isinstance(ref, dict):
                ref = ref.get("paperId") or ref.get("id")
            if ref:
                references.append(str(ref))

        return cls(
            id=str(paper_id),
            title=title,
            year=year,
            url=data.get("url"),
            references=references
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "url": self.url,
            "references": list(self.references)
        }


@dataclass
class Node:
    """paper node in the rendered graph."""
    id: str
    label: str
    year: Optional[int] = None
    url: Optional[str] = None
    is_connected: bool = False

    # assigned by the layout engine
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None

    def with_position(self, x: float, y: float) -> 'Node':
        return replace(self, x=x, y=y)

    def to_dict(self) -> Dict[str, Any]:
        """serialize for the rendering layer."""
        return {
            "id": self.id,
            "label": self.label,
            "year": self.year,
            "url": self.url,
            "isConnected": self.is_connected,
            "x": self.x,
            "y": self.y
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Node':
        return cls(
            id=data["id"],
            label=data.get("label", ""),
            year=data.get("year"),
            url=data.get("url"),
            is_connected=bool(data.get("isConnected", False)),
            x=data.get("x"),
            y=data.get("y")
        )


@dataclass(frozen=True)
class Edge:
    """directed citation edge: source cites target."""
    source: str
    target: str

    @property
    def key(self) -> Tuple[str, str]:
        return (self.source, self.target)

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}


@dataclass
class Graph:
    """
    ordered citation graph.
    node order is significant - the circular layout assigns angles by position.
    """
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def node_ids(self) -> Set[str]:
        return {n.id for n in self.nodes}

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def connected_ids(self) -> Set[str]:
        """ids appearing as either endpoint of some edge."""
        ids = set()
        for edge in self.edges:
            ids.add(edge.source)
            ids.add(edge.target)
        return ids

    def stats(self) -> Dict[str, Any]:
        connected = sum(1 for n in self.nodes if n.is_connected)
        years = [n.year for n in self.nodes if n.year is not None]
        return {
            "node_count": len(self.nodes),
            "edge_count": len(self.edges),
            "connected_count": connected,
            "isolated_count": len(self.nodes) - connected,
            "year_range": [min(years), max(years)] if years else None
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Graph':
        return cls(
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            edges=[Edge(e["source"], e["target"]) for e in data.get("edges", [])]
        )

    def to_networkx(self) -> nx.DiGraph:
        """directed networkx view, node attributes included."""
        G = nx.DiGraph()
        for node in self.nodes:
            G.add_node(
                node.id,
                label=node.label,
                year=node.year,
                url=node.url,
                is_connected=node.is_connected,
                x=node.x,
                y=node.y
            )
        for edge in self.edges:
            G.add_edge(edge.source, edge.target)
        return G
