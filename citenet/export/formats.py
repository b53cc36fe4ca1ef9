"""
export formats - JSON for the rendering layer, GraphML for Gephi/Cytoscape.
"""

import json
import logging
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime

import networkx as nx

from ..core.config import ExportConfig
from ..core.models import Graph

logger = logging.getLogger("citenet.export")


class GraphExporter:
    """
    exports citation graphs to various formats.
    """

    def __init__(self, output_dir: Optional[str] = None, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()
        self.output_dir = Path(output_dir or self.config.output_dir)

    def to_dict(self, graph: Graph, query: str = "") -> Dict[str, Any]:
        """
        rendering payload:
        {
            "nodes": [{"id", "label", "year", "url", "isConnected", "x", "y"}],
            "edges": [{"source", "target"}],
            "meta": {"generated_at", "query", "stats"}
        }
        """
        data = graph.to_dict()
        data["meta"] = {
            "generated_at": datetime.now().isoformat(),
            "query": query,
            "stats": graph.stats()
        }
        return data

    def export_json(
        self,
        graph: Graph,
        filename: Optional[str] = None,
        query: str = ""
    ) -> str:
        """export to JSON format."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / (filename or self.config.json_filename)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(graph, query), f, indent=self.config.indent)

        logger.info(f"exported JSON to {path}")
        return str(path)

    def export_graphml(self, graph: Graph, filename: Optional[str] = None) -> str:
        """
        export to GraphML format.
        graphml has no null, so missing year/url/position attributes are dropped.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / (filename or self.config.graphml_filename)

        G = graph.to_networkx()
        for node_id in G.nodes():
            attrs = G.nodes[node_id]
            for key in [k for k, v in attrs.items() if v is None]:
                del attrs[key]

        nx.write_graphml(G, str(path))
        logger.info(f"exported GraphML to {path}")
        return str(path)
