"""
layout engine - deterministic-by-size 2D placement.

small graphs go on a circle, larger ones on a jittered grid.
jitter comes from an injected random.Random so output can be reproduced.

usage:
    engine = LayoutEngine(config.layout, seed=42)
    laid_out = engine.layout(graph)
"""

import logging
import math
import random
from enum import Enum
from typing import List, Optional, Tuple

from ..core.config import LayoutConfig
from ..core.models import Node, Graph

logger = logging.getLogger("citenet.graph")


class LayoutStrategy(Enum):
    """placement rule, chosen by node count."""
    CIRCULAR = "circular"
    GRID = "grid"


class LayoutEngine:
    """
    assigns (x, y) to every node on a fixed logical canvas.
    never touches edges; connected and isolated nodes are placed alike.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        self.config = config or LayoutConfig()
        self.rng = rng or random.Random(seed)

    def choose_strategy(self, n: int) -> LayoutStrategy:
        if n <= self.config.circular_max_nodes:
            return LayoutStrategy.CIRCULAR
        return LayoutStrategy.GRID

    def circle_radius(self) -> float:
        """clamped so the circle never touches the canvas edge."""
        cfg = self.config
        return min(
            cfg.width / 2 - cfg.edge_padding,
            cfg.height / 2 - cfg.edge_padding,
            cfg.max_radius
        )

    @staticmethod
    def grid_shape(n: int) -> Tuple[int, int]:
        """(cols, rows) for n nodes."""
        if n <= 0:
            return (0, 0)
        cols = math.ceil(math.sqrt(n))
        rows = math.ceil(n / cols)
        return (cols, rows)

    @staticmethod
    def grid_cell(i: int, cols: int) -> Tuple[int, int]:
        """(col, row) of the i-th node."""
        return (i % cols, i // cols)

    def cell_size(self, cols: int, rows: int) -> Tuple[float, float]:
        cfg = self.config
        return (
            (cfg.width - cfg.grid_padding) / cols,
            (cfg.height - cfg.grid_padding) / rows
        )

    def layout(self, graph: Graph) -> Graph:
        """new graph with positioned nodes, same order, same edges."""
        n = len(graph.nodes)
        if n == 0:
            return Graph(nodes=[], edges=list(graph.edges))

        strategy = self.choose_strategy(n)
        if strategy == LayoutStrategy.CIRCULAR:
            nodes = self._circular(graph.nodes)
        else:
            nodes = self._grid(graph.nodes)

        logger.info(f"laid out {n} nodes ({strategy.value})")
        return Graph(nodes=nodes, edges=list(graph.edges))

    def _circular(self, nodes: List[Node]) -> List[Node]:
        n = len(nodes)
        cx = self.config.width / 2
        cy = self.config.height / 2
        radius = self.circle_radius()

        placed = []
        for i, node in enumerate(nodes):
            angle = 2 * math.pi * i / n
            placed.append(node.with_position(
                cx + radius * math.cos(angle),
                cy + radius * math.sin(angle)
            ))
        return placed

    def _grid(self, nodes: List[Node]) -> List[Node]:
        cols, rows = self.grid_shape(len(nodes))
        cell_w, cell_h = self.cell_size(cols, rows)
        margin = self.config.grid_margin
        jitter = self.config.jitter_fraction

        placed = []
        for i, node in enumerate(nodes):
            col, row = self.grid_cell(i, cols)
            x = margin + (col + 0.5) * cell_w
            y = margin + (row + 0.5) * cell_h

            # break perfect alignment so neighbouring labels overlap less
            x += self.rng.uniform(-jitter, jitter) * cell_w
            y += self.rng.uniform(-jitter, jitter) * cell_h

            placed.append(node.with_position(x, y))
        return placed
