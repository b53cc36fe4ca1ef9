#!/usr/bin/env python3
"""
test layout strategies and title filtering.

run with: pytest test_layout_filter.py -v
"""

import math
import random

import pytest

from citenet.core.config import LayoutConfig
from citenet.core.models import Node, Edge, Graph
from citenet.graph import LayoutEngine, LayoutStrategy, SubgraphFilter, induced_subgraph


# =============================================================================
# Test Fixtures
# =============================================================================

def make_graph(n, edges=None):
    nodes = [Node(id=f"P{i + 1}", label=f"Paper {i + 1}") for i in range(n)]
    return Graph(nodes=nodes, edges=edges or [])


@pytest.fixture
def five_node_graph():
    """P2 and P4 mention 'neural'; P2 cites P5."""
    nodes = [
        Node(id="P1", label="Protein Folding at Scale", x=10.0, y=10.0),
        Node(id="P2", label="Neural Machine Translation", x=20.0, y=20.0),
        Node(id="P3", label="Random Forests", x=30.0, y=30.0),
        Node(id="P4", label="Convolutional NEURAL Networks", x=40.0, y=40.0),
        Node(id="P5", label="Statistical Parsing", x=50.0, y=50.0),
    ]
    edges = [Edge("P2", "P5"), Edge("P1", "P3")]
    return Graph(nodes=nodes, edges=edges)


# =============================================================================
# Layout Tests
# =============================================================================

class TestLayoutStrategy:
    """test strategy selection by size."""

    def test_threshold(self):
        engine = LayoutEngine()
        assert engine.choose_strategy(1) == LayoutStrategy.CIRCULAR
        assert engine.choose_strategy(12) == LayoutStrategy.CIRCULAR
        assert engine.choose_strategy(13) == LayoutStrategy.GRID

    def test_scenario_d_grid_shape(self):
        """20 nodes -> 5 columns, 4 rows."""
        engine = LayoutEngine()
        assert engine.choose_strategy(20) == LayoutStrategy.GRID
        assert engine.grid_shape(20) == (5, 4)

    def test_grid_shape_values(self):
        assert LayoutEngine.grid_shape(13) == (4, 4)
        assert LayoutEngine.grid_shape(16) == (4, 4)
        assert LayoutEngine.grid_shape(17) == (5, 4)
        assert LayoutEngine.grid_shape(0) == (0, 0)


class TestCircularLayout:
    """test circular placement for small graphs."""

    def test_radius_default_canvas(self):
        """800x600 canvas: radius = min(300, 200, 250) = 200."""
        engine = LayoutEngine()
        assert engine.circle_radius() == pytest.approx(200.0)

        laid_out = engine.layout(make_graph(7))
        for node in laid_out.nodes:
            assert math.hypot(node.x - 400, node.y - 300) == pytest.approx(200.0)

    def test_radius_capped(self):
        engine = LayoutEngine(LayoutConfig(width=2000, height=2000))
        assert engine.circle_radius() == pytest.approx(250.0)

    def test_angles_follow_node_order(self):
        laid_out = LayoutEngine().layout(make_graph(4))
        first, second = laid_out.nodes[0], laid_out.nodes[1]
        assert (first.x, first.y) == pytest.approx((600.0, 300.0))
        assert (second.x, second.y) == pytest.approx((400.0, 500.0))

    def test_single_node(self):
        laid_out = LayoutEngine().layout(make_graph(1))
        assert (laid_out.nodes[0].x, laid_out.nodes[0].y) == pytest.approx((600.0, 300.0))

    def test_no_randomness(self):
        a = LayoutEngine(seed=1).layout(make_graph(12))
        b = LayoutEngine(seed=2).layout(make_graph(12))
        assert a == b


class TestGridLayout:
    """test jittered grid placement for large graphs."""

    def test_every_node_in_its_own_cell(self):
        """jitter never pushes a node out of its grid cell."""
        config = LayoutConfig()
        engine = LayoutEngine(config, seed=3)
        laid_out = engine.layout(make_graph(20))
        cols, rows = engine.grid_shape(20)
        cell_w, cell_h = engine.cell_size(cols, rows)

        cells = set()
        for i, node in enumerate(laid_out.nodes):
            col = math.floor((node.x - config.grid_margin) / cell_w)
            row = math.floor((node.y - config.grid_margin) / cell_h)
            assert (col, row) == engine.grid_cell(i, cols)
            cells.add((col, row))
        assert len(cells) == 20

    def test_jitter_bounded(self):
        config = LayoutConfig()
        engine = LayoutEngine(config, seed=9)
        laid_out = engine.layout(make_graph(50))
        cols, rows = engine.grid_shape(50)
        cell_w, cell_h = engine.cell_size(cols, rows)

        for i, node in enumerate(laid_out.nodes):
            col, row = engine.grid_cell(i, cols)
            cx = config.grid_margin + (col + 0.5) * cell_w
            cy = config.grid_margin + (row + 0.5) * cell_h
            assert abs(node.x - cx) <= 0.15 * cell_w + 1e-9
            assert abs(node.y - cy) <= 0.15 * cell_h + 1e-9

    def test_stays_on_canvas(self):
        laid_out = LayoutEngine(seed=4).layout(make_graph(100))
        for node in laid_out.nodes:
            assert 0 < node.x < 800
            assert 0 < node.y < 600

    def test_seed_reproducible(self):
        a = LayoutEngine(seed=42).layout(make_graph(30))
        b = LayoutEngine(rng=random.Random(42)).layout(make_graph(30))
        assert a == b

    def test_jitter_applied(self):
        config = LayoutConfig()
        engine = LayoutEngine(config, seed=42)
        laid_out = engine.layout(make_graph(30))
        cols, rows = engine.grid_shape(30)
        cell_w, _ = engine.cell_size(cols, rows)

        offsets = []
        for i, node in enumerate(laid_out.nodes):
            col, _ = engine.grid_cell(i, cols)
            offsets.append(node.x - (config.grid_margin + (col + 0.5) * cell_w))
        assert any(abs(o) > 1e-6 for o in offsets)


class TestLayoutContract:
    """test layout leaves everything but coordinates alone."""

    def test_edges_and_flags_untouched(self):
        graph = make_graph(15, edges=[Edge("P1", "P2")])
        graph.nodes[0].is_connected = True
        laid_out = LayoutEngine(seed=1).layout(graph)
        assert laid_out.edges == graph.edges
        assert [n.id for n in laid_out.nodes] == [n.id for n in graph.nodes]
        assert laid_out.nodes[0].is_connected
        assert all(n.has_position for n in laid_out.nodes)

    def test_input_not_mutated(self):
        graph = make_graph(5)
        LayoutEngine().layout(graph)
        assert not any(n.has_position for n in graph.nodes)

    def test_empty_graph(self):
        assert LayoutEngine().layout(Graph()) == Graph()


# =============================================================================
# Filter Tests
# =============================================================================

class TestSubgraphFilter:
    """test title search over the cached graph."""

    def test_scenario_c(self, five_node_graph):
        """P5 filtered out, so P2 -> P5 is dropped."""
        view = SubgraphFilter(five_node_graph).filter("neural")
        assert {n.id for n in view.nodes} == {"P2", "P4"}
        assert view.edges == []

    def test_empty_query_is_identity(self, five_node_graph):
        flt = SubgraphFilter(five_node_graph)
        assert flt.filter("") is five_node_graph
        assert flt.filter("   ") is five_node_graph
        assert flt.filter(None) is five_node_graph

    def test_query_matched_as_typed(self, five_node_graph):
        """whitespace only decides blankness; otherwise it is part of the match."""
        flt = SubgraphFilter(five_node_graph)
        view = flt.filter(" neural")
        assert [n.id for n in view.nodes] == ["P4"]
        assert flt.query == " neural"

        assert {n.id for n in flt.filter("neural ").nodes} == {"P2", "P4"}
        assert flt.filter("  neural  ") == Graph()

    def test_leading_space_does_not_match_word_start(self):
        graph = Graph(nodes=[
            Node(id="a", label="neuralnet"),
            Node(id="b", label="deep neural"),
        ])
        assert [n.id for n in induced_subgraph(graph, " neural").nodes] == ["b"]

    def test_keeps_edges_inside_subgraph(self, five_node_graph):
        view = induced_subgraph(five_node_graph, "F")
        assert [n.id for n in view.nodes] == ["P1", "P3"]
        assert view.edges == [Edge("P1", "P3")]

    def test_induced_subgraph_law(self, five_node_graph):
        for query in ["neural", "s", "protein", "forests", "zzz"]:
            view = induced_subgraph(five_node_graph, query)
            ids = {n.id for n in view.nodes}
            for edge in view.edges:
                assert edge.source in ids
                assert edge.target in ids
            # every full-graph edge inside the subset survives
            expected = [e for e in five_node_graph.edges if e.source in ids and e.target in ids]
            assert view.edges == expected

    def test_coordinates_reused(self, five_node_graph):
        view = SubgraphFilter(five_node_graph).filter("neural")
        for node in view.nodes:
            original = five_node_graph.get_node(node.id)
            assert (node.x, node.y) == (original.x, original.y)

    def test_reset(self, five_node_graph):
        flt = SubgraphFilter(five_node_graph)
        flt.filter("neural")
        assert flt.reset() is five_node_graph
        assert flt.query == ""
        assert flt.current is five_node_graph

    def test_filter_reset_cycles_stable(self, five_node_graph):
        flt = SubgraphFilter(five_node_graph)
        first = flt.filter("neural")
        flt.reset()
        second = flt.filter("neural")
        assert first == second
        assert five_node_graph.get_node("P5") is not None
        assert len(five_node_graph.edges) == 2

    def test_no_match(self, five_node_graph):
        view = SubgraphFilter(five_node_graph).filter("quantum")
        assert view == Graph()
