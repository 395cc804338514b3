import itertools

import networkx as nx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pathfinder.errors import InvalidArgumentError
from pathfinder.graph.labeled_graph import LabeledGraph
from pathfinder.planning.shortest_path import ShortestPathFinder, shortest_path


def _graph(edges, nodes=()) -> LabeledGraph:
    g = LabeledGraph()
    for n in nodes:
        g.add_node(n)
    for src, dst, _ in edges:
        g.add_node(src)
        g.add_node(dst)
    for src, dst, cost in edges:
        g.add_edge(src, dst, cost)
    return g


def test_prefers_cheaper_detour() -> None:
    g = _graph([("A", "B", 10.0), ("B", "C", 5.0), ("A", "C", 20.0)])
    path = shortest_path(g, "A", "C")
    assert path is not None
    assert path.cost == 15.0
    assert path.points() == ["A", "B", "C"]


def test_unreachable_returns_none() -> None:
    g = _graph([("A", "B", 1.0)], nodes=["D"])
    assert shortest_path(g, "A", "D") is None
    assert shortest_path(g, "D", "A") is None


def test_respects_direction() -> None:
    g = _graph([("A", "B", 1.0)])
    assert shortest_path(g, "A", "B").cost == 1.0
    assert shortest_path(g, "B", "A") is None


def test_start_equals_end() -> None:
    g = _graph([("A", "B", 1.0), ("B", "A", 1.0)])
    path = shortest_path(g, "A", "A")
    assert path.cost == 0.0
    assert list(path) == []
    assert path.points() == ["A"]


def test_parallel_edges_use_cheapest() -> None:
    g = _graph([("A", "B", 4.0), ("A", "B", 1.5)])
    path = shortest_path(g, "A", "B")
    assert path.cost == 1.5
    assert len(path.segments) == 1


def test_zero_cost_edges() -> None:
    g = _graph([("A", "B", 0.0), ("B", "C", 0.0), ("A", "C", 1.0)])
    path = shortest_path(g, "A", "C")
    assert path.cost == 0.0
    assert path.points() == ["A", "B", "C"]


def test_cycles_do_not_loop() -> None:
    g = _graph([("A", "B", 1.0), ("B", "A", 1.0), ("B", "C", 1.0), ("C", "A", 1.0)])
    assert shortest_path(g, "A", "C").cost == 2.0


def test_ties_are_deterministic() -> None:
    edges = [("S", "L", 1.0), ("S", "R", 1.0), ("L", "T", 1.0), ("R", "T", 1.0)]
    results = {tuple(shortest_path(_graph(edges), "S", "T").points()) for _ in range(5)}
    assert len(results) == 1
    assert shortest_path(_graph(edges), "S", "T").cost == 2.0


def test_finder_reused_across_queries() -> None:
    g = _graph([("A", "B", 1.0), ("B", "C", 2.0)])
    finder = ShortestPathFinder(g)
    assert finder.find("A", "C").cost == 3.0
    assert finder.find("B", "C").cost == 2.0
    assert finder.find("C", "A") is None


def test_integer_labels_converted() -> None:
    g = _graph([("A", "B", 2), ("B", "C", 3)])
    path = shortest_path(g, "A", "C")
    assert path.cost == 5.0
    assert isinstance(path.cost, float)


def _brute_force(edges, start, end):
    """Cheapest cost over all simple paths of the multigraph."""

    if start == end:
        return 0.0
    mg = nx.MultiDiGraph()
    mg.add_nodes_from({start, end})
    best = {}
    for src, dst, cost in edges:
        mg.add_edge(src, dst)
        best[(src, dst)] = min(cost, best.get((src, dst), cost))
    costs = [
        sum(best[(a, b)] for a, b in zip(route, route[1:]))
        for route in nx.all_simple_paths(mg, start, end)
    ]
    return min(costs) if costs else None


edge_strategy = st.lists(
    st.tuples(
        st.integers(min_value=0, max_value=5),
        st.integers(min_value=0, max_value=5),
        st.integers(min_value=0, max_value=20),
    ),
    max_size=25,
)


@settings(max_examples=60, deadline=None)
@given(edge_strategy, st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=5))
def test_matches_brute_force(edges, start, end) -> None:
    edges = [(s, d, float(c)) for s, d, c in edges]
    g = _graph(edges, nodes=range(6))
    path = shortest_path(g, start, end)
    expected = _brute_force(edges, start, end)
    if expected is None:
        assert path is None
        return
    assert path is not None
    assert path.cost == pytest.approx(expected)
    assert path.start == start
    assert path.end == end
    # every segment is an edge of the graph with a matching label
    for seg in path:
        assert g.edge_count(seg.start, seg.end) >= 1
        assert any(e.dst == seg.end and float(e.label) == seg.cost for e in g.edges_from(seg.start))
    assert sum(seg.cost for seg in path) == pytest.approx(path.cost)


@settings(max_examples=30, deadline=None)
@given(edge_strategy)
def test_costs_agree_with_networkx_dijkstra(edges) -> None:
    edges = [(s, d, float(c)) for s, d, c in edges]
    g = _graph(edges, nodes=range(6))
    dg = nx.DiGraph()
    dg.add_nodes_from(range(6))
    for src, dst, cost in edges:
        if not dg.has_edge(src, dst) or dg[src][dst]["weight"] > cost:
            dg.add_edge(src, dst, weight=cost)
    for start, end in itertools.product(range(6), repeat=2):
        path = shortest_path(g, start, end)
        if nx.has_path(dg, start, end):
            expected = nx.dijkstra_path_length(dg, start, end)
            assert path.cost == pytest.approx(expected)
        else:
            assert path is None


@pytest.mark.slow
@settings(max_examples=200, deadline=None)
@given(
    st.lists(
        st.tuples(
            st.integers(min_value=0, max_value=11),
            st.integers(min_value=0, max_value=11),
            st.floats(min_value=0.0, max_value=1000.0, allow_nan=False),
        ),
        max_size=80,
    )
)
def test_large_graphs_agree_with_networkx(edges) -> None:
    g = _graph(edges, nodes=range(12))
    dg = nx.DiGraph()
    dg.add_nodes_from(range(12))
    for src, dst, cost in edges:
        if not dg.has_edge(src, dst) or dg[src][dst]["weight"] > cost:
            dg.add_edge(src, dst, weight=cost)
    lengths = dict(nx.all_pairs_dijkstra_path_length(dg))
    for start, end in itertools.product(range(12), repeat=2):
        path = shortest_path(g, start, end)
        if end in lengths[start]:
            assert path.cost == pytest.approx(lengths[start][end])
        else:
            assert path is None


def test_negative_edge_on_search_frontier_raises() -> None:
    g = _graph([("A", "B", 1.0), ("B", "C", -2.0)])
    with pytest.raises(InvalidArgumentError, match="non-negative"):
        shortest_path(g, "A", "C")
    # the search stops before reaching the negative edge
    assert shortest_path(g, "A", "B").cost == 1.0
