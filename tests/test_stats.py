import pytest

from hopgraph import (
    Graph,
    PathConfig,
    all_pairs_distances,
    average_path_length,
    density,
    diameter,
    graph_statistics,
)


def test_chain_statistics():
    g = Graph.from_edges([(1, 2), (2, 3), (3, 4)])
    stats = graph_statistics(g)
    assert stats.num_vertices == 4
    assert stats.num_edges == 3
    assert stats.density == pytest.approx(0.25)
    assert stats.max_degree_vertex == 1
    assert stats.max_degree == 1
    assert stats.diameter == 3
    assert stats.average_path_length == pytest.approx(10 / 6)


def test_statistics_without_edges():
    g = Graph.from_edges([], vertices=[1, 2, 3])
    stats = graph_statistics(g, config=PathConfig(all_pairs_backend="python"))
    assert stats.num_edges == 0
    assert stats.density == 0.0
    assert stats.max_degree_vertex is None
    assert stats.max_degree == 0
    assert stats.diameter is None
    assert stats.average_path_length is None


def test_diameter_ignores_unreachable_pairs():
    # two components: a 3-cycle and a single edge
    g = Graph.from_edges([(1, 2), (2, 3), (3, 1), (7, 8)])
    dm = all_pairs_distances(g)
    assert diameter(dm) == 2
    # cycle: six pairs at distance 1 or 2 summing to 9, plus 7->8
    assert average_path_length(dm) == pytest.approx(10 / 7)


def test_density_helper():
    g = Graph.from_edges([(1, 2), (2, 1), (1, 3)])
    assert density(g) == pytest.approx(3 / 6)
