import pytest

from hopgraph import ErrorKind, Graph, MissingVertexError


@pytest.fixture
def chain():
    g = Graph()
    for v in (1, 2, 3, 4):
        g.add_vertex(v)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(3, 4)
    return g


def test_add_vertex_is_idempotent():
    g = Graph()
    g.add_vertex("a")
    g.add_vertex("a")
    assert g.num_vertices() == 1
    assert g.get_neighbors("a") == []


@pytest.mark.parametrize("u,v", [(1, 9), (9, 1), (8, 9)])
def test_add_edge_requires_both_endpoints(chain, u, v):
    with pytest.raises(MissingVertexError) as info:
        chain.add_edge(u, v)
    assert info.value.kind is ErrorKind.MISSING_VERTEX
    assert "add_edge" in str(info.value)
    assert chain.num_edges() == 3


def test_missing_vertex_error_is_a_key_error(chain):
    with pytest.raises(KeyError):
        chain.degree(42)
    with pytest.raises(ValueError):
        chain.degree(42)


def test_duplicate_edge_counted_once(chain):
    chain.add_edge(1, 3)
    chain.add_edge(1, 3)
    assert chain.edge_exists(1, 3)
    assert chain.num_edges() == 4
    assert chain.get_neighbors(1) == [2, 3]


def test_edges_are_directed(chain):
    assert chain.edge_exists(1, 2)
    assert not chain.edge_exists(2, 1)


def test_queries_on_missing_vertex_raise(chain):
    for call in (
        lambda: chain.get_neighbors(0),
        lambda: chain.degree(0),
        lambda: chain.edge_exists(0, 1),
        lambda: chain.edge_exists(1, 0),
    ):
        with pytest.raises(MissingVertexError):
            call()


def test_neighbors_keep_insertion_order_and_are_copied(chain):
    chain.add_edge(1, 4)
    chain.add_edge(1, 3)
    neighbors = chain.get_neighbors(1)
    assert neighbors == [2, 4, 3]
    neighbors.append(99)
    assert chain.get_neighbors(1) == [2, 4, 3]


def test_degree_and_containment(chain):
    assert chain.degree(1) == 1
    assert chain.degree(4) == 0
    assert chain.contains_vertex(4)
    assert not chain.contains_vertex(5)
    assert 4 in chain and 5 not in chain
    assert len(chain) == 4
    assert set(chain.get_vertices()) == {1, 2, 3, 4}


def test_clear_resets_vertices_and_edge_counter(chain):
    chain.clear()
    assert chain.num_vertices() == 0
    assert chain.num_edges() == 0
    chain.add_vertex(1)
    chain.add_vertex(2)
    chain.add_edge(1, 2)
    assert chain.num_edges() == 1


def test_max_degree_prefers_first_vertex_on_ties():
    g = Graph.from_edges([("b", "a"), ("c", "a"), ("c", "b")], vertices=["a", "b", "c"])
    assert g.max_degree() == "c"
    g.add_edge("b", "c")
    # b reached degree 2 first in the scan
    assert g.max_degree() == "b"


def test_max_degree_without_edges_is_none():
    assert Graph().max_degree() is None
    g = Graph.from_edges([], vertices=[1, 2])
    assert g.max_degree() is None


def test_from_edges_and_edges_iteration():
    g = Graph.from_edges([(1, 2), (2, 1), (1, 2)], vertices=[3])
    assert list(g.get_vertices()) == [3, 1, 2]
    assert list(g.edges()) == [(1, 2), (2, 1)]
    assert g.num_edges() == 2


def test_density():
    assert Graph().density() == 0.0
    g = Graph.from_edges([(1, 2), (2, 1)])
    assert g.density() == 1.0
    g.add_vertex(3)
    assert g.density() == pytest.approx(2 / 6)


def test_repr_shows_counts(chain):
    assert repr(chain) == "Graph(num_vertices=4, num_edges=3)"
