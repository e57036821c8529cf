"""Directed adjacency-list graph with unit-weight edges."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, Iterator, KeysView, List, Optional, Tuple, TypeVar

from .exceptions import MissingVertexError

V = TypeVar("V", bound=Hashable)
Edge = Tuple[V, V]


class Graph(Generic[V]):
    """Directed graph over hashable vertex keys.

    Each vertex maps to the list of its out-neighbors in the order the edges
    were added. Vertices are never created implicitly: both endpoints of an
    edge must be added with :meth:`add_vertex` first. Parallel edges are
    ignored, and ``(u, v)`` does not imply ``(v, u)``.

    Examples:
        ```python
        >>> g = Graph()
        >>> for v in (1, 2, 3):
        ...     g.add_vertex(v)
        >>> g.add_edge(1, 2)
        >>> g.add_edge(1, 2)
        >>> g.num_edges(), g.get_neighbors(1)
        (1, [2])
        ```
    """

    def __init__(self) -> None:
        self._adj: Dict[V, List[V]] = {}
        self._num_edges = 0

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], vertices: Iterable[V] = ()) -> "Graph[V]":
        """Create a graph from an iterable of ``(u, v)`` pairs.

        Args:
            edges: Directed edges; their endpoints are added as vertices.
            vertices: Extra vertices, added first and in order, so isolated
                vertices can be represented.

        Returns:
            A graph populated with the provided vertices and edges.
        """
        g: Graph[V] = cls()
        for v in vertices:
            g.add_vertex(v)
        for u, v in edges:
            g.add_vertex(u)
            g.add_vertex(v)
            g.add_edge(u, v)
        return g

    # ---- mutation -------------------------------------------------------

    def add_vertex(self, v: V) -> None:
        """Add ``v``; does nothing if it is already present."""
        if v not in self._adj:
            self._adj[v] = []

    def add_edge(self, u: V, v: V) -> None:
        """Add the directed edge ``u -> v`` unless it already exists.

        Raises:
            MissingVertexError: If ``u`` or ``v`` is not a vertex.
        """
        neighbors = self._require(u, "add_edge")
        self._require(v, "add_edge")
        if v not in neighbors:
            neighbors.append(v)
            self._num_edges += 1

    def clear(self) -> None:
        """Remove every vertex and edge and reset the edge counter."""
        self._adj.clear()
        self._num_edges = 0

    # ---- queries --------------------------------------------------------

    def _require(self, v: V, operation: str) -> List[V]:
        try:
            return self._adj[v]
        except KeyError:
            raise MissingVertexError(v, operation) from None

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return self._num_edges

    def get_vertices(self) -> KeysView[V]:
        """Return a live view of the vertex keys.

        The view iterates in insertion order, but results that depend on a
        vertex ordering record the ordering they used.
        """
        return self._adj.keys()

    def get_neighbors(self, v: V) -> List[V]:
        """Return the out-neighbors of ``v`` in edge-insertion order.

        Raises:
            MissingVertexError: If ``v`` is not a vertex.
        """
        return list(self._require(v, "get_neighbors"))

    def contains_vertex(self, v: V) -> bool:
        return v in self._adj

    def edge_exists(self, u: V, v: V) -> bool:
        """Return ``True`` if the directed edge ``u -> v`` exists.

        Raises:
            MissingVertexError: If either endpoint is not a vertex.
        """
        neighbors = self._require(u, "edge_exists")
        self._require(v, "edge_exists")
        return v in neighbors

    def degree(self, v: V) -> int:
        """Return the out-degree of ``v``.

        Raises:
            MissingVertexError: If ``v`` is not a vertex.
        """
        return len(self._require(v, "degree"))

    def max_degree(self) -> Optional[V]:
        """Return the vertex with the largest out-degree.

        Vertices are scanned in insertion order and only a strictly larger
        degree replaces the current best, so the earliest vertex wins ties.

        Returns:
            The vertex, or ``None`` if the graph is empty or has no edges.
        """
        best: Optional[V] = None
        best_degree = 0
        for v, neighbors in self._adj.items():
            if len(neighbors) > best_degree:
                best_degree = len(neighbors)
                best = v
        return best

    def edges(self) -> Iterator[Edge]:
        """Yield every edge ``(u, v)`` in vertex then edge-insertion order."""
        for u, neighbors in self._adj.items():
            for v in neighbors:
                yield u, v

    def density(self) -> float:
        """Return ``|E| / (|V| * (|V| - 1))``, or ``0.0`` below two vertices."""
        n = len(self._adj)
        if n < 2:
            return 0.0
        return self._num_edges / (n * (n - 1))

    # ---- container protocol ---------------------------------------------

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"


__all__ = ["Graph", "Edge"]
