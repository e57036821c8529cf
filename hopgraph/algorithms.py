"""All-pairs and single-source shortest paths on unit-weight directed graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError, InputError, MissingVertexError
from .graph import Graph
from .logger import Logger, NoopLogger
from .path import reconstruct_path
from .priority_queue import IndexedPriorityQueue

V = TypeVar("V", bound=Hashable)

INFINITY = math.inf
BACKENDS = ("numpy", "python")


@dataclass(frozen=True)
class PathConfig:
    """Configuration knobs for the shortest-path algorithms.

    Attributes:
        all_pairs_backend: ``"numpy"`` (vectorized over each intermediate
            vertex) or ``"python"`` (plain triple loop). Both produce the same
            matrix.
        validate_heap: If ``True``, check the priority queue invariants after
            every mutation in :func:`single_source_paths`.
    """

    all_pairs_backend: str = "numpy"
    validate_heap: bool = False

    def __post_init__(self) -> None:
        if self.all_pairs_backend not in BACKENDS:
            raise ConfigError(
                f"unknown all-pairs backend '{self.all_pairs_backend}' (expected one of {', '.join(BACKENDS)})"
            )


@dataclass(frozen=True, eq=False)
class DistanceMatrix(Generic[V]):
    """All-pairs result together with the vertex ordering that indexes it.

    Attributes:
        vertices: Vertex at each row/column index.
        index_of: Inverse of ``vertices``.
        matrix: ``n x n`` hop counts; ``inf`` where no directed path exists.
    """

    vertices: Tuple[V, ...]
    index_of: Dict[V, int]
    matrix: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return self.vertices == other.vertices and bool(np.array_equal(self.matrix, other.matrix))

    __hash__ = None  # type: ignore[assignment]

    def index(self, v: V) -> int:
        """Return the row/column index of ``v``.

        Raises:
            MissingVertexError: If ``v`` was not part of the graph.
        """
        try:
            return self.index_of[v]
        except KeyError:
            raise MissingVertexError(v, "DistanceMatrix") from None

    def distance(self, u: V, v: V) -> Optional[int]:
        """Return the hop count from ``u`` to ``v``, or ``None`` if unreachable."""
        d = self.matrix[self.index(u), self.index(v)]
        return None if math.isinf(d) else int(d)

    def is_reachable(self, u: V, v: V) -> bool:
        return self.distance(u, v) is not None

    def row(self, u: V) -> Dict[V, Optional[int]]:
        """Return ``{v: distance(u, v)}`` for every vertex ``v``."""
        i = self.index(u)
        return {
            v: (None if math.isinf(d) else int(d))
            for v, d in zip(self.vertices, self.matrix[i].tolist())
        }


@dataclass(frozen=True)
class ShortestPathTree(Generic[V]):
    """Single-source result keyed by vertex identity.

    Attributes:
        source: The source vertex.
        distances: Hop count for every vertex, ``None`` if unreached.
        predecessors: Previous vertex on a shortest path, ``None`` for the
            source and for unreached vertices.
    """

    source: V
    distances: Dict[V, Optional[int]]
    predecessors: Dict[V, Optional[V]]

    def _check(self, v: V) -> None:
        if v not in self.distances:
            raise MissingVertexError(v, "ShortestPathTree")

    def distance(self, v: V) -> Optional[int]:
        self._check(v)
        return self.distances[v]

    def predecessor(self, v: V) -> Optional[V]:
        self._check(v)
        return self.predecessors[v]

    def is_reachable(self, v: V) -> bool:
        return self.distance(v) is not None

    def reached(self) -> List[V]:
        """Return the reached vertices, closest first."""
        found = [v for v, d in self.distances.items() if d is not None]
        found.sort(key=lambda v: self.distances[v])  # type: ignore[arg-type, return-value]
        return found

    def path_to(self, target: V) -> List[V]:
        """Return the vertices from the source to ``target``; empty if unreached."""
        self._check(target)
        return reconstruct_path(self.predecessors, self.source, target)


# ---------- all pairs -----------------------------------------------------


def _relax_numpy(dist: npt.NDArray[np.float64]) -> None:
    n = dist.shape[0]
    for k in range(n):
        # row k and column k are fixed points of round k, so updating in place is exact
        np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :], out=dist)


def _relax_python(dist: List[List[float]]) -> None:
    n = len(dist)
    for k in range(n):
        dk = dist[k]
        for i in range(n):
            di = dist[i]
            dik = di[k]
            for j in range(n):
                if dik + dk[j] < di[j]:
                    di[j] = dik + dk[j]


def all_pairs_distances(
    graph: Graph[V],
    config: Optional[PathConfig] = None,
    logger: Logger | None = None,
) -> DistanceMatrix[V]:
    """Compute shortest hop counts between every ordered pair of vertices.

    The vertices are enumerated once; the enumeration is returned with the
    matrix so callers never depend on the graph's iteration order. The
    diagonal is 0, edges start at 1, everything else at ``inf``, and each
    vertex ``k`` in turn is tried as an intermediate hop for every pair.

    Args:
        graph: Input graph.
        config: Optional algorithm configuration.
        logger: Optional event logger.

    Returns:
        The distance matrix and its vertex ordering.
    """
    cfg = config or PathConfig()
    log = logger or NoopLogger()

    vertices = tuple(graph.get_vertices())
    index_of = {v: i for i, v in enumerate(vertices)}
    n = len(vertices)
    log.debug("all_pairs.start", n=n, m=graph.num_edges(), backend=cfg.all_pairs_backend)

    if cfg.all_pairs_backend == "numpy":
        dist = np.full((n, n), INFINITY, dtype=np.float64)
        for i, u in enumerate(vertices):
            for v in graph.get_neighbors(u):
                dist[i, index_of[v]] = 1.0
        np.fill_diagonal(dist, 0.0)
        _relax_numpy(dist)
        matrix = dist
    else:
        rows: List[List[float]] = [[INFINITY] * n for _ in range(n)]
        for i, u in enumerate(vertices):
            for v in graph.get_neighbors(u):
                rows[i][index_of[v]] = 1.0
            rows[i][i] = 0.0
        _relax_python(rows)
        matrix = np.array(rows, dtype=np.float64).reshape(n, n)

    reachable = int(np.isfinite(matrix).sum()) - n
    log.info("all_pairs", n=n, backend=cfg.all_pairs_backend, reachable_pairs=reachable)
    return DistanceMatrix(vertices=vertices, index_of=index_of, matrix=matrix)


# ---------- single source -------------------------------------------------


def single_source_paths(
    graph: Graph[V],
    source: V,
    config: Optional[PathConfig] = None,
    logger: Logger | None = None,
) -> ShortestPathTree[V]:
    """Build the shortest-path tree from ``source`` with an indexed heap.

    Vertices are first compacted to dense indices ``0..n-1``, which serve as
    queue elements. An unreached vertex is queued with priority ``n``, one
    more than the longest possible simple path. The minimum vertex ``u`` is
    popped repeatedly and every out-neighbor ``v`` with
    ``dist[u] + 1 < dist[v]`` gets a new distance, predecessor ``u`` and a
    :meth:`~hopgraph.priority_queue.IndexedPriorityQueue.change_priority`.

    Args:
        graph: Input graph.
        source: Vertex to search from.
        config: Optional algorithm configuration.
        logger: Optional event logger.

    Returns:
        Distances and predecessors keyed by vertex.

    Raises:
        MissingVertexError: If ``source`` is not a vertex.
    """
    if not graph.contains_vertex(source):
        raise MissingVertexError(source, "single_source_paths")
    cfg = config or PathConfig()
    log = logger or NoopLogger()

    vertices = tuple(graph.get_vertices())
    index_of = {v: i for i, v in enumerate(vertices)}
    n = len(vertices)
    unreached = n

    dist: List[int] = [unreached] * n
    prev: List[Optional[int]] = [None] * n
    dist[index_of[source]] = 0

    pq = IndexedPriorityQueue()
    for i in range(n):
        pq.push(dist[i], i)

    counters = {"pops": 0, "edges_relaxed": 0, "relaxations": 0}
    while not pq.is_empty():
        u = pq.top_element()
        pq.pop()
        counters["pops"] += 1
        if cfg.validate_heap:
            pq.check_invariants()
        alt = dist[u] + 1
        for w in graph.get_neighbors(vertices[u]):
            v = index_of[w]
            counters["edges_relaxed"] += 1
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                pq.change_priority(alt, v)
                counters["relaxations"] += 1
                if cfg.validate_heap:
                    pq.check_invariants()

    log.debug("single_source.counters", source=source, **counters)

    distances: Dict[V, Optional[int]] = {}
    predecessors: Dict[V, Optional[V]] = {}
    for i, v in enumerate(vertices):
        distances[v] = dist[i] if dist[i] < unreached else None
        p = prev[i]
        predecessors[v] = vertices[p] if p is not None else None

    reached = sum(1 for d in distances.values() if d is not None)
    log.info("single_source", source=source, n=n, reached=reached)
    return ShortestPathTree(source=source, distances=distances, predecessors=predecessors)


def predecessor_array(graph: Graph[int], source: int) -> List[int]:
    """Return predecessors as a list where slot ``v - 1`` belongs to vertex ``v``.

    Only defined for graphs whose vertices are exactly ``1..n``, so ``0``
    can mark "no predecessor" without colliding with a real vertex.

    Raises:
        InputError: If the vertex keys are not exactly ``1..n``.
        MissingVertexError: If ``source`` is not a vertex.
    """
    n = graph.num_vertices()
    keys = set(graph.get_vertices())
    if any(type(k) is not int for k in keys) or keys != set(range(1, n + 1)):
        raise InputError("predecessor_array requires vertex keys 1..n")
    tree = single_source_paths(graph, source)
    out = [0] * n
    for v, p in tree.predecessors.items():
        if p is not None:
            out[v - 1] = p
    return out


__all__ = [
    "INFINITY",
    "PathConfig",
    "DistanceMatrix",
    "ShortestPathTree",
    "all_pairs_distances",
    "single_source_paths",
    "predecessor_array",
]
