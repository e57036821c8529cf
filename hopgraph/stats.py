"""Summary statistics for a graph and its all-pairs distances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Optional

import numpy as np

from .algorithms import DistanceMatrix, PathConfig, all_pairs_distances
from .graph import Graph
from .logger import Logger, NoopLogger


@dataclass(frozen=True)
class GraphStatistics:
    """Numbers reported for a graph.

    ``diameter`` and ``average_path_length`` only consider ordered pairs of
    distinct vertices joined by a directed path; both are ``None`` when there
    are no such pairs.
    """

    num_vertices: int
    num_edges: int
    density: float
    max_degree_vertex: Optional[Any]
    max_degree: int
    diameter: Optional[int]
    average_path_length: Optional[float]


def density(graph: Graph[Any]) -> float:
    """Return the fraction of the ``|V| * (|V| - 1)`` possible edges present."""
    return graph.density()


def _finite_off_diagonal(dm: DistanceMatrix[Any]) -> np.ndarray:
    m = dm.matrix
    mask = np.isfinite(m)
    np.fill_diagonal(mask, False)
    return m[mask]


def diameter(dm: DistanceMatrix[Any]) -> Optional[int]:
    """Return the largest finite shortest-path length, or ``None``."""
    values = _finite_off_diagonal(dm)
    if values.size == 0:
        return None
    return int(values.max())


def average_path_length(dm: DistanceMatrix[Any]) -> Optional[float]:
    """Return the mean shortest-path length over reachable ordered pairs."""
    values = _finite_off_diagonal(dm)
    if values.size == 0:
        return None
    return float(values.mean())


def graph_statistics(
    graph: Graph[Hashable],
    config: Optional[PathConfig] = None,
    logger: Logger | None = None,
) -> GraphStatistics:
    """Compute :class:`GraphStatistics` for ``graph``.

    Args:
        graph: Input graph.
        config: Passed to :func:`~hopgraph.algorithms.all_pairs_distances`.
        logger: Optional event logger.
    """
    log = logger or NoopLogger()
    dm = all_pairs_distances(graph, config=config, logger=log)
    top = graph.max_degree()
    stats = GraphStatistics(
        num_vertices=graph.num_vertices(),
        num_edges=graph.num_edges(),
        density=graph.density(),
        max_degree_vertex=top,
        max_degree=graph.degree(top) if top is not None else 0,
        diameter=diameter(dm),
        average_path_length=average_path_length(dm),
    )
    log.debug("graph_statistics", diameter=stats.diameter, max_degree=stats.max_degree)
    return stats


__all__ = [
    "GraphStatistics",
    "density",
    "diameter",
    "average_path_length",
    "graph_statistics",
]
