"""
Random unit-weight directed graph families for experiments and tests.

SUPPORTED GRAPH TYPES
---------------------
1. chain
   ``v -> v+1`` for every consecutive pair. Longest possible shortest paths.

2. erdos_renyi
   Random directed graphs with uniformly sampled edges.
   Use for:
     - Baseline / average-case behavior
     - Cross-checking the two all-pairs backends

3. dag
   Directed acyclic graphs (edges only from lower- to higher-index vertices).
   Use for:
     - Many unreachable ordered pairs (every ``v -> u`` with ``u < v``)

4. grid
   2D grid graphs with edges between neighboring vertices (bidirectional).
   Use for:
     - Many equal-length shortest paths, which exercises heap tie-breaking

Every family is deterministic for a given seed.
"""

from __future__ import annotations

import math
import random
from typing import List, Literal, Optional, Set, Tuple

from .graph import Graph

GraphType = Literal["chain", "erdos_renyi", "dag", "grid"]
GRAPH_TYPES: Tuple[str, ...] = ("chain", "erdos_renyi", "dag", "grid")


def generate_graph(
    n: int,
    graph_type: GraphType = "erdos_renyi",
    *,
    m: Optional[int] = None,
    seed: Optional[int] = 0,
    first_id: int = 0,
    ensure_weakly_connected: bool = False,
) -> Graph[int]:
    """
    Generate a directed unit-weight graph with vertices ``first_id .. first_id + n - 1``.

    Notes:
    - ``m`` is the target edge count for ``erdos_renyi`` and ``dag`` (default
      ``min(4n, max edges)``); ``grid`` may add random edges on top of its
      lattice to reach ``m``; ``chain`` ignores it.
    - If ensure_weakly_connected=True, a backbone chain (i->i+1) is added
      first for the random families.
    - Self loops are never generated.

    Raises:
        ValueError: For a non-positive ``n``, negative ``m`` or unknown type.
    """
    if n <= 0:
        raise ValueError("n must be > 0.")
    if m is not None and m < 0:
        raise ValueError("m must be >= 0.")
    if graph_type not in GRAPH_TYPES:
        raise ValueError(f"Unknown graph_type: {graph_type}")

    rng = random.Random(seed)
    max_edges = n * (n - 1)
    lattice_only = m is None
    if m is None:
        m = min(n * 4, max_edges)

    edges_set: Set[Tuple[int, int]] = set()
    edges: List[Tuple[int, int]] = []

    def add_edge(u: int, v: int) -> None:
        if u == v or (u, v) in edges_set:
            return
        edges_set.add((u, v))
        edges.append((u, v))

    if graph_type == "chain" or (ensure_weakly_connected and graph_type != "grid"):
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "erdos_renyi":
        target_m = min(m, max_edges)
        while len(edges) < target_m:
            add_edge(rng.randrange(n), rng.randrange(n))

    elif graph_type == "dag":
        target_m = min(m, max_edges // 2)
        while len(edges) < target_m:
            u = rng.randrange(n)
            v = rng.randrange(n)
            if u > v:
                u, v = v, u
            add_edge(u, v)

    elif graph_type == "grid":
        rows = max(1, math.isqrt(n))
        cols = max(1, (n + rows - 1) // rows)
        for r in range(rows):
            for c in range(cols):
                u = r * cols + c
                if u >= n:
                    continue
                right = u + 1
                down = u + cols
                if c + 1 < cols and right < n:
                    add_edge(u, right)
                    add_edge(right, u)
                if r + 1 < rows and down < n:
                    add_edge(u, down)
                    add_edge(down, u)
        target_m = 0 if lattice_only else min(m, max_edges)
        while len(edges) < target_m:
            add_edge(rng.randrange(n), rng.randrange(n))

    vertices = range(first_id, first_id + n)
    return Graph.from_edges(
        ((u + first_id, v + first_id) for u, v in edges),
        vertices=vertices,
    )


__all__ = ["GRAPH_TYPES", "GraphType", "generate_graph"]
