"""Micro-benchmark utilities for the shortest-path algorithms.

Run this module as a script to time both all-pairs backends and the
single-source search on random graphs, checked against NetworkX.

Example:
```bash
python -m hopgraph.bench --trials 5 --sizes 100,400 200,800 --out-csv out.csv
```
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

import networkx as nx
import numpy as np

from .algorithms import PathConfig, all_pairs_distances, single_source_paths
from .export import to_networkx
from .generator import generate_graph


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    n: int
    m: int
    numpy_ms: float
    python_ms: float
    single_source_ms: float
    networkx_ms: float
    backends_agree: bool
    matches_networkx: bool


def run_once(n: int, m: int, seed: int = 0) -> BenchResult:
    """Time every algorithm once on an Erdos-Renyi graph.

    Args:
        n: Number of vertices.
        m: Number of edges.
        seed: Seed for the random graph generator.

    Returns:
        Timings in milliseconds and the outcome of the cross-checks.
    """
    G = generate_graph(n, "erdos_renyi", m=m, seed=seed)
    source = next(iter(G))

    t0 = time.perf_counter()
    fast = all_pairs_distances(G, PathConfig(all_pairs_backend="numpy"))
    t1 = time.perf_counter()
    slow = all_pairs_distances(G, PathConfig(all_pairs_backend="python"))
    t2 = time.perf_counter()
    tree = single_source_paths(G, source)
    t3 = time.perf_counter()
    ref: Dict[int, int] = nx.single_source_shortest_path_length(to_networkx(G), source)
    t4 = time.perf_counter()

    ours = {v: d for v, d in tree.distances.items() if d is not None}
    return BenchResult(
        n=G.num_vertices(),
        m=G.num_edges(),
        numpy_ms=(t1 - t0) * 1000.0,
        python_ms=(t2 - t1) * 1000.0,
        single_source_ms=(t3 - t2) * 1000.0,
        networkx_ms=(t4 - t3) * 1000.0,
        backends_agree=bool(np.array_equal(fast.matrix, slow.matrix)),
        matches_networkx=ours == dict(ref) and fast.row(source) == tree.distances,
    )


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,20", "20,40"],
        help="Size pairs as n,m (e.g. 100,400). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:  # pragma: no cover - argparse handles
            parser.error(f"invalid size specification '{spec}'")

    rows: List[List[object]] = []
    aggregates: Dict[Tuple[int, int], List[BenchResult]] = {}
    for n, m in sizes:
        for trial in range(args.trials):
            res = run_once(n, m, seed=args.seed_base + trial)
            aggregates.setdefault((n, m), []).append(res)
            rows.append(
                [
                    res.n,
                    res.m,
                    trial,
                    f"{res.numpy_ms:.6f}",
                    f"{res.python_ms:.6f}",
                    f"{res.single_source_ms:.6f}",
                    f"{res.networkx_ms:.6f}",
                    int(res.backends_agree),
                    int(res.matches_networkx),
                ]
            )

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(
                ["n", "m", "trial", "numpy_ms", "python_ms", "sssp_ms", "networkx_ms", "agree", "match_nx"]
            )
            writer.writerows(rows)

    print(f"{'n':>6} {'m':>7} {'numpy_med':>10} {'python_med':>11} {'sssp_med':>9} {'nx_med':>9} {'ok':>3}")
    for (n, m), results in aggregates.items():
        ok = all(r.backends_agree and r.matches_networkx for r in results)
        print(
            f"{n:6d} {m:7d}"
            f" {statistics.median(r.numpy_ms for r in results):10.2f}"
            f" {statistics.median(r.python_ms for r in results):11.2f}"
            f" {statistics.median(r.single_source_ms for r in results):9.2f}"
            f" {statistics.median(r.networkx_ms for r in results):9.2f}"
            f" {'yes' if ok else 'no':>3}"
        )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
