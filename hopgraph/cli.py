"""Command-line interface for querying an edge-list graph."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .algorithms import PathConfig, single_source_paths
from .exceptions import ConfigError, HopGraphError, InputError
from .export import export_tree_graphml, export_tree_json
from .graph import Graph
from .io import Key, parse_key, read_graph
from .logger import LEVELS, StdLogger
from .stats import graph_statistics

EXAMPLE_CSV = """# u,v
1,2
2,3
3,4
1,3
5
"""


def _load(path: str, fmt: Optional[str]) -> Graph[Key]:
    """Read the graph file named on the command line."""
    if not Path(path).exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt)


def _write_export(path: str, text: str) -> None:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise InputError(f"cannot write {path}: {exc.strerror or exc}") from exc


def _cmd_stats(G: Graph[Key], args: argparse.Namespace, cfg: PathConfig, logger: StdLogger) -> Dict[str, Any]:
    return asdict(graph_statistics(G, config=cfg, logger=logger))


def _cmd_neighbors(G: Graph[Key], args: argparse.Namespace, cfg: PathConfig, logger: StdLogger) -> Dict[str, Any]:
    v = parse_key(args.vertex)
    return {"vertex": v, "degree": G.degree(v), "neighbors": G.get_neighbors(v)}


def _cmd_path(G: Graph[Key], args: argparse.Namespace, cfg: PathConfig, logger: StdLogger) -> Dict[str, Any]:
    source = parse_key(args.source)
    target = parse_key(args.target)
    tree = single_source_paths(G, source, config=cfg, logger=logger)
    if args.export_json:
        _write_export(args.export_json, export_tree_json(tree))
    if args.export_graphml:
        _write_export(args.export_graphml, export_tree_graphml(tree))
    if not tree.is_reachable(target):
        logger.warning("unreachable", source=source, target=target)
    return {
        "source": source,
        "target": target,
        "distance": tree.distance(target),
        "path": tree.path_to(target),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``hopgraph`` command-line tool."""
    examples = (
        "Examples:\n"
        "  hopgraph --edges graph.csv stats\n"
        "  hopgraph --edges graph.csv neighbors 1\n"
        "  hopgraph --edges graph.csv path 1 4 --export-json tree.json\n"
        "  hopgraph --example\n"
    )
    p = argparse.ArgumentParser(
        prog="hopgraph",
        description="Unit-weight shortest paths and graph statistics",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=list(LEVELS),
        default="warning",
        help="Log verbosity",
    )
    p.add_argument("--edges", type=str, help="Path to edges file")
    p.add_argument(
        "--format",
        choices=["csv", "jsonl"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument("--backend", choices=["numpy", "python"], default="numpy", help="All-pairs backend")
    p.add_argument("--validate-heap", action="store_true", help="Check heap invariants during searches")

    sub = p.add_subparsers(dest="command")
    sub.add_parser("stats", help="Vertices, edges, density, max degree, diameter, average path length")
    nb = sub.add_parser("neighbors", help="Out-degree and out-neighbors of a vertex")
    nb.add_argument("vertex")
    pp = sub.add_parser("path", help="Shortest path between two vertices")
    pp.add_argument("source")
    pp.add_argument("target")
    pp.add_argument("--export-json", type=str, default=None, help="Write the shortest-path tree as JSON")
    pp.add_argument("--export-graphml", type=str, default=None, help="Write the shortest-path tree as GraphML")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return 0
    if not args.edges or not args.command:
        p.print_usage(sys.stderr)
        sys.stderr.write("error: --edges and a command are required\n")
        return 64

    commands = {"stats": _cmd_stats, "neighbors": _cmd_neighbors, "path": _cmd_path}
    logger = StdLogger(level=args.log_level, json_fmt=args.log_json).bind(command=args.command)

    try:
        cfg = PathConfig(all_pairs_backend=args.backend, validate_heap=args.validate_heap)
        G = _load(args.edges, args.format)
        logger.info("loaded", path=args.edges, n=G.num_vertices(), m=G.num_edges())
        out = commands[args.command](G, args, cfg, logger)
        print(json.dumps(out, default=str))
        return 0

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            logger.error("failed", kind=exc.kind.value, message=str(exc))
        return 64
    except HopGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            logger.error("internal", kind=exc.kind.value, message=str(exc))
        return 70
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            logger.error("internal", kind=type(exc).__name__, message=str(exc))
        return 70


if __name__ == "__main__":
    sys.exit(main())
