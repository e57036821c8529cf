"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
from typing import Any, Hashable, List, Tuple
from xml.sax.saxutils import quoteattr

import networkx as nx

from .algorithms import ShortestPathTree
from .graph import Graph


def tree_edges(tree: ShortestPathTree[Any]) -> List[Tuple[Any, Any]]:
    """Return the ``(predecessor, vertex)`` edges of the shortest-path tree."""
    return [(p, v) for v, p in tree.predecessors.items() if p is not None]


def export_tree_json(tree: ShortestPathTree[Any]) -> str:
    """Return a JSON string with the reached nodes, their distances, and tree edges."""
    data = {
        "source": tree.source,
        "nodes": [{"id": v, "distance": tree.distances[v]} for v in tree.reached()],
        "edges": [{"source": u, "target": v} for (u, v) in tree_edges(tree)],
    }
    return json.dumps(data, default=str)


def export_tree_graphml(tree: ShortestPathTree[Any]) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="int"/>')
    lines.append('  <graph id="T" edgedefault="directed">')
    for v in tree.reached():
        lines.append(f"    <node id={quoteattr(str(v))}>")
        lines.append(f'      <data key="d">{tree.distances[v]}</data>')
        lines.append("    </node>")
    for u, v in tree_edges(tree):
        lines.append(f"    <edge source={quoteattr(str(u))} target={quoteattr(str(v))}/>")
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def to_networkx(graph: Graph[Hashable]) -> "nx.DiGraph":
    """Return a :class:`networkx.DiGraph` copy of ``graph``."""
    G = nx.DiGraph()
    G.add_nodes_from(graph.get_vertices())
    G.add_edges_from(graph.edges())
    return G


__all__ = ["tree_edges", "export_tree_json", "export_tree_graphml", "to_networkx"]
