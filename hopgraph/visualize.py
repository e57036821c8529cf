"""
Graph rendering helper built on NetworkX + Matplotlib.

Example:

```python
from hopgraph import single_source_paths
from hopgraph.visualize import draw_graph

tree = single_source_paths(g, 1)
ax = draw_graph(g, path=tree.path_to(4))
ax.figure.savefig("path.png")
```
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .export import to_networkx
from .graph import Graph

_LAYOUTS = {
    "spring": lambda G: nx.spring_layout(G, seed=42),
    "kamada_kawai": nx.kamada_kawai_layout,
    "shell": nx.shell_layout,
    "circular": nx.circular_layout,
}


def draw_graph(
    graph: Graph[Hashable],
    path: Optional[Sequence[Hashable]] = None,
    *,
    ax: Any = None,
    layout: str = "spring",
    node_size: int = 300,
    title: Optional[str] = None,
) -> Any:
    """
    Draw ``graph`` and highlight the vertices and edges of ``path``.

    Returns the matplotlib axes; showing or saving the figure is left to the
    caller.
    """
    if layout not in _LAYOUTS:
        raise ValueError(f"Unknown layout: {layout}")
    G = to_networkx(graph)
    pos = _LAYOUTS[layout](G)
    if ax is None:
        _fig, ax = plt.subplots(figsize=(10, 8))

    on_path = set(path or ())
    path_edges = set(zip(path or (), list(path or ())[1:]))

    node_colors = ["tab:red" if v in on_path else "tab:blue" for v in G.nodes]
    edge_colors = ["tab:red" if e in path_edges else "tab:gray" for e in G.edges]

    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(
        G,
        pos,
        ax=ax,
        edge_color=edge_colors,
        arrowstyle="->",
        arrowsize=12,
        width=1.2,
    )
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)

    ax.set_title(title or f"{graph.num_vertices()} vertices, {graph.num_edges()} edges")
    ax.axis("off")
    return ax


__all__ = ["draw_graph"]
