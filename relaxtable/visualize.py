"""Drawing a graph and its predecessor edges with NetworkX + Matplotlib."""

from __future__ import annotations

from typing import List, Optional, Tuple

import networkx as nx

from .engine import RelaxationResult
from .export import predecessor_edges
from .graph import VertexKey, WeightedGraph

LAYOUTS = ("spring", "kamada_kawai", "shell")


def to_networkx(graph: WeightedGraph) -> nx.DiGraph:
    """Return a ``DiGraph`` with a ``weight`` attribute on every edge.

    Parallel edges collapse onto the last weight added.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.vertex_keys())
    for e in graph.edges:
        G.add_edge(e.start, e.end, weight=e.weight)
    return G


def tree_edges(
    graph: WeightedGraph, result: RelaxationResult
) -> List[Tuple[VertexKey, VertexKey]]:
    """Return the graph edges behind each predecessor pointer.

    A pointer may follow its edge forward (set from the previous vertex) or
    backward (set by a hop toward the source), so both orientations are tried.
    Pointers with no matching edge are dropped.
    """
    G = to_networkx(graph)
    edges: List[Tuple[VertexKey, VertexKey]] = []
    for prev, key in predecessor_edges(result):
        if G.has_edge(prev, key):
            edges.append((prev, key))
        elif G.has_edge(key, prev):
            edges.append((key, prev))
    return edges


def _layout(G: nx.DiGraph, layout: str) -> dict:
    if layout == "spring":
        return nx.spring_layout(G, seed=42)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(G)
    if layout == "shell":
        return nx.shell_layout(G)
    raise ValueError(f"Unknown layout: {layout}")


def draw_result(
    graph: WeightedGraph,
    result: RelaxationResult,
    path: Optional[str] = None,
    *,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 600,
) -> None:
    """Render the graph, highlighting the source and the predecessor edges.

    Saves to ``path`` when given, otherwise opens a window.
    """
    import matplotlib

    if path is not None:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    G = to_networkx(graph)
    pos = _layout(G, layout)

    fig = plt.figure(figsize=(10, 8))
    node_colors = ["tab:red" if node == result.source else "tab:blue" for node in G.nodes]
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(G, pos, arrowstyle="->", arrowsize=12, width=1.0, alpha=0.4)

    nx.draw_networkx_edges(
        G,
        pos,
        edgelist=tree_edges(graph, result),
        edge_color="tab:orange",
        arrowstyle="->",
        arrowsize=14,
        width=2.2,
    )
    nx.draw_networkx_labels(
        G,
        pos,
        labels={e.key: f"{e.key}\n{e.distance_from_start}" for e in result},
        font_size=8,
    )
    if show_weights:
        nx.draw_networkx_edge_labels(
            G, pos, edge_labels={(e.start, e.end): e.weight for e in graph.edges}, font_size=7
        )

    plt.title(f"Single-pass distances from {result.source}", fontsize=14)
    plt.axis("off")
    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    else:  # pragma: no cover - interactive
        plt.show()
