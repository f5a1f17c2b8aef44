"""Component visualization helpers for sccgraph."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.patches import Patch

from sccgraph.core.graph import DirectedGraph
from sccgraph.core.scc import component_index, kosaraju_scc
from ._layout import component_palette, compute_layout


def to_networkx(graph: DirectedGraph) -> nx.MultiDiGraph:
    """Convert a DirectedGraph into a networkx MultiDiGraph, keeping parallel edges."""
    nx_graph = nx.MultiDiGraph()
    for name in graph.names():
        nx_graph.add_node(name)
    for src, dst in graph.edges():
        nx_graph.add_edge(src, dst)
    return nx_graph


def plot_components(
    graph: DirectedGraph,
    components: Optional[Sequence[Sequence[str]]] = None,
    *,
    figsize: Tuple[int, int] = (8, 6),
    node_size: int = 700,
    layout: str = "spring",
    cmap_name: str = "tab10",
    seed: int = 0,
    with_legend: bool = True,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Render a graph with vertices colored by strongly connected component.

    Edges inside a component are drawn solid, edges between components dashed.
    """
    if len(graph) == 0:
        raise ValueError("Cannot plot an empty graph.")
    comps = [list(comp) for comp in components] if components is not None else kosaraju_scc(graph)
    index = component_index(comps)
    nx_graph = nx.DiGraph(to_networkx(graph))
    pos = compute_layout(nx_graph, layout, seed=seed)
    palette = component_palette(len(comps), cmap_name)

    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    node_colors = [palette[index[node]] for node in nx_graph.nodes]
    internal = [(u, v) for u, v in nx_graph.edges if index[u] == index[v]]
    bridges = [(u, v) for u, v in nx_graph.edges if index[u] != index[v]]
    nx.draw_networkx_nodes(nx_graph, pos, ax=ax, node_color=node_colors, node_size=node_size)
    nx.draw_networkx_labels(nx_graph, pos, ax=ax, font_size=10)
    nx.draw_networkx_edges(nx_graph, pos, ax=ax, edgelist=internal, arrows=True, node_size=node_size)
    nx.draw_networkx_edges(
        nx_graph,
        pos,
        ax=ax,
        edgelist=bridges,
        arrows=True,
        style="dashed",
        alpha=0.6,
        node_size=node_size,
    )
    if with_legend:
        handles = [
            Patch(color=palette[idx], label=f"SCC #{idx + 1}: {', '.join(comp)}") for idx, comp in enumerate(comps)
        ]
        ax.legend(handles=handles, loc="best", fontsize=8)
    ax.set_title(f"{len(comps)} strongly connected component(s)")
    ax.set_axis_off()
    return ax


def save_components_png(
    graph: DirectedGraph,
    out_path: str,
    components: Optional[Sequence[Sequence[str]]] = None,
    *,
    figsize: Tuple[int, int] = (8, 6),
    **plot_kwargs,
) -> None:
    """Render the component plot and save it as a PNG."""
    fig, ax = plt.subplots(figsize=figsize)
    plot_components(graph, components, ax=ax, figsize=figsize, **plot_kwargs)
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
