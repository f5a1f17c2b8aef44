"""Hand-authored sample graph with several strongly connected components."""

from __future__ import annotations

from typing import Tuple

from .core.graph import DirectedGraph

SAMPLE_EDGES: Tuple[Tuple[str, str], ...] = (
    # A -> B -> C -> A
    ("A", "B"),
    ("B", "C"),
    ("C", "A"),
    # D <-> E
    ("D", "E"),
    ("E", "D"),
    # bridges between components
    ("C", "D"),
    ("E", "F"),
    # F <-> G, then the singleton sink H
    ("F", "G"),
    ("G", "F"),
    ("G", "H"),
)


def sample_graph() -> DirectedGraph:
    """Eight vertices, four components: {A,B,C}, {D,E}, {F,G}, {H}."""

    return DirectedGraph.from_edges(SAMPLE_EDGES)
