"""Visualization helpers for sccgraph components."""
from __future__ import annotations

from .components_viz import plot_components, save_components_png, to_networkx
from ._layout import compute_layout, component_palette

__all__ = [
    "plot_components",
    "save_components_png",
    "to_networkx",
    "compute_layout",
    "component_palette",
]
