"""
Core graph utilities for sccgraph.

The core package includes the directed graph representation, the shared
depth-first traversals, Kosaraju's SCC passes, and invariant checkers for
finish orders and component partitions.
"""

from . import graph, traversal, scc, invariants  # noqa: F401

__all__ = ["graph", "traversal", "scc", "invariants"]
