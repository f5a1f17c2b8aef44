"""Invariant checks for finish orders and component partitions."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Set

from .graph import DirectedGraph


class InvariantViolation(RuntimeError):
    """Base error for invariant violations."""


class InvalidFinishOrder(InvariantViolation):
    """Raised when a vertex order is not a permutation of the graph's vertex names."""


class PartitionViolation(InvariantViolation):
    """Raised when components overlap, are empty, or leave vertices out."""


class ReachabilityViolation(InvariantViolation):
    """Raised when a component is not strongly connected or two components should merge."""


def _preview(names: Sequence[str], limit: int = 5) -> str:
    shown = ", ".join(sorted(names)[:limit])
    if len(names) > limit:
        shown += f", ... (+{len(names) - limit})"
    return shown


def validate_order(graph: DirectedGraph, ordered_names: Sequence[str]) -> None:
    """Ensure ``ordered_names`` lists every vertex of ``graph`` exactly once."""

    counts = Counter(ordered_names)
    duplicated = [name for name, count in counts.items() if count > 1]
    unknown = [name for name in counts if name not in graph]
    missing = [name for name in graph.vertices if name not in counts]
    problems: List[str] = []
    if unknown:
        problems.append(f"unknown vertices [{_preview(unknown)}]")
    if duplicated:
        problems.append(f"duplicated vertices [{_preview(duplicated)}]")
    if missing:
        problems.append(f"missing vertices [{_preview(missing)}]")
    if problems:
        raise InvalidFinishOrder("Vertex order is not a permutation of the graph: " + "; ".join(problems))


def validate_partition(graph: DirectedGraph, components: Sequence[Sequence[str]]) -> None:
    """Check that components are non-empty, disjoint, and cover the vertex set."""

    owner: Dict[str, int] = {}
    for idx, comp in enumerate(components):
        if not comp:
            raise PartitionViolation(f"Component #{idx + 1} is empty")
        for name in comp:
            if name not in graph:
                raise PartitionViolation(f"Component #{idx + 1} names unknown vertex {name}")
            if name in owner:
                raise PartitionViolation(
                    f"Vertex {name} appears in components #{owner[name] + 1} and #{idx + 1}"
                )
            owner[name] = idx
    missing = [name for name in graph.vertices if name not in owner]
    if missing:
        raise PartitionViolation(f"Vertices not assigned to any component: [{_preview(missing)}]")


def reachable_from(graph: DirectedGraph, name: str) -> Set[str]:
    """Return every vertex name reachable from ``name``, including itself."""

    start = graph.lookup(name)
    if start is None:
        return set()
    seen = {start.name}
    stack = [start]
    while stack:
        vertex = stack.pop()
        for nxt in vertex.outgoing:
            if nxt.name not in seen:
                seen.add(nxt.name)
                stack.append(nxt)
    return seen


def validate_mutual_reachability(graph: DirectedGraph, components: Sequence[Sequence[str]]) -> None:
    """
    Check that each component is strongly connected and maximal.

    A vertex's forward and backward reachable sets intersect in exactly its
    strongly connected component, so each component must equal that
    intersection for its first member.
    """

    reversed_graph = graph.reverse()
    for idx, comp in enumerate(components):
        if not comp:
            continue
        head = comp[0]
        expected = reachable_from(graph, head) & reachable_from(reversed_graph, head)
        actual = set(comp)
        if actual - expected:
            raise ReachabilityViolation(
                f"Component #{idx + 1} holds vertices not mutually reachable with {head}: "
                f"[{_preview(list(actual - expected))}]"
            )
        if expected - actual:
            raise ReachabilityViolation(
                f"Component #{idx + 1} is not maximal; {head} is mutually reachable with "
                f"[{_preview(list(expected - actual))}]"
            )


def assert_invariants(graph: DirectedGraph, components: Sequence[Sequence[str]]) -> None:
    """Run all component checks."""

    validate_partition(graph, components)
    validate_mutual_reachability(graph, components)


__all__ = [
    "InvariantViolation",
    "InvalidFinishOrder",
    "PartitionViolation",
    "ReachabilityViolation",
    "validate_order",
    "validate_partition",
    "validate_mutual_reachability",
    "reachable_from",
    "assert_invariants",
]
