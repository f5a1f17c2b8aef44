"""Depth-first walks shared by the finish-order pass and component collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Iterator, List, MutableSet, Optional, Tuple

from ..config import resolve_traversal

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .graph import Vertex

LOGGER = logging.getLogger(__name__)

ITERATIVE = "iterative"
RECURSIVE = "recursive"


def _postorder_iterative(root: "Vertex", visited: MutableSet[str]) -> Iterator[str]:
    visited.add(root.name)
    stack: List[Tuple["Vertex", int]] = [(root, 0)]
    while stack:
        vertex, idx = stack[-1]
        if idx < len(vertex.outgoing):
            stack[-1] = (vertex, idx + 1)
            nxt = vertex.outgoing[idx]
            if nxt.name not in visited:
                visited.add(nxt.name)
                stack.append((nxt, 0))
        else:
            stack.pop()
            yield vertex.name


def _postorder_recursive(root: "Vertex", visited: MutableSet[str]) -> Iterator[str]:
    visited.add(root.name)
    for nxt in root.outgoing:
        if nxt.name not in visited:
            yield from _postorder_recursive(nxt, visited)
    yield root.name


def _preorder_iterative(root: "Vertex", visited: MutableSet[str]) -> List[str]:
    visited.add(root.name)
    reached = [root.name]
    stack: List[Tuple["Vertex", int]] = [(root, 0)]
    while stack:
        vertex, idx = stack[-1]
        if idx < len(vertex.outgoing):
            stack[-1] = (vertex, idx + 1)
            nxt = vertex.outgoing[idx]
            if nxt.name not in visited:
                visited.add(nxt.name)
                reached.append(nxt.name)
                stack.append((nxt, 0))
        else:
            stack.pop()
    return reached


def _preorder_recursive(root: "Vertex", visited: MutableSet[str]) -> List[str]:
    reached: List[str] = []

    def visit(vertex: "Vertex") -> None:
        visited.add(vertex.name)
        reached.append(vertex.name)
        for nxt in vertex.outgoing:
            if nxt.name not in visited:
                visit(nxt)

    visit(root)
    return reached


_POSTORDER: Dict[str, Callable[["Vertex", MutableSet[str]], Iterator[str]]] = {
    ITERATIVE: _postorder_iterative,
    RECURSIVE: _postorder_recursive,
}

_PREORDER: Dict[str, Callable[["Vertex", MutableSet[str]], List[str]]] = {
    ITERATIVE: _preorder_iterative,
    RECURSIVE: _preorder_recursive,
}


def _select(table: Dict[str, Callable], strategy: Optional[str]) -> Callable:
    name = resolve_traversal(strategy)
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"Unknown traversal strategy '{name}'. Supported: {', '.join(sorted(table))}.") from None


def postorder(roots: Iterable["Vertex"], visited: MutableSet[str], strategy: Optional[str] = None) -> Iterator[str]:
    """
    Yield vertex names as their depth-first exploration finishes.

    Every unvisited vertex in ``roots`` starts a new tree. A vertex is marked in
    ``visited`` when first entered and yielded only after all of its outgoing
    neighbours are done.
    """

    walk = _select(_POSTORDER, strategy)
    trees = 0
    for root in roots:
        if root.name in visited:
            continue
        trees += 1
        yield from walk(root, visited)
    LOGGER.debug("postorder strategy=%s trees=%d visited=%d", resolve_traversal(strategy), trees, len(visited))


def preorder(root: "Vertex", visited: MutableSet[str], strategy: Optional[str] = None) -> List[str]:
    """Return names reachable from ``root`` through unvisited vertices, in first-reached order."""

    if root.name in visited:
        return []
    return _select(_PREORDER, strategy)(root, visited)


__all__ = ["ITERATIVE", "RECURSIVE", "postorder", "preorder"]
