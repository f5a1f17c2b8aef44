"""Directed graph of named vertices used by the SCC passes."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from . import traversal


class Vertex:
    """Named vertex holding its ordered outgoing adjacency."""

    __slots__ = ("_name", "outgoing")

    def __init__(self, name: str) -> None:
        self._name = name
        self.outgoing: List[Vertex] = []

    @property
    def name(self) -> str:
        return self._name

    def add_outgoing(self, target: Vertex) -> None:
        """Append an edge to ``target``; parallel edges are kept as repeats."""

        self.outgoing.append(target)

    def neighbor_names(self) -> List[str]:
        return [vertex.name for vertex in self.outgoing]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Vertex({self._name!r})"

    def __str__(self) -> str:
        return self._name


class DirectedGraph:
    """Graph container keyed by vertex name, in first-mention order."""

    def __init__(self) -> None:
        self.vertices: Dict[str, Vertex] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str]], vertices: Iterable[str] = ()) -> "DirectedGraph":
        """Convenience helper to build a graph from iterables."""

        graph = cls()
        for name in vertices:
            graph.ensure_vertex(name)
        for src, dst in edges:
            graph.add_edge(src, dst)
        return graph

    def ensure_vertex(self, name: str) -> Vertex:
        vertex = self.vertices.get(name)
        if vertex is None:
            vertex = Vertex(name)
            self.vertices[name] = vertex
        return vertex

    def add_edge(self, from_name: str, to_name: str) -> None:
        src = self.ensure_vertex(from_name)
        dst = self.ensure_vertex(to_name)
        src.add_outgoing(dst)

    def all_vertices(self) -> List[Vertex]:
        return list(self.vertices.values())

    def lookup(self, name: str) -> Optional[Vertex]:
        return self.vertices.get(name)

    def names(self) -> List[str]:
        return list(self.vertices)

    def edges(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(from, to)`` pairs in vertex order, then adjacency order."""

        for vertex in self.vertices.values():
            for target in vertex.outgoing:
                yield vertex.name, target.name

    def edge_count(self) -> int:
        return sum(len(vertex.outgoing) for vertex in self.vertices.values())

    def reverse(self) -> "DirectedGraph":
        """
        Build the edge-reversed graph.

        Every vertex is registered before any edge is added so the result keeps
        this graph's insertion order regardless of how edges are laid out.
        """

        reversed_graph = DirectedGraph()
        for name in self.vertices:
            reversed_graph.ensure_vertex(name)
        for src, dst in self.edges():
            reversed_graph.add_edge(dst, src)
        return reversed_graph

    def finish_order(self, strategy: Optional[str] = None) -> List[str]:
        """Return vertex names in decreasing DFS finish time."""

        visited: set = set()
        post = list(traversal.postorder(self.vertices.values(), visited, strategy))
        post.reverse()
        return post

    def adjacency_lines(self) -> List[str]:
        return [f"{vertex.name} -> [{', '.join(vertex.neighbor_names())}]" for vertex in self.vertices.values()]

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, name: object) -> bool:
        return name in self.vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices.values())

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.adjacency_lines())

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self.vertices)}, edges={self.edge_count()})"
