"""Strongly connected component utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import check_invariants_enabled, resolve_traversal
from . import traversal
from .graph import DirectedGraph
from .invariants import assert_invariants, validate_order

LOGGER = logging.getLogger(__name__)

Component = List[str]


class SccSolver:
    """
    Second Kosaraju pass: collect components by forward DFS on the original graph.

    The solver keeps no state between calls besides the traversal strategy, so
    one instance can be reused across graphs.
    """

    def __init__(self, traversal_strategy: Optional[str] = None) -> None:
        self.traversal_strategy = traversal_strategy

    def compute(self, graph: DirectedGraph, ordered_names: Sequence[str]) -> List[Component]:
        """
        Partition ``graph`` into components, starting a new one at each unvisited name.

        ``ordered_names`` must be a permutation of the graph's vertex names,
        normally ``graph.reverse().finish_order()``; anything else raises
        :class:`~sccgraph.core.invariants.InvalidFinishOrder`.
        """

        validate_order(graph, ordered_names)
        visited: set = set()
        components: List[Component] = []
        for name in ordered_names:
            if name in visited:
                continue
            components.append(traversal.preorder(graph.vertices[name], visited, self.traversal_strategy))
        LOGGER.debug(
            "scc compute vertices=%d edges=%d components=%d strategy=%s",
            len(graph),
            graph.edge_count(),
            len(components),
            resolve_traversal(self.traversal_strategy),
        )
        return components


@dataclass
class KosarajuRun:
    """All intermediate products of one Kosaraju run."""

    graph: DirectedGraph
    reversed_graph: DirectedGraph
    finish_order: List[str]
    components: List[Component]


def run_kosaraju(graph: DirectedGraph, traversal_strategy: Optional[str] = None) -> KosarajuRun:
    reversed_graph = graph.reverse()
    order = reversed_graph.finish_order(traversal_strategy)
    components = SccSolver(traversal_strategy).compute(graph, order)
    if check_invariants_enabled():
        assert_invariants(graph, components)
    return KosarajuRun(graph=graph, reversed_graph=reversed_graph, finish_order=order, components=components)


def kosaraju_scc(graph: DirectedGraph, traversal_strategy: Optional[str] = None) -> List[Component]:
    """Kosaraju's SCC algorithm."""

    return run_kosaraju(graph, traversal_strategy).components


def component_index(components: Sequence[Sequence[str]]) -> Dict[str, int]:
    return {name: idx for idx, comp in enumerate(components) for name in comp}


def condensation_dag(
    graph: DirectedGraph, components: Optional[Sequence[Sequence[str]]] = None
) -> Tuple[List[Component], DirectedGraph]:
    """Return SCCs and the condensation DAG, one ``scc_<i>`` vertex per component."""

    comps = [list(comp) for comp in components] if components is not None else kosaraju_scc(graph)
    index = component_index(comps)
    dag = DirectedGraph()
    for idx in range(len(comps)):
        dag.ensure_vertex(f"scc_{idx}")
    seen = set()
    for src, dst in graph.edges():
        cu, cv = index[src], index[dst]
        if cu != cv and (cu, cv) not in seen:
            seen.add((cu, cv))
            dag.add_edge(f"scc_{cu}", f"scc_{cv}")
    return comps, dag
