import random

import networkx as nx
import pytest

from sccgraph.core import scc
from sccgraph.core.graph import DirectedGraph
from sccgraph.core.invariants import InvalidFinishOrder, assert_invariants
from sccgraph.samples import sample_graph
from sccgraph.visualization import to_networkx


def solve(graph: DirectedGraph):
    order = graph.reverse().finish_order()
    return scc.SccSolver().compute(graph, order)


def test_sample_graph_components():
    comps = solve(sample_graph())
    assert comps == [["H"], ["F", "G"], ["D", "E"], ["A", "B", "C"]]
    assert {frozenset(c) for c in comps} == {
        frozenset("ABC"),
        frozenset("DE"),
        frozenset("FG"),
        frozenset("H"),
    }


def test_single_vertex_without_edges():
    graph = DirectedGraph()
    graph.ensure_vertex("A")
    assert solve(graph) == [["A"]]


def test_pure_cycle_is_one_component():
    graph = DirectedGraph.from_edges([("A", "B"), ("B", "C"), ("C", "A")])
    assert solve(graph) == [["A", "B", "C"]]


def test_self_loop_is_one_component():
    graph = DirectedGraph.from_edges([("A", "A")])
    assert solve(graph) == [["A"]]


def test_parallel_edges_do_not_duplicate_vertices():
    graph = DirectedGraph.from_edges([("A", "B"), ("A", "B")])
    comps = solve(graph)
    assert comps == [["B"], ["A"]]


def test_empty_graph_has_no_components():
    assert solve(DirectedGraph()) == []


@pytest.mark.parametrize(
    "order",
    [
        ["H", "F", "G", "D", "E", "A", "C"],
        ["H", "F", "G", "D", "E", "A", "C", "B", "B"],
        ["H", "F", "G", "D", "E", "A", "C", "Z"],
    ],
)
def test_compute_rejects_non_permutations(order):
    with pytest.raises(InvalidFinishOrder):
        scc.SccSolver().compute(sample_graph(), order)


def test_compute_leaves_inputs_untouched():
    graph = sample_graph()
    before = graph.adjacency_lines()
    order = graph.reverse().finish_order()
    snapshot = list(order)
    scc.SccSolver().compute(graph, order)
    assert order == snapshot
    assert graph.adjacency_lines() == before


def test_solver_is_reusable():
    solver = scc.SccSolver()
    graph = sample_graph()
    order = graph.reverse().finish_order()
    first = solver.compute(graph, order)
    second = solver.compute(graph, order)
    cycle = DirectedGraph.from_edges([("x", "y"), ("y", "x")])
    assert first == second
    assert solver.compute(cycle, cycle.reverse().finish_order()) == [["x", "y"]]


def test_run_kosaraju_keeps_intermediates():
    run = scc.run_kosaraju(sample_graph())
    assert run.reversed_graph.lookup("D").neighbor_names() == ["C", "E"]
    assert run.finish_order == ["H", "F", "G", "D", "E", "A", "C", "B"]
    assert run.components == scc.kosaraju_scc(sample_graph())


def test_run_kosaraju_checks_invariants_when_enabled(monkeypatch):
    calls = []
    monkeypatch.setenv("SCCGRAPH_CHECK_INVARIANTS", "1")
    monkeypatch.setattr(scc, "assert_invariants", lambda graph, comps: calls.append(len(comps)))
    scc.run_kosaraju(sample_graph())
    assert calls == [4]


def test_components_are_discovered_sinks_first():
    graph = sample_graph()
    comps = scc.kosaraju_scc(graph)
    index = scc.component_index(comps)
    for src, dst in graph.edges():
        if index[src] != index[dst]:
            assert index[src] > index[dst]


def test_condensation_dag_shape():
    comps, dag = scc.condensation_dag(sample_graph())
    assert len(comps) == 4
    assert dag.adjacency_lines() == [
        "scc_0 -> []",
        "scc_1 -> [scc_0]",
        "scc_2 -> [scc_1]",
        "scc_3 -> [scc_2]",
    ]


def test_condensation_dag_drops_duplicate_bridges():
    graph = DirectedGraph.from_edges([("a", "b"), ("a", "b"), ("b", "c"), ("c", "b"), ("a", "c")])
    comps, dag = scc.condensation_dag(graph)
    assert comps == [["b", "c"], ["a"]]
    assert list(dag.edges()) == [("scc_1", "scc_0")]


@pytest.mark.parametrize("seed", range(8))
def test_matches_networkx(seed):
    rng = random.Random(seed)
    graph = DirectedGraph()
    size = rng.randint(1, 30)
    for idx in range(size):
        graph.ensure_vertex(str(idx))
    for _ in range(rng.randint(0, size * 3)):
        graph.add_edge(str(rng.randrange(size)), str(rng.randrange(size)))

    comps = scc.kosaraju_scc(graph)
    expected = {frozenset(c) for c in nx.strongly_connected_components(to_networkx(graph))}
    assert {frozenset(c) for c in comps} == expected
    assert_invariants(graph, comps)
