import random

import pytest

from sccgraph.config import resolve_traversal
from sccgraph.core import traversal
from sccgraph.core.graph import DirectedGraph
from sccgraph.core.scc import kosaraju_scc
from sccgraph.samples import sample_graph


def random_graph(seed: int, vertices: int = 40, edges: int = 90) -> DirectedGraph:
    rng = random.Random(seed)
    graph = DirectedGraph()
    for idx in range(vertices):
        graph.ensure_vertex(f"v{idx}")
    for _ in range(edges):
        graph.add_edge(f"v{rng.randrange(vertices)}", f"v{rng.randrange(vertices)}")
    return graph


@pytest.mark.parametrize("seed", [0, 1, 2, 7, 42])
def test_strategies_agree(seed):
    graph = random_graph(seed)
    assert graph.finish_order("iterative") == graph.finish_order("recursive")
    assert kosaraju_scc(graph, "iterative") == kosaraju_scc(graph, "recursive")


def test_strategies_agree_on_sample():
    graph = sample_graph().reverse()
    assert graph.finish_order(traversal.ITERATIVE) == graph.finish_order(traversal.RECURSIVE)


def test_iterative_handles_long_chains():
    graph = DirectedGraph()
    size = 5000
    for idx in range(size - 1):
        graph.add_edge(f"n{idx}", f"n{idx + 1}")
    order = graph.finish_order("iterative")
    assert order == [f"n{idx}" for idx in range(size)]
    assert len(kosaraju_scc(graph, "iterative")) == size


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        sample_graph().finish_order("breadth-first")


def test_env_selects_strategy(monkeypatch):
    monkeypatch.setenv("SCCGRAPH_TRAVERSAL", "recursive")
    assert resolve_traversal() == "recursive"
    assert resolve_traversal("iterative") == "iterative"


@pytest.mark.parametrize("strategy", [traversal.ITERATIVE, traversal.RECURSIVE])
def test_preorder_skips_parallel_repeats(strategy):
    graph = DirectedGraph.from_edges([("A", "B"), ("A", "B"), ("B", "C"), ("C", "A")])
    visited = set()
    assert traversal.preorder(graph.lookup("A"), visited, strategy) == ["A", "B", "C"]
    assert visited == {"A", "B", "C"}
    assert traversal.preorder(graph.lookup("B"), visited, strategy) == []


@pytest.mark.parametrize("strategy", [traversal.ITERATIVE, traversal.RECURSIVE])
def test_postorder_records_on_finish(strategy):
    graph = DirectedGraph.from_edges([("A", "B"), ("A", "C"), ("B", "D")])
    visited = set()
    assert list(traversal.postorder(graph.all_vertices(), visited, strategy)) == ["D", "B", "C", "A"]
