"""Walk the sample graph through each Kosaraju pass using the sccgraph API."""
from __future__ import annotations

from pathlib import Path

from sccgraph import SccSolver, sample_graph
from sccgraph.core.invariants import assert_invariants
from sccgraph.core.scc import condensation_dag
from sccgraph.io import load_graph

DATA = Path(__file__).resolve().parent / "data"


def main() -> None:
    graph = sample_graph()
    print("=== ORIGINAL ===")
    print(graph)

    reversed_graph = graph.reverse()
    print("=== REVERSED ===")
    print(reversed_graph)

    order = reversed_graph.finish_order()
    print(f"Finish order on reversed graph: {order}")

    components = SccSolver().compute(graph, order)
    assert_invariants(graph, components)
    for idx, comp in enumerate(components, start=1):
        print(f"SCC #{idx}: {comp}")

    _, dag = condensation_dag(graph, components)
    print("\n=== CONDENSATION ===")
    print(dag)

    edge_list = load_graph(DATA / "cycles.edges")
    print(f"cycles.edges: {len(edge_list)} vertices, {edge_list.edge_count()} edges")
    print(SccSolver().compute(edge_list, edge_list.reverse().finish_order()))


if __name__ == "__main__":
    main()
