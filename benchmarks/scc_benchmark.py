"""Timing benchmarks for the Kosaraju passes on random graphs."""
from __future__ import annotations

import argparse
import json
import random
import statistics
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from sccgraph.core.graph import DirectedGraph  # noqa: E402
from sccgraph.core.scc import SccSolver  # noqa: E402

SCHEMA_KIND = "bench_result"
SCHEMA_VERSION = "1.0"
DEFAULT_SEED = 1337


def random_graph(vertices: int, edges: int, seed: int) -> DirectedGraph:
    rng = random.Random(seed)
    graph = DirectedGraph()
    for idx in range(vertices):
        graph.ensure_vertex(f"v{idx}")
    for _ in range(edges):
        graph.add_edge(f"v{rng.randrange(vertices)}", f"v{rng.randrange(vertices)}")
    return graph


def _time(fn: Callable[[], Any], repeat: int) -> Dict[str, float]:
    samples: List[float] = []
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        samples.append(time.perf_counter() - start)
    return {
        "mean_s": statistics.fmean(samples),
        "min_s": min(samples),
        "max_s": max(samples),
    }


def run_case(vertices: int, edges: int, strategy: str, repeat: int, seed: int) -> Dict[str, Any]:
    graph = random_graph(vertices, edges, seed)
    reversed_graph = graph.reverse()
    order = reversed_graph.finish_order(strategy)
    solver = SccSolver(strategy)
    return {
        "vertices": vertices,
        "edges": edges,
        "strategy": strategy,
        "components": len(solver.compute(graph, order)),
        "reverse": _time(graph.reverse, repeat),
        "finish_order": _time(lambda: reversed_graph.finish_order(strategy), repeat),
        "compute": _time(lambda: solver.compute(graph, order), repeat),
    }


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", type=int, nargs="+", default=[1000, 10000, 50000])
    parser.add_argument("--density", type=float, default=2.0, help="Edges per vertex (default: 2.0).")
    parser.add_argument("--strategy", choices=["iterative", "recursive"], default="iterative")
    parser.add_argument("--repeat", type=int, default=3)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--out", type=Path, help="Optional JSON output path.")
    args = parser.parse_args(argv)

    if args.strategy == "recursive":
        sys.setrecursionlimit(max(sys.getrecursionlimit(), max(args.sizes) * 2 + 100))

    cases = []
    for size in args.sizes:
        case = run_case(size, int(size * args.density), args.strategy, args.repeat, args.seed)
        cases.append(case)
        print(
            f"n={case['vertices']:>7} m={case['edges']:>7} sccs={case['components']:>7} "
            f"reverse={case['reverse']['mean_s']:.4f}s finish={case['finish_order']['mean_s']:.4f}s "
            f"compute={case['compute']['mean_s']:.4f}s"
        )

    payload = {
        "kind": SCHEMA_KIND,
        "schema_version": SCHEMA_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python": sys.version.split()[0],
        "seed": args.seed,
        "cases": cases,
    }
    if args.out:
        args.out.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        print(f"Benchmark results written to {args.out}")


if __name__ == "__main__":
    main()
