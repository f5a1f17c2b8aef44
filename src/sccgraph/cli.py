"""sccgraph CLI: adjacency listings, finish orders, and Kosaraju components."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Sequence

from .config import TRAVERSAL_CHOICES, configure_logging
from .core.graph import DirectedGraph
from .core.invariants import assert_invariants
from .core.scc import KosarajuRun, run_kosaraju
from .io import components_payload, load_graph, write_json
from .samples import sample_graph

LOGGER = logging.getLogger(__name__)


def _load_graph_arg(path: Path | None) -> DirectedGraph:
    if path is None:
        return sample_graph()
    return load_graph(path)


def _format_components(components: Sequence[Sequence[str]]) -> List[str]:
    return [f"SCC #{idx}: [{', '.join(comp)}]" for idx, comp in enumerate(components, start=1)]


def _print_run(run: KosarajuRun) -> None:
    print("=== Original Graph (Adjacency) ===")
    print(run.graph)
    print("=== Reversed Graph (Adjacency) ===")
    print(run.reversed_graph)
    print("=== Finish Order on Reversed Graph (desc) ===")
    print(f"[{', '.join(run.finish_order)}]")
    print("=== Strongly Connected Components (Kosaraju) ===")
    for line in _format_components(run.components):
        print(line)


def command_demo(args: argparse.Namespace) -> None:
    run = run_kosaraju(sample_graph(), args.traversal)
    _print_run(run)


def command_show(args: argparse.Namespace) -> None:
    graph = _load_graph_arg(args.graph)
    if args.reverse:
        graph = graph.reverse()
    for line in graph.adjacency_lines():
        print(line)


def command_order(args: argparse.Namespace) -> None:
    graph = _load_graph_arg(args.graph)
    if args.reverse:
        graph = graph.reverse()
    order = graph.finish_order(args.traversal)
    print(f"[{', '.join(order)}]")


def command_scc(args: argparse.Namespace) -> None:
    graph = _load_graph_arg(args.graph)
    run = run_kosaraju(graph, args.traversal)
    if args.check:
        assert_invariants(graph, run.components)
        LOGGER.info("Invariant checks passed for %d component(s).", len(run.components))
    if args.verbose:
        _print_run(run)
    else:
        for line in _format_components(run.components):
            print(line)
    if args.json:
        out_path = write_json(components_payload(run), args.json)
        print(f"JSON report saved to {out_path}.")
    elif args.print_json:
        print(json.dumps(components_payload(run), indent=2))


def command_viz(args: argparse.Namespace) -> None:
    from .visualization import save_components_png

    graph = _load_graph_arg(args.graph)
    run = run_kosaraju(graph, args.traversal)
    save_components_png(graph, str(args.out), run.components, layout=args.layout, seed=args.seed)
    print(f"Component plot saved to {args.out}.")


def _add_graph_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--graph",
        type=Path,
        help="Graph file (.json/.yaml/.yml document or whitespace edge list). Defaults to the sample graph.",
    )


def _add_traversal_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--traversal",
        choices=TRAVERSAL_CHOICES,
        help="Depth-first traversal strategy (default: $SCCGRAPH_TRAVERSAL or iterative).",
    )


def build_parser() -> argparse.ArgumentParser:
    description = (
        "sccgraph CLI for strongly connected components.\n\n"
        "Components are computed with Kosaraju's algorithm: a finish-order DFS on the reversed graph, "
        "then a collecting DFS on the original graph in that order."
    )
    parser = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Logging level (default: $SCCGRAPH_LOG_LEVEL or WARNING).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Run the sample graph through every Kosaraju pass.")
    _add_traversal_arg(demo)
    demo.set_defaults(func=command_demo)

    show = subparsers.add_parser("show", help="Print a graph's adjacency lists.")
    _add_graph_args(show)
    show.add_argument("--reverse", action="store_true", help="Print the edge-reversed graph instead.")
    show.set_defaults(func=command_show)

    order = subparsers.add_parser("order", help="Print vertices in decreasing DFS finish time.")
    _add_graph_args(order)
    order.add_argument(
        "--reverse",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Traverse the reversed graph, as the first Kosaraju pass does (default: on).",
    )
    _add_traversal_arg(order)
    order.set_defaults(func=command_order)

    scc = subparsers.add_parser("scc", help="Compute strongly connected components.")
    _add_graph_args(scc)
    _add_traversal_arg(scc)
    scc.add_argument("--check", action="store_true", help="Verify partition and mutual reachability.")
    scc.add_argument("--verbose", action="store_true", help="Also print adjacency lists and the finish order.")
    scc.add_argument("--json", type=Path, help="Optional path to write a JSON report.")
    scc.add_argument("--print-json", action="store_true", help="Print the JSON report to stdout.")
    scc.set_defaults(func=command_scc)

    viz = subparsers.add_parser("viz", help="Render components as a PNG.")
    _add_graph_args(viz)
    _add_traversal_arg(viz)
    viz.add_argument("--out", type=Path, required=True, help="Output PNG path.")
    viz.add_argument(
        "--layout",
        default="spring",
        choices=["spring", "circular", "shell", "kamada-kawai", "spectral", "random"],
        help="Layout algorithm (default: spring).",
    )
    viz.add_argument("--seed", type=int, default=0, help="Layout seed (default: 0).")
    viz.set_defaults(func=command_viz)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        configure_logging(args.log_level)
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual invocation path
    main()
