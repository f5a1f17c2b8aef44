"""
Graph document helpers (JSON/YAML/edge-list text -> DirectedGraph).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .core.graph import DirectedGraph
from .core.scc import KosarajuRun

LOGGER = logging.getLogger(__name__)

GRAPH_KIND = "sccgraph.graph.v1"
RESULT_KIND = "sccgraph.components.v1"


class GraphFormatError(ValueError):
    """Raised when a graph document cannot be parsed."""


def _name(value: Any, where: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise GraphFormatError(f"{where}: vertex names must be strings, got {value!r}.")
    name = str(value).strip()
    if not name:
        raise GraphFormatError(f"{where}: vertex names must be non-empty.")
    return name


def graph_from_payload(data: Any) -> DirectedGraph:
    """Build a graph from a ``{"vertices": [...], "edges": [[from, to], ...]}`` mapping."""

    if not isinstance(data, Mapping):
        raise GraphFormatError("Graph document must be a mapping with 'vertices' and/or 'edges'.")
    vertices = data.get("vertices") or []
    edges = data.get("edges") or []
    if not isinstance(vertices, list):
        raise GraphFormatError("'vertices' must be a list of names.")
    if not isinstance(edges, list):
        raise GraphFormatError("'edges' must be a list of [from, to] pairs.")
    graph = DirectedGraph()
    for idx, value in enumerate(vertices):
        graph.ensure_vertex(_name(value, f"vertices[{idx}]"))
    for idx, pair in enumerate(edges):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise GraphFormatError(f"edges[{idx}]: expected a [from, to] pair, got {pair!r}.")
        graph.add_edge(_name(pair[0], f"edges[{idx}]"), _name(pair[1], f"edges[{idx}]"))
    return graph


def graph_to_payload(graph: DirectedGraph, name: Optional[str] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"kind": GRAPH_KIND}
    if name:
        payload["name"] = name
    payload["vertices"] = graph.names()
    payload["edges"] = [[src, dst] for src, dst in graph.edges()]
    return payload


def parse_edge_list(text: str) -> DirectedGraph:
    """
    Parse whitespace separated ``from to`` lines.

    A line with one token declares an isolated vertex; ``#`` starts a comment.
    """

    graph = DirectedGraph()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = line.split()
        if len(tokens) == 1:
            graph.ensure_vertex(tokens[0])
        elif len(tokens) == 2:
            graph.add_edge(tokens[0], tokens[1])
        else:
            raise GraphFormatError(f"line {lineno}: expected 'from to' or a single vertex, got {raw.strip()!r}.")
    return graph


def load_graph(path: Union[str, Path]) -> DirectedGraph:
    graph_path = Path(path)
    if not graph_path.exists():
        raise GraphFormatError(f"Graph file '{graph_path}' not found.")
    text = graph_path.read_text(encoding="utf-8")
    suffix = graph_path.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise GraphFormatError(f"{graph_path}: invalid JSON ({exc}).") from exc
        graph = graph_from_payload(data)
    elif suffix in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise GraphFormatError(f"{graph_path}: invalid YAML ({exc}).") from exc
        graph = graph_from_payload(data)
    else:
        graph = parse_edge_list(text)
    LOGGER.debug("load_graph path=%s vertices=%d edges=%d", graph_path, len(graph), graph.edge_count())
    return graph


def components_payload(run: KosarajuRun) -> Dict[str, Any]:
    """JSON-ready record of every Kosaraju pass."""

    components: List[List[str]] = [list(comp) for comp in run.components]
    return {
        "kind": RESULT_KIND,
        "graph": graph_to_payload(run.graph),
        "reversed_adjacency": run.reversed_graph.adjacency_lines(),
        "finish_order": list(run.finish_order),
        "components": components,
        "component_count": len(components),
    }


def write_json(payload: Mapping[str, Any], path: Union[str, Path]) -> Path:
    out_path = Path(path)
    if out_path.parent and not out_path.parent.exists():
        out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return out_path
