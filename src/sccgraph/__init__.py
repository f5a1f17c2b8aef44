"""sccgraph: strongly connected components via Kosaraju's two-pass DFS."""

from importlib import metadata

from . import core, samples
from .core.graph import DirectedGraph, Vertex
from .core.invariants import (
    InvalidFinishOrder,
    InvariantViolation,
    PartitionViolation,
    ReachabilityViolation,
)
from .core.scc import KosarajuRun, SccSolver, condensation_dag, kosaraju_scc, run_kosaraju
from .samples import sample_graph

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("sccgraph")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "core",
    "samples",
    "Vertex",
    "DirectedGraph",
    "SccSolver",
    "KosarajuRun",
    "run_kosaraju",
    "kosaraju_scc",
    "condensation_dag",
    "InvariantViolation",
    "InvalidFinishOrder",
    "PartitionViolation",
    "ReachabilityViolation",
    "sample_graph",
    "__version__",
]
