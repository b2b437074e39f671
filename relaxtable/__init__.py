"""Public package exports for :mod:`relaxtable`."""

from __future__ import annotations

from .compare import ComparisonRow, compare_with_reference
from .dijkstra import dijkstra_reference
from .engine import (
    EngineConfig,
    PathEntry,
    RelaxationEngine,
    RelaxationMetrics,
    RelaxationResult,
    compute_shortest_paths,
)
from .exceptions import (
    AlgorithmError,
    ConfigError,
    EmptyGraphError,
    GraphFormatError,
    InputError,
    NegativeWeightError,
    RelaxTableError,
    UnknownVertexError,
)
from .graph import Edge, Vertex, WeightedGraph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .samples import sample_graph
from .table import INF, DistanceTable, DistanceTableRow

__version__ = "0.1.0"

__all__ = [
    "WeightedGraph",
    "Edge",
    "Vertex",
    "DistanceTable",
    "DistanceTableRow",
    "INF",
    "RelaxationEngine",
    "RelaxationResult",
    "RelaxationMetrics",
    "PathEntry",
    "EngineConfig",
    "compute_shortest_paths",
    "reconstruct_path",
    "dijkstra_reference",
    "compare_with_reference",
    "ComparisonRow",
    "sample_graph",
    "read_graph",
    "write_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "RelaxTableError",
    "InputError",
    "NegativeWeightError",
    "GraphFormatError",
    "EmptyGraphError",
    "UnknownVertexError",
    "ConfigError",
    "AlgorithmError",
]
