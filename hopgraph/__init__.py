"""Public package exports for :mod:`hopgraph`."""

from __future__ import annotations

from .algorithms import (
    INFINITY,
    DistanceMatrix,
    PathConfig,
    ShortestPathTree,
    all_pairs_distances,
    predecessor_array,
    single_source_paths,
)
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DuplicateElementError,
    EmptyQueueError,
    ErrorKind,
    GraphFormatError,
    HopGraphError,
    InputError,
    MissingVertexError,
    NegativePriorityError,
    QueueError,
    UnknownElementError,
)
from .graph import Graph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .priority_queue import IndexedPriorityQueue
from .stats import GraphStatistics, average_path_length, density, diameter, graph_statistics

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "IndexedPriorityQueue",
    "INFINITY",
    "PathConfig",
    "DistanceMatrix",
    "ShortestPathTree",
    "all_pairs_distances",
    "single_source_paths",
    "predecessor_array",
    "reconstruct_path",
    "GraphStatistics",
    "graph_statistics",
    "density",
    "diameter",
    "average_path_length",
    "read_graph",
    "write_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "ErrorKind",
    "HopGraphError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
    "MissingVertexError",
    "QueueError",
    "DuplicateElementError",
    "NegativePriorityError",
    "EmptyQueueError",
    "UnknownElementError",
]
