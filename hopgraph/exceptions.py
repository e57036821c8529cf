"""Custom exception types used across :mod:`hopgraph`."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable classification carried by every package error."""

    GENERIC = "generic"
    INPUT = "input"
    GRAPH_FORMAT = "graph_format"
    CONFIG = "config"
    ALGORITHM = "algorithm"
    MISSING_VERTEX = "missing_vertex"
    DUPLICATE_ELEMENT = "duplicate_element"
    NEGATIVE_PRIORITY = "negative_priority"
    EMPTY_QUEUE = "empty_queue"
    UNKNOWN_ELEMENT = "unknown_element"


class HopGraphError(Exception):
    """Base class for all package-specific errors."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message.
        return str(self.args[0]) if self.args else self.__class__.__name__


class InputError(HopGraphError, ValueError):
    """Raised for invalid user input such as malformed edges."""

    kind = ErrorKind.INPUT


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""

    kind = ErrorKind.GRAPH_FORMAT


class ConfigError(HopGraphError, ValueError):
    """Raised for invalid configuration options."""

    kind = ErrorKind.CONFIG


class AlgorithmError(HopGraphError, RuntimeError):
    """Raised when algorithm or data-structure invariants are violated at runtime."""

    kind = ErrorKind.ALGORITHM


class MissingVertexError(InputError, KeyError):
    """Raised when an operation names a vertex that is not in the graph."""

    kind = ErrorKind.MISSING_VERTEX

    def __init__(self, vertex: object, operation: str = "") -> None:
        self.vertex = vertex
        where = f" in {operation}" if operation else ""
        super().__init__(f"vertex {vertex!r} is not in the graph{where}")


class QueueError(HopGraphError):
    """Base class for priority queue precondition violations."""


class DuplicateElementError(QueueError, ValueError):
    """Raised when pushing an element that is already queued."""

    kind = ErrorKind.DUPLICATE_ELEMENT


class NegativePriorityError(QueueError, ValueError):
    """Raised when a priority below zero is supplied."""

    kind = ErrorKind.NEGATIVE_PRIORITY


class EmptyQueueError(QueueError, IndexError):
    """Raised when reading from or popping an empty queue."""

    kind = ErrorKind.EMPTY_QUEUE


class UnknownElementError(QueueError, KeyError):
    """Raised when an element is not present in the queue."""

    kind = ErrorKind.UNKNOWN_ELEMENT


__all__ = [
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
