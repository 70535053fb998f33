"""Errors raised by graph operations and algorithms."""

from typing import Any


class GraphError(Exception):
    """Base class for all adjgraph errors."""


class VertexNotFoundError(GraphError, LookupError):
    """Raised when an operation references a vertex absent from the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not exist")


class EdgeNotFoundError(GraphError, LookupError):
    """Raised when an operation references an edge absent from the graph."""

    def __init__(self, source: Any, target: Any) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge ({source!r}, {target!r}) does not exist")


class GraphChangedDuringIterationError(GraphError, RuntimeError):
    """Raised when a lazy traversal observes that the graph was mutated."""

    def __init__(self) -> None:
        super().__init__("Graph changed during iteration")


class GraphContainsCycleError(GraphError):
    """Raised when a topological ordering cannot complete because of a cycle."""

    def __init__(self) -> None:
        super().__init__("Graph contains a cycle")


class NoPathExistsError(GraphError):
    """Raised when no path connects two vertices."""

    def __init__(self, source: Any, target: Any) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No path exists from {source!r} to {target!r}")


class UnsupportedOperationError(GraphError):
    """Raised when an operation is undefined for the kind of graph it is called on."""
