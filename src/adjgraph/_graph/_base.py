"""Abstract graph contract shared by the directed and undirected graphs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from adjgraph._errors import EdgeNotFoundError, VertexNotFoundError

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class EdgeInfo[V]:
    """Read-only snapshot of a vertex's neighbors.

    Attributes:
        outbound: Successors, in the order their edges were added.
        inbound: Predecessors, in the order their edges were added.

    """

    outbound: tuple[V, ...]
    inbound: tuple[V, ...]


def canonical_edge[V: Hashable](v: V, w: V) -> tuple[V, V]:
    """Order the endpoints of an undirected edge so that smaller comes first.

    Vertices that do not support ``<`` keep the orientation they were given.
    """
    try:
        swap = bool(w < v)  # type: ignore[operator]
    except TypeError:
        swap = False
    return (w, v) if swap else (v, w)


class Graph[V: Hashable](ABC):
    """A graph without parallel edges or self-loops.

    Vertices may be any hashable value; two vertices are the same vertex when
    they compare equal. Subclasses own the adjacency storage and implement the
    abstract operations; everything defined here is composed from them.
    """

    def __init__(self, edges: Iterable[tuple[V, V]] | None = None) -> None:
        if edges is not None:
            self.from_edge_list(edges)

    @abstractmethod
    def is_directed(self) -> bool:
        """Return True if the graph is directed."""

    @property
    @abstractmethod
    def adj(self) -> Mapping[V, EdgeInfo[V]]:
        """Read-only snapshot of the adjacency mapping."""

    @property
    @abstractmethod
    def revision(self) -> int:
        """Counter incremented by every operation that changes the graph."""

    @abstractmethod
    def add_vertex(self, v: V) -> None:
        """Add ``v`` to the graph if it is not already present."""

    @abstractmethod
    def remove_vertex(self, v: V) -> None:
        """Remove ``v`` and every edge incident to it.

        Raises:
            VertexNotFoundError: If ``v`` is not in the graph.

        """

    @abstractmethod
    def add_edge(self, v: V, w: V) -> None:
        """Add the edge ``(v, w)``, inserting missing endpoints.

        A self-loop is never recorded and an existing edge is left as is.
        """

    @abstractmethod
    def remove_edge(self, v: V, w: V) -> None:
        """Remove the edge ``(v, w)``.

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph.
            EdgeNotFoundError: If both endpoints exist but the edge does not.

        """

    @abstractmethod
    def has_edge(self, v: V, w: V) -> bool:
        """Return True if the edge ``(v, w)`` exists.

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph.

        """

    @abstractmethod
    def has_vertex(self, v: V) -> bool:
        """Return True if ``v`` is in the graph."""

    @abstractmethod
    def neighbors(self, v: V) -> list[V]:
        """Return the outbound neighbors of ``v``."""

    @abstractmethod
    def predecessors(self, v: V) -> list[V]:
        """Return the inbound neighbors of ``v``."""

    @abstractmethod
    def in_degree(self, v: V) -> int:
        """Return the number of edges entering ``v``."""

    @abstractmethod
    def out_degree(self, v: V) -> int:
        """Return the number of edges leaving ``v``."""

    @abstractmethod
    def vertices(self) -> list[V]:
        """Return all vertices in insertion order."""

    @abstractmethod
    def edges(self) -> list[tuple[V, V]]:
        """Return all edges, each reported once."""

    @abstractmethod
    def number_of_nodes(self) -> int:
        """Return the number of vertices."""

    def number_of_edges(self) -> int:
        """Return the number of edges as reported by :meth:`edges`."""
        return len(self.edges())

    def from_edge_list(self, edges: Iterable[tuple[V, V]]) -> None:
        """Add every ``(v, w)`` pair in ``edges``."""
        for v, w in edges:
            self.add_edge(v, w)

    def add_path(self, path: Sequence[V]) -> None:
        """Add an edge between each pair of consecutive vertices in ``path``."""
        for v, w in zip(path, path[1:], strict=False):
            self.add_edge(v, w)

    def validate_vertex(self, v: V) -> None:
        """Raise VertexNotFoundError unless ``v`` is in the graph."""
        if not self.has_vertex(v):
            raise VertexNotFoundError(v)

    def validate_edge(self, v: V, w: V) -> None:
        """Raise unless the edge ``(v, w)`` is in the graph."""
        if not self.has_edge(v, w):
            raise EdgeNotFoundError(v, w)

    def __len__(self) -> int:
        return self.number_of_nodes()

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        adjacency = {v: self.neighbors(v) for v in self.vertices()}
        return f"{type(self).__name__}({adjacency!r})"
