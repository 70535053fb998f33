"""Undirected graph layered on a directed storage engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._base import Graph, canonical_edge
from ._directed import DiGraph

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

    from ._base import EdgeInfo


class UndirectedGraph[V: Hashable](Graph[V]):
    """An unweighted undirected graph without parallel edges or self-loops.

    Each edge ``{v, w}`` is stored as the two arcs ``(v, w)`` and ``(w, v)`` of
    a private :class:`DiGraph`, so in-degree and out-degree of a vertex are
    both its degree. :meth:`edges` reports every edge once, endpoints sorted.
    """

    def __init__(self, edges: Iterable[tuple[V, V]] | None = None) -> None:
        self._engine: DiGraph[V] = DiGraph()
        super().__init__(edges)

    def is_directed(self) -> bool:
        return False

    @property
    def adj(self) -> Mapping[V, EdgeInfo[V]]:
        return self._engine.adj

    @property
    def revision(self) -> int:
        return self._engine.revision

    def add_vertex(self, v: V) -> None:
        self._engine.add_vertex(v)

    def remove_vertex(self, v: V) -> None:
        self.validate_vertex(v)
        for w in self._engine.neighbors(v):
            self.remove_edge(v, w)
        self._engine.remove_vertex(v)

    def add_edge(self, v: V, w: V) -> None:
        self._engine.add_edge(v, w)
        self._engine.add_edge(w, v)

    def remove_edge(self, v: V, w: V) -> None:
        self.validate_edge(v, w)
        self._engine.remove_edge(v, w)
        self._engine.remove_edge(w, v)

    def has_edge(self, v: V, w: V) -> bool:
        return self._engine.has_edge(v, w)

    def has_vertex(self, v: V) -> bool:
        return self._engine.has_vertex(v)

    def neighbors(self, v: V) -> list[V]:
        return self._engine.neighbors(v)

    def predecessors(self, v: V) -> list[V]:
        return self._engine.predecessors(v)

    def in_degree(self, v: V) -> int:
        return self._engine.in_degree(v)

    def out_degree(self, v: V) -> int:
        return self._engine.out_degree(v)

    def degree(self, v: V) -> int:
        """Return the number of edges incident to ``v``."""
        return self._engine.out_degree(v)

    def vertices(self) -> list[V]:
        return self._engine.vertices()

    def edges(self) -> list[tuple[V, V]]:
        seen: set[frozenset[V]] = set()
        edges: list[tuple[V, V]] = []
        for v, w in self._engine.edges():
            key = frozenset((v, w))
            if key in seen:
                continue
            seen.add(key)
            edges.append(canonical_edge(v, w))
        return edges

    def number_of_nodes(self) -> int:
        return self._engine.number_of_nodes()
