"""Directed graph backed by an insertion-ordered adjacency mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ._base import EdgeInfo, Graph

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Adjacency[V]:
    """Mutable neighbor sets of one vertex.

    Dicts with ``None`` values are used as ordered sets so that neighbors are
    iterated in the order their edges were added.
    """

    outbound: dict[V, None] = field(default_factory=dict)
    inbound: dict[V, None] = field(default_factory=dict)


class DiGraph[V: Hashable](Graph[V]):
    """An unweighted directed graph without parallel edges or self-loops.

    Every vertex maps to its successors and predecessors, and the two books
    are kept consistent: ``w`` is a successor of ``v`` exactly when ``v`` is a
    predecessor of ``w``.

    Example:
        >>> graph = DiGraph([(1, 2), (1, 3), (2, 3)])
        >>> graph.neighbors(1)
        [2, 3]
        >>> graph.in_degree(3)
        2

    """

    def __init__(self, edges: Iterable[tuple[V, V]] | None = None) -> None:
        self._adj: dict[V, _Adjacency[V]] = {}
        self._revision = 0
        super().__init__(edges)

    def is_directed(self) -> bool:
        return True

    @property
    def adj(self) -> Mapping[V, EdgeInfo[V]]:
        return MappingProxyType(
            {v: EdgeInfo(tuple(a.outbound), tuple(a.inbound)) for v, a in self._adj.items()},
        )

    @property
    def revision(self) -> int:
        return self._revision

    def add_vertex(self, v: V) -> None:
        if v not in self._adj:
            self._adj[v] = _Adjacency()
            self._revision += 1

    def remove_vertex(self, v: V) -> None:
        self.validate_vertex(v)

        adjacency = self._adj[v]
        for w in list(adjacency.outbound):
            self.remove_edge(v, w)
        for u in list(adjacency.inbound):
            self.remove_edge(u, v)

        del self._adj[v]
        self._revision += 1
        logger.debug(f"Removed vertex {v!r}")

    def add_edge(self, v: V, w: V) -> None:
        self.add_vertex(v)
        self.add_vertex(w)

        if v == w or w in self._adj[v].outbound:
            return

        self._adj[v].outbound[w] = None
        self._adj[w].inbound[v] = None
        self._revision += 1

    def remove_edge(self, v: V, w: V) -> None:
        self.validate_edge(v, w)

        del self._adj[v].outbound[w]
        del self._adj[w].inbound[v]
        self._revision += 1

    def has_edge(self, v: V, w: V) -> bool:
        self.validate_vertex(v)
        self.validate_vertex(w)
        return w in self._adj[v].outbound and v in self._adj[w].inbound

    def has_vertex(self, v: V) -> bool:
        return v in self._adj

    def neighbors(self, v: V) -> list[V]:
        self.validate_vertex(v)
        return list(self._adj[v].outbound)

    def predecessors(self, v: V) -> list[V]:
        self.validate_vertex(v)
        return list(self._adj[v].inbound)

    def in_degree(self, v: V) -> int:
        self.validate_vertex(v)
        return len(self._adj[v].inbound)

    def out_degree(self, v: V) -> int:
        self.validate_vertex(v)
        return len(self._adj[v].outbound)

    def vertices(self) -> list[V]:
        return list(self._adj)

    def edges(self) -> list[tuple[V, V]]:
        return [(v, w) for v, adjacency in self._adj.items() for w in adjacency.outbound]

    def number_of_nodes(self) -> int:
        return len(self._adj)
