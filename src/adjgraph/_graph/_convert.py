"""Conversions between directed and undirected graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._directed import DiGraph
from ._undirected import UndirectedGraph

if TYPE_CHECKING:
    from collections.abc import Hashable

    from ._base import Graph


def to_undirected[V: Hashable](graph: Graph[V]) -> UndirectedGraph[V]:
    """Return a new undirected graph with the vertices and edges of ``graph``.

    Reciprocal arcs ``(v, w)`` and ``(w, v)`` of a directed graph collapse
    into a single undirected edge.
    """
    undirected: UndirectedGraph[V] = UndirectedGraph()
    for v in graph.vertices():
        undirected.add_vertex(v)
    for v, w in graph.edges():
        undirected.add_edge(v, w)
    return undirected


def to_directed[V: Hashable](graph: Graph[V]) -> DiGraph[V]:
    """Return a new directed graph with the vertices and edges of ``graph``.

    Every edge of an undirected graph becomes a pair of opposite arcs.
    """
    directed: DiGraph[V] = DiGraph()
    for v in graph.vertices():
        directed.add_vertex(v)
    for v, w in graph.edges():
        directed.add_edge(v, w)
        if not graph.is_directed():
            directed.add_edge(w, v)
    return directed
