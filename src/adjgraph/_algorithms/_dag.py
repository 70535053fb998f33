"""Topological ordering of directed graphs (Kahn's algorithm)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from adjgraph._errors import (
    GraphChangedDuringIterationError,
    GraphContainsCycleError,
    UnsupportedOperationError,
)

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator

    from adjgraph._graph import Graph

logger = logging.getLogger(__name__)


def is_directed_acyclic_graph[V: Hashable](graph: Graph[V]) -> bool:
    """Determine whether ``graph`` is a directed acyclic graph.

    Undirected graphs are never DAGs. Errors other than a cycle propagate.
    """
    if not graph.is_directed():
        return False

    try:
        for _ in topological_generations(graph):
            pass
    except GraphContainsCycleError:
        return False
    return True


def topological_sort[V: Hashable](graph: Graph[V]) -> Iterator[V]:
    """Iterate over the vertices of ``graph`` in topological order.

    Every vertex comes before all vertices it has an edge to. Vertices are
    produced lazily; mutating the graph before the iterator is exhausted makes
    the next ``next()`` raise.

    Raises:
        UnsupportedOperationError: If the graph is undirected (raised at call time).
        GraphContainsCycleError: If the graph has a cycle (raised while iterating).
        GraphChangedDuringIterationError: If the graph is mutated while iterating.

    """
    generations = topological_generations(graph)
    return _flatten(graph, generations)


def _flatten[V: Hashable](graph: Graph[V], generations: Iterator[list[V]]) -> Iterator[V]:
    revision = graph.revision
    for generation in generations:
        for node in generation:
            yield node
            if graph.revision != revision:
                raise GraphChangedDuringIterationError


def topological_generations[V: Hashable](graph: Graph[V]) -> Iterator[list[V]]:
    """Iterate over the topological generations of ``graph``.

    A generation holds the vertices whose predecessors all belong to earlier
    generations. The first generation is every vertex with in-degree zero.
    Within a generation vertices appear in the order they became free.

    Args:
        graph: A directed graph.

    Returns:
        Iterator of generations, each a list of vertices.

    Raises:
        UnsupportedOperationError: If the graph is undirected (raised at call time).
        GraphContainsCycleError: If the graph has a cycle (raised while iterating).
        GraphChangedDuringIterationError: If the graph is mutated while iterating.

    """
    if not graph.is_directed():
        msg = "Topological ordering is not defined for undirected graphs"
        raise UnsupportedOperationError(msg)
    return _topological_generations(graph)


def _topological_generations[V: Hashable](graph: Graph[V]) -> Iterator[list[V]]:
    revision = graph.revision

    in_degree_map: dict[V, int] = {}
    zero_in_degree: list[V] = []
    for v in graph.vertices():
        degree = graph.in_degree(v)
        if degree > 0:
            in_degree_map[v] = degree
        else:
            zero_in_degree.append(v)

    while zero_in_degree:
        this_generation = zero_in_degree
        zero_in_degree = []

        for node in this_generation:
            if graph.revision != revision or not graph.has_vertex(node):
                logger.debug(f"Graph changed before vertex {node!r} was processed")
                raise GraphChangedDuringIterationError

            for child in graph.neighbors(node):
                if child not in in_degree_map:
                    logger.debug(f"Vertex {child!r} has no pending in-degree")
                    raise GraphChangedDuringIterationError
                in_degree_map[child] -= 1
                if in_degree_map[child] == 0:
                    zero_in_degree.append(child)
                    del in_degree_map[child]

        yield this_generation

    # A vertex removed mid-iteration can leave its counter behind; the revision
    # tells that apart from a cycle.
    if graph.revision != revision:
        raise GraphChangedDuringIterationError

    if in_degree_map:
        logger.debug(f"{len(in_degree_map)} vertices never reached in-degree zero")
        raise GraphContainsCycleError
