"""Reachability and unweighted shortest paths."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from adjgraph._errors import NoPathExistsError

from ._traversal import bfs_edges, dfs_edges

if TYPE_CHECKING:
    from collections.abc import Hashable

    from adjgraph._graph import Graph

logger = logging.getLogger(__name__)


def has_path[V: Hashable](graph: Graph[V], source: V, target: V) -> bool:
    """Determine whether ``target`` can be reached from ``source``.

    ``source`` only counts as reaching itself through a cycle back to it.

    Raises:
        VertexNotFoundError: If either vertex is not in the graph.

    """
    graph.validate_vertex(source)
    graph.validate_vertex(target)

    return any(child == target for _, child in dfs_edges(graph, source))


def shortest_path[V: Hashable](graph: Graph[V], source: V, target: V) -> list[V]:
    """Compute a path with the fewest edges from ``source`` to ``target``.

    Args:
        graph: The graph to search.
        source: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        The vertices of the path, ``source`` first and ``target`` last, or an
        empty list when ``source == target``.

    Raises:
        VertexNotFoundError: If either vertex is not in the graph.
        NoPathExistsError: If ``target`` is not reachable from ``source``.

    """
    graph.validate_vertex(source)
    graph.validate_vertex(target)

    if source == target:
        return []

    previous: dict[V, V] = {}
    for node, neighbor in bfs_edges(graph, source):
        previous[neighbor] = node
        if neighbor == target:
            break

    if target not in previous:
        raise NoPathExistsError(source, target)

    path = [target]
    current = target
    while current != source:
        current = previous[current]
        path.append(current)
    path.reverse()

    logger.debug(f"Shortest path from {source!r} to {target!r} has {len(path) - 1} edges")
    return path


def descendants[V: Hashable](graph: Graph[V], vertex: V) -> frozenset[V]:
    """Get all vertices reachable from ``vertex``, excluding ``vertex`` itself.

    Raises:
        VertexNotFoundError: If ``vertex`` is not in the graph.

    """
    return frozenset(child for _, child in dfs_edges(graph, vertex))


def ancestors[V: Hashable](graph: Graph[V], vertex: V) -> frozenset[V]:
    """Get all vertices that can reach ``vertex``, excluding ``vertex`` itself.

    Raises:
        VertexNotFoundError: If ``vertex`` is not in the graph.

    """
    visited: set[V] = set()
    stack = graph.predecessors(vertex)
    while stack:
        current = stack.pop()
        if current not in visited:
            visited.add(current)
            stack.extend(graph.predecessors(current))
    visited.discard(vertex)
    return frozenset(visited)
