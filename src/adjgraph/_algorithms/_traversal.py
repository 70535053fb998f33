"""Lazy depth-first and breadth-first traversals.

Every traversal validates its source when called and returns an iterator that
computes one edge per ``next()``. The iterators work on any :class:`Graph`;
directed and undirected graphs differ only in what ``neighbors()`` returns.
"""

from __future__ import annotations

from collections import deque
from itertools import chain
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator

    from adjgraph._graph import Graph

# Parent of the source vertex on the DFS stack.
_ROOT = object()


def dfs_edges[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    """Iterate over the tree edges of a depth-first search from ``source``.

    Args:
        graph: The graph to traverse.
        source: Vertex to start from.

    Returns:
        Iterator of ``(parent, child)`` pairs, one per newly visited vertex.

    Raises:
        VertexNotFoundError: If ``source`` is not in the graph.

    """
    graph.validate_vertex(source)
    return _dfs_edges(graph, source)


def _dfs_edges[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    stack: list[tuple[object, V]] = [(_ROOT, source)]
    visited: set[V] = set()

    while stack:
        parent, child = stack.pop()
        # A vertex may be pushed from several parents; only the first pop counts.
        if child in visited:
            continue
        visited.add(child)

        if parent is not _ROOT:
            yield parent, child  # type: ignore[misc]

        stack.extend((child, neighbor) for neighbor in graph.neighbors(child) if neighbor not in visited)


def bfs_edges[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    """Iterate over the tree edges of a breadth-first search from ``source``.

    Stops once every vertex reachable from ``source`` has been visited.

    Args:
        graph: The graph to traverse.
        source: Vertex to start from.

    Returns:
        Iterator of ``(node, neighbor)`` pairs, one per discovered vertex.

    Raises:
        VertexNotFoundError: If ``source`` is not in the graph.

    """
    graph.validate_vertex(source)
    return _bfs_edges(graph, source)


def _bfs_edges[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    queue: deque[V] = deque([source])
    visited: set[V] = {source}

    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                yield node, neighbor
                queue.append(neighbor)
                visited.add(neighbor)


def edge_bfs[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    """Iterate over every edge reachable from ``source`` in breadth-first order.

    Unlike :func:`bfs_edges`, the visited set holds edges rather than vertices,
    so a vertex can be reached more than once but each edge is reported once.
    In a directed graph the arcs ``(u, v)`` and ``(v, u)`` are two edges; in an
    undirected graph they are the same edge.

    Raises:
        VertexNotFoundError: If ``source`` is not in the graph.

    """
    graph.validate_vertex(source)
    return _edge_bfs(graph, source)


def _edge_bfs[V: Hashable](graph: Graph[V], source: V) -> Iterator[tuple[V, V]]:
    directed = graph.is_directed()
    queue: deque[V] = deque([source])
    visited_edges: set[Hashable] = set()

    while queue:
        node = queue.popleft()
        for neighbor in graph.neighbors(node):
            edge = (node, neighbor) if directed else frozenset((node, neighbor))
            if edge not in visited_edges:
                yield node, neighbor
                queue.append(neighbor)
                visited_edges.add(edge)


def dfs_preorder_nodes[V: Hashable](graph: Graph[V], source: V) -> Iterator[V]:
    """Iterate over the vertices reachable from ``source`` in depth-first preorder."""
    edges = dfs_edges(graph, source)
    return chain([source], (child for _, child in edges))


def bfs_nodes[V: Hashable](graph: Graph[V], source: V) -> Iterator[V]:
    """Iterate over the vertices reachable from ``source`` in breadth-first order."""
    edges = bfs_edges(graph, source)
    return chain([source], (child for _, child in edges))
