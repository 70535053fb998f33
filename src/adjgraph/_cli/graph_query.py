"""Functions behind the CLI commands.

These build graphs from command-line edge tokens and query them. No I/O and no
Rich rendering happens here.
"""

from dataclasses import dataclass

from adjgraph._algorithms import bfs_edges, dfs_edges, edge_bfs
from adjgraph._graph import DiGraph, Graph, UndirectedGraph

from .config import GraphKind, TraversalMethod


class EdgeTokenError(ValueError):
    """Raised when a command-line edge token cannot be parsed."""


@dataclass(frozen=True, slots=True)
class VertexSummary:
    """Degree information about one vertex."""

    vertex: str
    in_degree: int
    out_degree: int


def parse_edge_token(token: str) -> tuple[str, str] | str:
    """Parse ``SOURCE:TARGET`` into an edge, or a bare ``VERTEX`` into a vertex.

    Raises:
        EdgeTokenError: If the token has empty parts or more than one ':'.

    """
    parts = token.split(":")
    if any(not part for part in parts) or len(parts) > 2:  # noqa: PLR2004
        msg = f"Invalid edge '{token}'. Expected 'SOURCE:TARGET' or 'VERTEX'"
        raise EdgeTokenError(msg)
    if len(parts) == 1:
        return parts[0]
    return parts[0], parts[1]


def build_graph(tokens: list[str], kind: GraphKind) -> Graph[str]:
    """Build a graph of string vertices from edge tokens, in token order."""
    graph: Graph[str] = DiGraph() if kind is GraphKind.DIRECTED else UndirectedGraph()
    for token in tokens:
        parsed = parse_edge_token(token)
        if isinstance(parsed, str):
            graph.add_vertex(parsed)
        else:
            graph.add_edge(*parsed)
    return graph


def summarize_vertices(graph: Graph[str]) -> list[VertexSummary]:
    """Summarize the degrees of every vertex, in insertion order."""
    return [
        VertexSummary(vertex=v, in_degree=graph.in_degree(v), out_degree=graph.out_degree(v))
        for v in graph.vertices()
    ]


def traverse(graph: Graph[str], source: str, method: TraversalMethod) -> list[tuple[str, str]]:
    """Run a traversal to completion and return its edges in order."""
    match method:
        case TraversalMethod.DFS:
            return list(dfs_edges(graph, source))
        case TraversalMethod.BFS:
            return list(bfs_edges(graph, source))
        case TraversalMethod.EDGE_BFS:
            return list(edge_bfs(graph, source))
