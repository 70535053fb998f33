"""In-memory directed and undirected graphs with traversal and ordering algorithms."""

__all__ = [
    "DiGraph",
    "EdgeInfo",
    "EdgeNotFoundError",
    "Graph",
    "GraphChangedDuringIterationError",
    "GraphContainsCycleError",
    "GraphError",
    "NoPathExistsError",
    "UndirectedGraph",
    "UnsupportedOperationError",
    "VertexNotFoundError",
    "ancestors",
    "bfs_edges",
    "bfs_nodes",
    "descendants",
    "dfs_edges",
    "dfs_preorder_nodes",
    "edge_bfs",
    "has_path",
    "is_directed_acyclic_graph",
    "shortest_path",
    "to_directed",
    "to_undirected",
    "topological_generations",
    "topological_sort",
]

from ._algorithms import (
    ancestors,
    bfs_edges,
    bfs_nodes,
    descendants,
    dfs_edges,
    dfs_preorder_nodes,
    edge_bfs,
    has_path,
    is_directed_acyclic_graph,
    shortest_path,
    topological_generations,
    topological_sort,
)
from ._errors import (
    EdgeNotFoundError,
    GraphChangedDuringIterationError,
    GraphContainsCycleError,
    GraphError,
    NoPathExistsError,
    UnsupportedOperationError,
    VertexNotFoundError,
)
from ._graph import DiGraph, EdgeInfo, Graph, UndirectedGraph, to_directed, to_undirected
