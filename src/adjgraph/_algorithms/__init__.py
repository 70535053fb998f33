"""Graph algorithms: traversal, paths and topological ordering."""

from ._dag import is_directed_acyclic_graph, topological_generations, topological_sort
from ._paths import ancestors, descendants, has_path, shortest_path
from ._traversal import bfs_edges, bfs_nodes, dfs_edges, dfs_preorder_nodes, edge_bfs

__all__ = [
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
    "topological_generations",
    "topological_sort",
]
