"""Graph module providing the adjacency data structures.

This module contains:
- Graph[V]: The abstract contract every graph implements
- DiGraph[V]: A directed graph
- UndirectedGraph[V]: An undirected graph built on a DiGraph
- to_directed / to_undirected: Conversions between the two
"""

from ._base import EdgeInfo, Graph, canonical_edge
from ._convert import to_directed, to_undirected
from ._directed import DiGraph
from ._undirected import UndirectedGraph

__all__ = [
    "DiGraph",
    "EdgeInfo",
    "Graph",
    "UndirectedGraph",
    "canonical_edge",
    "to_directed",
    "to_undirected",
]
