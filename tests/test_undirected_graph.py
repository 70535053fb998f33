"""Tests for UndirectedGraph."""

from itertools import combinations

import pytest

from adjgraph import EdgeNotFoundError, UndirectedGraph

TREE_EDGES = [(0, 1), (0, 2), (0, 4), (2, 3), (4, 5), (4, 6), (6, 7)]


class Opaque:
    """A hashable vertex type without an ordering."""

    def __init__(self, key: int) -> None:
        self.key = key

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Opaque) and other.key == self.key

    def __hash__(self) -> int:
        return hash(self.key)


class TestUndirectedEdges:
    def test_is_not_directed(self) -> None:
        assert not UndirectedGraph().is_directed()

    def test_edge_is_symmetric(self) -> None:
        graph = UndirectedGraph([(0, 1)])
        assert graph.has_edge(0, 1)
        assert graph.has_edge(1, 0)

    def test_edges_reported_once_and_sorted(self) -> None:
        graph = UndirectedGraph([(1, 0), (2, 1)])
        assert sorted(graph.edges()) == [(0, 1), (1, 2)]
        assert graph.number_of_edges() == 2

    def test_reverse_insert_is_a_duplicate(self) -> None:
        graph = UndirectedGraph([(0, 1)])
        revision = graph.revision
        graph.add_edge(1, 0)
        assert graph.revision == revision
        assert graph.edges() == [(0, 1)]

    def test_remove_either_orientation(self) -> None:
        graph = UndirectedGraph([(0, 1), (1, 2)])
        graph.remove_edge(1, 0)
        assert not graph.has_edge(0, 1)
        assert not graph.has_edge(1, 0)
        assert graph.edges() == [(1, 2)]

    def test_remove_missing_edge_raises(self) -> None:
        graph = UndirectedGraph([(0, 1), (2, 3)])
        with pytest.raises(EdgeNotFoundError):
            graph.remove_edge(1, 2)

    def test_unorderable_vertices_are_deduplicated(self) -> None:
        a, b = Opaque(1), Opaque(2)
        graph = UndirectedGraph([(a, b)])
        assert graph.edges() == [(a, b)]

    def test_symmetry_holds_after_mutations(self) -> None:
        graph = UndirectedGraph(combinations(range(5), 2))
        graph.remove_edge(3, 1)
        graph.remove_vertex(4)
        graph.add_edge(4, 0)
        for v, w in combinations(graph.vertices(), 2):
            assert graph.has_edge(v, w) == graph.has_edge(w, v)


class TestUndirectedNeighbors:
    def test_complete_graph(self) -> None:
        graph = UndirectedGraph(combinations(range(5), 2))
        assert graph.neighbors(0) == [1, 2, 3, 4]
        assert graph.number_of_edges() == 10

    def test_tree_leaf_neighbors(self) -> None:
        graph = UndirectedGraph(TREE_EDGES)
        assert graph.number_of_nodes() == 8
        assert graph.neighbors(0) == [1, 2, 4]
        assert graph.neighbors(5) == [4]

    def test_predecessors_equal_neighbors(self) -> None:
        graph = UndirectedGraph(TREE_EDGES)
        for v in graph.vertices():
            assert set(graph.predecessors(v)) == set(graph.neighbors(v))


class TestUndirectedDegree:
    def test_in_degree_equals_out_degree(self) -> None:
        graph = UndirectedGraph(TREE_EDGES)
        for v in graph.vertices():
            assert graph.in_degree(v) == graph.out_degree(v) == graph.degree(v)

    def test_degree_sum_is_twice_edge_count(self) -> None:
        graph = UndirectedGraph(TREE_EDGES)
        assert sum(graph.degree(v) for v in graph.vertices()) == 2 * graph.number_of_edges()

    def test_remove_vertex_updates_neighbor_degrees(self) -> None:
        graph = UndirectedGraph(TREE_EDGES)
        graph.remove_vertex(4)
        assert graph.degree(0) == 2
        assert graph.degree(5) == 0
        assert graph.degree(6) == 1
