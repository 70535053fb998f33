"""Tests for reachability and shortest paths."""

from collections.abc import Callable

import pytest

from adjgraph import (
    DiGraph,
    Graph,
    NoPathExistsError,
    UndirectedGraph,
    VertexNotFoundError,
    ancestors,
    descendants,
    has_path,
    shortest_path,
)

MakeGraph = Callable[..., Graph[int]]

CYCLE_EDGES = [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 0)]


def brute_force_distance(graph: Graph[int], source: int, target: int) -> int | None:
    """Length of the shortest simple path, found by enumerating all of them."""
    best: int | None = None

    def walk(node: int, visited: list[int]) -> None:
        nonlocal best
        if node == target:
            length = len(visited) - 1
            best = length if best is None else min(best, length)
            return
        for neighbor in graph.neighbors(node):
            if neighbor not in visited:
                walk(neighbor, [*visited, neighbor])

    walk(source, [source])
    return best


class TestHasPath:
    def test_missing_vertex_raises(self, make_graph: MakeGraph) -> None:
        graph = make_graph()
        with pytest.raises(VertexNotFoundError):
            has_path(graph, 0, 1)

    def test_path_exists(self, make_graph: MakeGraph) -> None:
        graph = make_graph([(0, 1), (1, 2), (3, 4)])
        assert has_path(graph, 0, 2)

    def test_path_does_not_exist(self, make_graph: MakeGraph) -> None:
        graph = make_graph([(0, 1), (1, 2), (3, 4)])
        assert not has_path(graph, 0, 4)

    def test_respects_direction(self) -> None:
        graph = DiGraph([(0, 1), (1, 2)])
        assert not has_path(graph, 2, 0)
        assert has_path(UndirectedGraph([(0, 1), (1, 2)]), 2, 0)

    def test_source_is_not_special_cased(self) -> None:
        graph = DiGraph([(0, 1)])
        assert not has_path(graph, 0, 0)
        graph.add_edge(1, 0)
        assert has_path(graph, 0, 0)

    def test_removed_vertex_breaks_path(self, make_graph: MakeGraph) -> None:
        graph = make_graph([(0, 1), (0, 2)])
        graph.remove_vertex(0)
        assert not has_path(graph, 1, 2)


class TestShortestPath:
    def test_missing_vertex_raises(self, make_graph: MakeGraph) -> None:
        graph = make_graph()
        with pytest.raises(VertexNotFoundError):
            shortest_path(graph, 0, 1)
        graph.add_vertex(0)
        with pytest.raises(VertexNotFoundError):
            shortest_path(graph, 0, 1)

    def test_same_vertex_is_empty(self, make_graph: MakeGraph) -> None:
        graph = make_graph()
        graph.add_vertex(0)
        assert shortest_path(graph, 0, 0) == []

    def test_no_path_raises(self, make_graph: MakeGraph) -> None:
        graph = make_graph([(0, 1), (2, 3)])
        with pytest.raises(NoPathExistsError) as excinfo:
            shortest_path(graph, 0, 3)
        assert (excinfo.value.source, excinfo.value.target) == (0, 3)

    def test_directed_cycle(self) -> None:
        graph = DiGraph(CYCLE_EDGES)
        assert shortest_path(graph, 0, 3) == [0, 1, 2, 3]
        assert shortest_path(graph, 0, 4) == [0, 1, 2, 3, 4]

    def test_undirected_cycle_takes_shorter_side(self) -> None:
        graph = UndirectedGraph(CYCLE_EDGES)
        assert shortest_path(graph, 0, 3) == [0, 1, 2, 3]
        assert shortest_path(graph, 0, 4) == [0, 6, 5, 4]

    def test_path_follows_edges(self, make_graph: MakeGraph) -> None:
        graph = make_graph([(0, 1), (1, 2), (2, 3), (0, 4), (4, 3)])
        path = shortest_path(graph, 0, 3)
        assert path == [0, 4, 3]
        assert all(graph.has_edge(v, w) for v, w in zip(path, path[1:], strict=False))

    @pytest.mark.parametrize(
        "edges",
        [
            CYCLE_EDGES,
            [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (1, 4), (4, 5), (2, 5)],
            [(0, 1), (1, 2), (2, 0), (2, 3), (3, 1), (3, 4), (0, 4)],
        ],
    )
    def test_optimal_against_brute_force(self, make_graph: MakeGraph, edges: list[tuple[int, int]]) -> None:
        graph = make_graph(edges)
        for source in graph.vertices():
            for target in graph.vertices():
                if source == target:
                    continue
                expected = brute_force_distance(graph, source, target)
                if expected is None:
                    with pytest.raises(NoPathExistsError):
                        shortest_path(graph, source, target)
                else:
                    assert len(shortest_path(graph, source, target)) - 1 == expected


class TestReachableSets:
    def test_descendants(self) -> None:
        graph = DiGraph([(0, 1), (1, 2), (3, 1)])
        assert descendants(graph, 0) == frozenset({1, 2})
        assert descendants(graph, 2) == frozenset()

    def test_ancestors(self) -> None:
        graph = DiGraph([(0, 1), (1, 2), (3, 1)])
        assert ancestors(graph, 2) == frozenset({0, 1, 3})
        assert ancestors(graph, 0) == frozenset()

    def test_cycle_excludes_vertex_itself(self) -> None:
        graph = DiGraph([(0, 1), (1, 0)])
        assert ancestors(graph, 0) == frozenset({1})
        assert descendants(graph, 0) == frozenset({1})

    def test_undirected_component(self) -> None:
        graph = UndirectedGraph([(0, 1), (1, 2), (5, 6)])
        assert descendants(graph, 1) == ancestors(graph, 1) == frozenset({0, 2})

    def test_missing_vertex_raises(self) -> None:
        graph = DiGraph([(0, 1)])
        with pytest.raises(VertexNotFoundError):
            descendants(graph, 7)
        with pytest.raises(VertexNotFoundError):
            ancestors(graph, 7)
