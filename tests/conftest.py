from collections.abc import Callable

import pytest

from adjgraph import DiGraph, Graph, UndirectedGraph


@pytest.fixture(params=[DiGraph, UndirectedGraph], ids=["directed", "undirected"])
def make_graph(request: pytest.FixtureRequest) -> Callable[..., Graph[int]]:
    """Graph class under test; every test using it runs for both kinds."""
    return request.param
