"""Shared test fixtures."""

import pytest

from graphwalk.graph import Graph
from graphwalk.model import GraphKind


@pytest.fixture()
def undirected_graph() -> Graph:
    """Two components: {1, 2, 3, 4, 5} and {10, 11, 12, 13}."""
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(3, 4)
    g.add_edge(4, 5)

    g.add_edge(10, 11)
    g.add_edge(11, 12)
    g.add_edge(11, 13)
    return g


@pytest.fixture()
def weighted_graph() -> Graph:
    g = Graph(GraphKind.UNDIRECTED)
    g.add_weighted_edge(1, 2, 2)
    g.add_weighted_edge(1, 3, 6)
    g.add_weighted_edge(2, 3, 7)
    g.add_weighted_edge(2, 4, 3)
    g.add_weighted_edge(3, 4, 4)
    g.add_weighted_edge(4, 5, 9)
    g.add_weighted_edge(5, 6, 11)
    g.add_weighted_edge(5, 7, 4)
    g.add_weighted_edge(6, 7, 6)
    g.add_weighted_edge(6, 8, 5)
    g.add_weighted_edge(7, 8, 8)

    g.add_weighted_edge(10, 11, 1)
    return g


@pytest.fixture()
def directed_graph() -> Graph:
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    g.add_edge(3, 4)
    g.add_edge(4, 5)

    g.add_edge(10, 11)
    g.add_edge(11, 12)
    g.add_edge(11, 13)
    return g
