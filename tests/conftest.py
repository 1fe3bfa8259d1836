"""Shared test fixtures."""

import pytest

from waypoint.core.graph import Graph
from waypoint.core.stores import MappingWeightStore


@pytest.fixture
def line_graph() -> Graph:
    """
    Fixture providing a three-vertex line and a disconnected vertex:
    1 -> 2 -> 3    4
    """
    return Graph(edges=[(1, 2, 1.0), (2, 3, 1.0)], vertices=[4])


@pytest.fixture
def weighted_graph() -> Graph:
    """
    Fixture providing a graph where the direct edge is not the shortest path:

    1 --7--> 2 --1--> 5
    |        ^        ^
    2        1        |
    v        |        |
    3 --3--> 4 --6----+
    """
    return Graph(
        edges=[
            (1, 2, 7.0),
            (1, 3, 2.0),
            (3, 4, 3.0),
            (4, 2, 1.0),
            (2, 5, 1.0),
            (4, 5, 6.0),
        ]
    )


@pytest.fixture
def tie_graph() -> Graph:
    """
    Fixture providing two equal-weight paths from 1 to 4:
    1 -> 2 -> 4 and 1 -> 3 -> 4, all edges of weight 1.
    """
    return Graph(edges=[(1, 3, 1.0), (1, 2, 1.0), (3, 4, 1.0), (2, 4, 1.0)])


@pytest.fixture
def grid_graph() -> Graph:
    """
    Fixture providing a 4x4 grid with unit edges in all four directions.

    Vertex ids are ``row * 4 + col + 1``.
    """
    side = 4
    edges = []
    for row in range(side):
        for col in range(side):
            vertex = row * side + col + 1
            if col + 1 < side:
                edges.append((vertex, vertex + 1, 1.0))
                edges.append((vertex + 1, vertex, 1.0))
            if row + 1 < side:
                edges.append((vertex, vertex + side, 1.0))
                edges.append((vertex + side, vertex, 1.0))
    return Graph(edges=edges)


@pytest.fixture
def grid_coords():
    """Coordinates of the ``grid_graph`` vertices."""
    side = 4
    return {row * side + col + 1: (row, col) for row in range(side) for col in range(side)}


@pytest.fixture
def line_store(line_graph) -> MappingWeightStore:
    return MappingWeightStore(line_graph)
