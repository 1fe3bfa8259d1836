"""Tests for A* heuristics."""

import math

import pytest

from waypoint.core.exceptions import ValidationError
from waypoint.core.search import ShortestPaths, coordinate_heuristic, table_heuristic
from waypoint.core.search.heuristics import euclidean, manhattan, zero_heuristic
from waypoint.core.stores import MappingWeightStore


def test_zero_heuristic():
    assert zero_heuristic(1) == 0.0
    assert zero_heuristic("anything") == 0.0


def test_table_heuristic():
    heuristic = table_heuristic({1: 4.0, 2: 1.5}, default=0.5)
    assert heuristic(1) == 4.0
    assert heuristic(2) == 1.5
    assert heuristic(3) == 0.5


def test_metrics():
    assert manhattan((0, 0), (3, 4)) == 7
    assert euclidean((0, 0), (3, 4)) == 5.0


def test_coordinate_heuristic(grid_coords):
    heuristic = coordinate_heuristic(grid_coords, 16, metric="manhattan")
    assert heuristic(1) == 6
    assert heuristic(16) == 0
    # Vertices without coordinates get no estimate
    assert heuristic(99) == 0.0


def test_coordinate_heuristic_scale(grid_coords):
    heuristic = coordinate_heuristic(grid_coords, 16, metric="euclidean", scale=0.5)
    assert heuristic(1) == pytest.approx(0.5 * math.sqrt(18))


def test_coordinate_heuristic_rejects_bad_input(grid_coords):
    with pytest.raises(ValidationError):
        coordinate_heuristic(grid_coords, 16, metric="chebyshev")
    with pytest.raises(ValidationError):
        coordinate_heuristic(grid_coords, 16, scale=-1.0)
    with pytest.raises(ValidationError):
        coordinate_heuristic(grid_coords, 42)


def test_grid_astar_matches_dijkstra(grid_graph, grid_coords):
    """Test that the Manhattan heuristic finds an optimal path with less work."""
    plain = ShortestPaths(grid_graph, MappingWeightStore(grid_graph), 1, 4)
    plain.set_paths()

    guided = ShortestPaths(
        grid_graph,
        MappingWeightStore(grid_graph),
        1,
        4,
        heuristic=coordinate_heuristic(grid_coords, 4, metric="manhattan"),
    )
    guided.set_paths()

    assert guided.get_weight(4) == plain.get_weight(4) == 3.0
    assert guided.path_to() == [1, 2, 3, 4]
    assert guided.metrics.vertices_finalized < plain.metrics.vertices_finalized
