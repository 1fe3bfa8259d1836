"""Tests for the landmark (ALT) heuristic."""

import pytest

from waypoint.core.exceptions import ValidationError
from waypoint.core.graph import Graph
from waypoint.core.search import LandmarkHeuristic, ShortestPaths, dijkstra
from waypoint.core.stores import MappingWeightStore
from waypoint.core.types import NO_VERTEX


def create_test_graph() -> Graph:
    """Create a small directed graph with a dead end."""
    return Graph(
        edges=[
            (1, 2, 4.0),
            (2, 3, 3.0),
            (3, 4, 2.0),
            (1, 5, 1.0),
            (5, 6, 1.0),
            (6, 4, 8.0),
            (4, 7, 1.0),
            (2, 8, 2.0),
        ]
    )


def test_landmark_distances():
    """Test that forward and backward distances are precomputed."""
    graph = create_test_graph()
    heuristic = LandmarkHeuristic(graph, 4, landmarks=[1])
    distances = heuristic.landmarks[1]
    assert distances.forward[4] == 9.0
    assert distances.forward[8] == 6.0
    assert distances.backward == {1: 0.0}


def test_heuristic_is_admissible():
    """Test that no estimate exceeds the true remaining distance."""
    graph = create_test_graph()
    heuristic = LandmarkHeuristic(graph, 4, landmarks=[1, 7, 8])
    true_remaining = dijkstra(graph.reversed(), 4).distances()

    for vertex in graph.vertices():
        estimate = heuristic(vertex)
        assert estimate >= 0.0
        if vertex in true_remaining:
            assert estimate <= true_remaining[vertex] + 1e-9
    assert heuristic(4) == 0.0


def test_selected_landmarks_are_reproducible():
    graph = create_test_graph()
    first = LandmarkHeuristic(graph, 4, num_landmarks=3, seed=7)
    second = LandmarkHeuristic(graph, 4, num_landmarks=3, seed=7)
    assert list(first.landmarks) == list(second.landmarks)
    assert len(first.landmarks) == 3


def test_more_landmarks_than_vertices():
    graph = Graph(edges=[(1, 2, 1.0)])
    heuristic = LandmarkHeuristic(graph, 2, num_landmarks=10, seed=1)
    assert set(heuristic.landmarks) <= {1, 2}


def test_search_with_landmarks_matches_dijkstra(grid_graph):
    """Test that the landmark heuristic keeps distances optimal."""
    heuristic = LandmarkHeuristic(grid_graph, 11, num_landmarks=4, seed=3)
    guided = ShortestPaths(grid_graph, MappingWeightStore(grid_graph), 1, 11, heuristic)
    guided.set_paths()

    assert guided.get_weight(11) == dijkstra(grid_graph, 1).get_weight(11) == 4.0
    path = guided.path_to()
    assert path[0] == 1 and path[-1] == 11
    assert len(path) == 5


def test_invalid_arguments():
    graph = create_test_graph()
    with pytest.raises(ValidationError):
        LandmarkHeuristic(graph, NO_VERTEX)
    with pytest.raises(ValidationError):
        LandmarkHeuristic(graph, 4, num_landmarks=0)
