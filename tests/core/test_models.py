"""Tests for path results and search metrics."""

import pytest

from waypoint.core.models import PathResult, PathValidationError, SearchMetrics


def test_path_result_properties():
    result = PathResult(vertices=[1, 3, 4], total_weight=5.0)
    assert result.source == 1
    assert result.target == 4
    assert len(result) == 2
    assert list(result) == [1, 3, 4]
    assert result[1] == 3


def test_single_vertex_path():
    result = PathResult(vertices=[7], total_weight=0.0)
    assert len(result) == 0
    assert result.source == result.target == 7


def test_path_result_type_checks():
    with pytest.raises(TypeError):
        PathResult(vertices=(1, 2), total_weight=1.0)
    with pytest.raises(TypeError):
        PathResult(vertices=[1, 2], total_weight="1.0")


def test_validate_accepts_consistent_path(weighted_graph):
    PathResult(vertices=[1, 3, 4, 2], total_weight=6.0).validate(weighted_graph)


def test_validate_missing_edge(weighted_graph):
    with pytest.raises(PathValidationError, match="not found"):
        PathResult(vertices=[1, 4], total_weight=5.0).validate(weighted_graph)


def test_validate_weight_mismatch(weighted_graph):
    with pytest.raises(PathValidationError, match="Weight mismatch"):
        PathResult(vertices=[1, 3], total_weight=3.0).validate(weighted_graph)


def test_validate_empty_path(weighted_graph):
    with pytest.raises(PathValidationError):
        PathResult(vertices=[], total_weight=0.0).validate(weighted_graph)


def test_validate_epsilon(weighted_graph):
    result = PathResult(vertices=[1, 3], total_weight=2.0 + 1e-7)
    result.validate(weighted_graph, weight_epsilon=1e-6)
    with pytest.raises(ValueError):
        result.validate(weighted_graph, weight_epsilon=0)


def test_metrics_duration():
    metrics = SearchMetrics(start_time=10.0)
    assert metrics.duration == 0.0
    metrics.end_time = 10.5
    assert metrics.duration == 500.0
    assert metrics.to_dict()["duration_ms"] == 500.0
    assert metrics.to_dict()["early_exit"] is False
