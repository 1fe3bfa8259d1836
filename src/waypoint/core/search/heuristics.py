"""
Heuristic functions for A* search.

A heuristic maps a vertex to an estimate of its remaining distance to the
destination. Results are optimal only when the estimate is non-negative and
never exceeds the true remaining distance.
"""

import math
from typing import Mapping, Sequence

from ..exceptions import ValidationError
from ..types import Heuristic, Vertex


def zero_heuristic(vertex: Vertex) -> float:
    """Constant zero estimate; turns A* into Dijkstra's algorithm."""
    return 0.0


def table_heuristic(estimates: Mapping[Vertex, float], default: float = 0.0) -> Heuristic:
    """Heuristic reading precomputed estimates, ``default`` for missing vertices."""

    def heuristic(vertex: Vertex) -> float:
        return estimates.get(vertex, default)

    return heuristic


def manhattan(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(abs(x - y) for x, y in zip(a, b))


def euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


METRICS = {"manhattan": manhattan, "euclidean": euclidean}


def coordinate_heuristic(
    coords: Mapping[Vertex, Sequence[float]],
    dest: Vertex,
    metric: str = "euclidean",
    scale: float = 1.0,
) -> Heuristic:
    """
    Heuristic for graphs embedded in space, such as grid boards.

    The estimate is ``scale * metric(coords[v], coords[dest])``. It is admissible
    when every edge weighs at least ``scale`` times the metric distance between
    its endpoints. Vertices without coordinates get a zero estimate.

    Raises:
        ValidationError: If the metric is unknown, the scale is negative or the
            destination has no coordinates.
    """
    if metric not in METRICS:
        raise ValidationError(f"Unknown metric '{metric}', expected one of {sorted(METRICS)}")
    if scale < 0:
        raise ValidationError("scale must be non-negative")
    if dest not in coords:
        raise ValidationError(f"Destination {dest} has no coordinates")

    distance = METRICS[metric]
    target = coords[dest]

    def heuristic(vertex: Vertex) -> float:
        position = coords.get(vertex)
        if position is None:
            return 0.0
        return scale * distance(position, target)

    return heuristic
