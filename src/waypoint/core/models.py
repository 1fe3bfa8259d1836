"""
Data models for shortest-path results.

This module provides the data structures returned by the search engine:
- PathResult: A path as a vertex sequence with its total weight, with validation
- SearchMetrics: Counters and timings recorded while a search runs
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(vertices=[1, 2, 3], total_weight=2.0)
    >>> result.validate(graph)  # Ensures path consistency
    >>> len(result)  # Number of edges
    2
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from .types import Vertex, WeightedGraphProtocol


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Missing edges between consecutive vertices
    - Weight inconsistencies
    - Empty paths
    """


@dataclass
class PathResult:
    """
    Container for a reconstructed path.

    Attributes:
        vertices: Vertices from the source to the target, both included
        total_weight: Sum of the edge weights along the path
    """

    vertices: List[Vertex]
    total_weight: float

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.vertices, list):
            raise TypeError("vertices must be a list")
        if isinstance(self.total_weight, bool) or not isinstance(
            self.total_weight, (int, float)
        ):
            raise TypeError("total_weight must be a numeric value")

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return max(len(self.vertices) - 1, 0)

    def __getitem__(self, index: int) -> Vertex:
        return self.vertices[index]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    @property
    def source(self) -> Optional[Vertex]:
        return self.vertices[0] if self.vertices else None

    @property
    def target(self) -> Optional[Vertex]:
        return self.vertices[-1] if self.vertices else None

    def validate(self, graph: WeightedGraphProtocol, weight_epsilon: float = 1e-9) -> None:
        """
        Validate the path against a graph.

        Checks that every consecutive pair of vertices is joined by an edge and
        that the stored total weight matches the sum of those edge weights.

        Args:
            graph: Graph providing ``edge_weight``
            weight_epsilon: Precision for weight comparisons

        Raises:
            PathValidationError: If any validation check fails
            ValueError: If weight_epsilon is not positive
        """
        if weight_epsilon <= 0:
            raise ValueError("weight_epsilon must be positive")
        if not self.vertices:
            raise PathValidationError("Path has no vertices")

        calculated = 0.0
        for from_vertex, to_vertex in zip(self.vertices, self.vertices[1:]):
            weight = graph.edge_weight(from_vertex, to_vertex)
            if math.isinf(weight):
                raise PathValidationError(
                    f"Edge from {from_vertex} to {to_vertex} not found in graph"
                )
            calculated += weight

        if abs(calculated - self.total_weight) > weight_epsilon:
            raise PathValidationError(
                f"Weight mismatch: calculated {calculated} != stored {self.total_weight}"
            )


@dataclass
class SearchMetrics:
    """
    Container for search metrics.

    Attributes:
        start_time: Search start timestamp
        end_time: Search end timestamp (0.0 if not completed)
        vertices_finalized: Number of vertices moved from the fringe to the marked set
        edges_relaxed: Number of successful relaxations
        early_exit: Whether the search stopped at the destination
        max_memory_used: Peak resident memory during the search (bytes)
    """

    start_time: float
    end_time: float = 0.0
    vertices_finalized: int = 0
    edges_relaxed: int = 0
    early_exit: bool = False
    max_memory_used: Optional[int] = None

    @property
    def duration(self) -> float:
        """Duration of the search in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[float, int, bool, None]]:
        return {
            "duration_ms": self.duration,
            "vertices_finalized": self.vertices_finalized,
            "edges_relaxed": self.edges_relaxed,
            "early_exit": self.early_exit,
            "max_memory_used": self.max_memory_used,
        }
