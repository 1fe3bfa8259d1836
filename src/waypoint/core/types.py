"""
Core type definitions and protocols.

This module provides the type aliases, the sentinel vertex and the protocols
shared by the graph, the weight stores and the search engine.
"""

from typing import Callable, Hashable, Iterable, Protocol

# Vertex identifiers are positive integers in the bundled graph; any hashable,
# totally ordered identifier works with the engine.
Vertex = Hashable

# Reserved identifier meaning "no vertex" (no predecessor, no destination).
NO_VERTEX: int = 0

INFINITY = float("inf")

# Estimate of the remaining distance from a vertex to the destination.
Heuristic = Callable[[Vertex], float]

# Weight of the ordered edge (u, v).
EdgeWeightFunc = Callable[[Vertex, Vertex], float]


class GraphProtocol(Protocol):
    """Protocol defining the graph operations the search engine needs."""

    def successors(self, vertex: Vertex) -> Iterable[Vertex]:
        """Get a fresh enumeration of the successors of a vertex."""
        ...


class WeightedGraphProtocol(GraphProtocol, Protocol):
    """Graph that can also report edge weights."""

    def edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> float:
        """Get the weight of an edge, or infinity if it does not exist."""
        ...
