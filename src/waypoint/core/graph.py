"""
Directed weighted graph with an adjacency list representation.

This module provides the Graph class bundled with the search engine. Vertices are
positive integer identifiers and every edge carries a non-negative weight. The
graph keeps a forward adjacency list for successor enumeration and a reverse
index so that the transposed graph can be built for backward searches.

The engine itself only needs ``successors``; any object satisfying
``GraphProtocol`` can be searched.
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from .exceptions import InvalidVertexError, NegativeWeightError, ValidationError
from .types import INFINITY, NO_VERTEX, Vertex

logger = logging.getLogger(__name__)

WeightedEdge = Tuple[Vertex, Vertex, float]


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[Vertex, Dict[Vertex, float]] = field(
        default_factory=lambda: defaultdict(dict)
    )
    reverse_index: Dict[Vertex, Set[Vertex]] = field(default_factory=lambda: defaultdict(set))
    vertex_set: Set[Vertex] = field(default_factory=set)
    edge_count: int = 0


class Graph:
    """
    Directed graph with non-negative edge weights.

    Attributes:
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock guarding state mutation
    """

    def __init__(
        self,
        edges: Optional[Iterable[WeightedEdge]] = None,
        vertices: Optional[Iterable[Vertex]] = None,
    ):
        """
        Initialize graph from weighted edges and optional isolated vertices.

        Args:
            edges: Iterable of ``(from_vertex, to_vertex, weight)`` triples.
            vertices: Vertices to register even if no edge touches them.

        Raises:
            InvalidVertexError: If an edge or vertex uses the sentinel identifier.
            NegativeWeightError: If an edge weight is negative or NaN.
        """
        self._state = GraphState()
        self._state_lock = RLock()
        for vertex in vertices or ():
            self.add_vertex(vertex)
        for from_vertex, to_vertex, weight in edges or ():
            self.add_edge(from_vertex, to_vertex, weight)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        with self._state_lock:
            return len(self._state.vertex_set)

    @property
    def edge_count(self) -> int:
        """Number of edges in the graph."""
        with self._state_lock:
            return self._state.edge_count

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex with no edges."""
        self._check_vertex(vertex)
        with self._state_lock:
            self._state.vertex_set.add(vertex)

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex, weight: float = 1.0) -> None:
        """
        Add a directed edge, replacing the weight of an existing one.

        Raises:
            InvalidVertexError: If either endpoint is the sentinel vertex.
            NegativeWeightError: If the weight is negative, infinite or NaN.
            ValidationError: If the weight is not numeric.
        """
        self._check_vertex(from_vertex)
        self._check_vertex(to_vertex)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValidationError(f"Edge weight must be numeric, got {weight!r}")
        if not math.isfinite(weight) or weight < 0:
            raise NegativeWeightError(
                f"Invalid weight {weight} on edge {from_vertex} -> {to_vertex}"
            )

        with self._state_lock:
            self._state.vertex_set.add(from_vertex)
            self._state.vertex_set.add(to_vertex)
            if to_vertex not in self._state.adjacency[from_vertex]:
                self._state.edge_count += 1
            self._state.adjacency[from_vertex][to_vertex] = float(weight)
            self._state.reverse_index[to_vertex].add(from_vertex)

    def has_vertex(self, vertex: Vertex) -> bool:
        """Check if a vertex is part of the graph."""
        with self._state_lock:
            return vertex in self._state.vertex_set

    def has_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        """Check if an edge exists between two vertices."""
        with self._state_lock:
            return to_vertex in self._state.adjacency.get(from_vertex, {})

    def vertices(self) -> List[Vertex]:
        """Get all vertices in ascending order."""
        with self._state_lock:
            return sorted(self._state.vertex_set)

    def successors(self, vertex: Vertex) -> Iterator[Vertex]:
        """
        Enumerate the successors of a vertex in insertion order.

        Every call returns a fresh iterator. Unknown vertices have no successors.
        """
        with self._state_lock:
            targets = list(self._state.adjacency.get(vertex, {}))
        return iter(targets)

    def predecessors(self, vertex: Vertex) -> Iterator[Vertex]:
        """Enumerate the vertices with an edge into ``vertex``."""
        with self._state_lock:
            sources = sorted(self._state.reverse_index.get(vertex, set()))
        return iter(sources)

    def edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> float:
        """Get the weight of an edge, or infinity if the edge does not exist."""
        with self._state_lock:
            return self._state.adjacency.get(from_vertex, {}).get(to_vertex, INFINITY)

    def edges(self) -> Iterator[WeightedEdge]:
        """Enumerate all edges as ``(from_vertex, to_vertex, weight)`` triples."""
        with self._state_lock:
            snapshot = [
                (u, v, w) for u, targets in self._state.adjacency.items() for v, w in targets.items()
            ]
        return iter(snapshot)

    def reversed(self) -> "Graph":
        """Build the transposed graph, with every edge pointing the other way."""
        transposed = Graph(vertices=self.vertices())
        for from_vertex, to_vertex, weight in self.edges():
            transposed.add_edge(to_vertex, from_vertex, weight)
        return transposed

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the graph into the document accepted by ``from_dict``."""
        return {
            "vertices": self.vertices(),
            "edges": [[u, v, w] for u, v, w in self.edges()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        """
        Build a graph from a ``{"vertices": [...], "edges": [[u, v, w], ...]}`` document.

        Raises:
            ValidationError: If an edge entry is not a triple.
        """
        edges = []
        for entry in data.get("edges", []):
            if len(entry) != 3:
                raise ValidationError(f"Edge entry must be [from, to, weight], got {entry!r}")
            edges.append((entry[0], entry[1], entry[2]))
        graph = cls(edges=edges, vertices=data.get("vertices", []))
        logger.debug(
            "Loaded graph with %d vertices and %d edges", graph.vertex_count, graph.edge_count
        )
        return graph

    @staticmethod
    def _check_vertex(vertex: Vertex) -> None:
        if vertex == NO_VERTEX:
            raise InvalidVertexError(f"Vertex {NO_VERTEX} is reserved for 'no vertex'")

    def __contains__(self, vertex: Vertex) -> bool:
        return self.has_vertex(vertex)

    def __len__(self) -> int:
        return self.vertex_count
