"""
Weight/state stores for the search engine.

A store holds the tentative distance and predecessor of every vertex touched
by a search, and answers edge-weight lookups. The engine only talks to the
``WeightStore`` interface, so the same search runs over different
representations:

- MappingWeightStore: dictionaries keyed by vertex, for sparse or non-integer ids
- ArrayWeightStore: dense lists indexed by integer vertex id
- RecordWeightStore: per-vertex ``VertexRecord`` objects that may carry payload

Unvisited vertices report an infinite distance and the ``NO_VERTEX`` predecessor.
Stores are owned by the caller and survive the search, so results can be
inspected afterwards; ``clear`` resets them before re-use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .exceptions import InvalidVertexError
from .types import INFINITY, NO_VERTEX, EdgeWeightFunc, Vertex, WeightedGraphProtocol


class WeightStore(ABC):
    """
    Abstract base class for distance, predecessor and edge-weight storage.

    Edge weights come from ``weight_func`` when one is given, otherwise from
    the graph's ``edge_weight`` method.
    """

    def __init__(
        self, graph: WeightedGraphProtocol, weight_func: Optional[EdgeWeightFunc] = None
    ):
        self.graph = graph
        self.weight_func = weight_func

    @abstractmethod
    def get_weight(self, vertex: Vertex) -> float:
        """Current distance of ``vertex``, infinity if unvisited."""

    @abstractmethod
    def set_weight(self, vertex: Vertex, weight: float) -> None:
        """Set the current distance of ``vertex``."""

    @abstractmethod
    def get_predecessor(self, vertex: Vertex) -> Vertex:
        """Current predecessor of ``vertex``, ``NO_VERTEX`` if none."""

    @abstractmethod
    def set_predecessor(self, vertex: Vertex, predecessor: Vertex) -> None:
        """Set the current predecessor of ``vertex``."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every stored distance and predecessor."""

    def get_edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> float:
        """Weight of the edge ``(from_vertex, to_vertex)``, infinity if absent."""
        if self.weight_func is not None:
            return self.weight_func(from_vertex, to_vertex)
        return self.graph.edge_weight(from_vertex, to_vertex)


class MappingWeightStore(WeightStore):
    """Store backed by dictionaries; only touched vertices take space."""

    def __init__(
        self, graph: WeightedGraphProtocol, weight_func: Optional[EdgeWeightFunc] = None
    ):
        super().__init__(graph, weight_func)
        self._weights: Dict[Vertex, float] = {}
        self._predecessors: Dict[Vertex, Vertex] = {}

    def get_weight(self, vertex: Vertex) -> float:
        return self._weights.get(vertex, INFINITY)

    def set_weight(self, vertex: Vertex, weight: float) -> None:
        self._weights[vertex] = weight

    def get_predecessor(self, vertex: Vertex) -> Vertex:
        return self._predecessors.get(vertex, NO_VERTEX)

    def set_predecessor(self, vertex: Vertex, predecessor: Vertex) -> None:
        self._predecessors[vertex] = predecessor

    def clear(self) -> None:
        self._weights.clear()
        self._predecessors.clear()


class ArrayWeightStore(WeightStore):
    """
    Store backed by dense lists indexed by vertex id.

    Vertex ids must be integers in ``1..size``. Reads outside that range behave
    like unvisited vertices; writes outside it raise ``InvalidVertexError``.
    """

    def __init__(
        self,
        graph: WeightedGraphProtocol,
        size: int,
        weight_func: Optional[EdgeWeightFunc] = None,
    ):
        super().__init__(graph, weight_func)
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        # Slot 0 belongs to the sentinel and is never written.
        self._weights: List[float] = [INFINITY] * (size + 1)
        self._predecessors: List[Vertex] = [NO_VERTEX] * (size + 1)

    def _in_range(self, vertex: Vertex) -> bool:
        return isinstance(vertex, int) and 0 < vertex <= self.size

    def _check_index(self, vertex: Vertex) -> int:
        if not self._in_range(vertex):
            raise InvalidVertexError(f"Vertex {vertex!r} is outside 1..{self.size}")
        return vertex  # type: ignore[return-value]

    def get_weight(self, vertex: Vertex) -> float:
        if not self._in_range(vertex):
            return INFINITY
        return self._weights[vertex]  # type: ignore[index]

    def set_weight(self, vertex: Vertex, weight: float) -> None:
        self._weights[self._check_index(vertex)] = weight

    def get_predecessor(self, vertex: Vertex) -> Vertex:
        if not self._in_range(vertex):
            return NO_VERTEX
        return self._predecessors[vertex]  # type: ignore[index]

    def set_predecessor(self, vertex: Vertex, predecessor: Vertex) -> None:
        self._predecessors[self._check_index(vertex)] = predecessor

    def clear(self) -> None:
        self._weights = [INFINITY] * (self.size + 1)
        self._predecessors = [NO_VERTEX] * (self.size + 1)


@dataclass
class VertexRecord:
    """Per-vertex search state, optionally carrying caller data."""

    __slots__ = ("vertex", "weight", "predecessor", "payload")

    vertex: Vertex
    weight: float
    predecessor: Vertex
    payload: Any


class RecordWeightStore(WeightStore):
    """
    Store that embeds search state in ``VertexRecord`` objects.

    Records may be pre-registered with ``add_record`` to attach a payload (for
    example a board position); records for other vertices are created lazily.
    """

    def __init__(
        self, graph: WeightedGraphProtocol, weight_func: Optional[EdgeWeightFunc] = None
    ):
        super().__init__(graph, weight_func)
        self._records: Dict[Vertex, VertexRecord] = {}

    def add_record(self, vertex: Vertex, payload: Any = None) -> VertexRecord:
        """Register a record for ``vertex`` carrying ``payload``."""
        record = VertexRecord(vertex, INFINITY, NO_VERTEX, payload)
        self._records[vertex] = record
        return record

    def record(self, vertex: Vertex) -> Optional[VertexRecord]:
        """Get the record of ``vertex`` if one exists."""
        return self._records.get(vertex)

    def _record_for_update(self, vertex: Vertex) -> VertexRecord:
        record = self._records.get(vertex)
        if record is None:
            record = self.add_record(vertex)
        return record

    def get_weight(self, vertex: Vertex) -> float:
        record = self._records.get(vertex)
        return INFINITY if record is None else record.weight

    def set_weight(self, vertex: Vertex, weight: float) -> None:
        self._record_for_update(vertex).weight = weight

    def get_predecessor(self, vertex: Vertex) -> Vertex:
        record = self._records.get(vertex)
        return NO_VERTEX if record is None else record.predecessor

    def set_predecessor(self, vertex: Vertex, predecessor: Vertex) -> None:
        self._record_for_update(vertex).predecessor = predecessor

    def clear(self) -> None:
        """Reset search state while keeping registered payloads."""
        for record in self._records.values():
            record.weight = INFINITY
            record.predecessor = NO_VERTEX
