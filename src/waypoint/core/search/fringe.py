"""Priority queue holding the discovered but not yet finalized vertices."""

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from ..types import Vertex


class Fringe:
    """
    Min-heap of vertices keyed by ``(priority, vertex)`` with decrease-key.

    Ties on priority go to the lowest vertex identifier. Superseded heap
    entries are left in place and skipped when popped.
    """

    def __init__(self):
        self._queue: List[Tuple[float, Vertex]] = []
        self._entry_finder: Dict[Vertex, float] = {}

    def add_or_update(self, vertex: Vertex, priority: float) -> bool:
        """
        Insert ``vertex`` or lower its priority.

        Returns:
            True if the vertex was inserted or its priority lowered.
        """
        current = self._entry_finder.get(vertex)
        if current is not None and priority >= current:
            return False
        self._entry_finder[vertex] = priority
        heappush(self._queue, (priority, vertex))
        return True

    def pop(self) -> Optional[Tuple[float, Vertex]]:
        """Remove and return the ``(priority, vertex)`` pair with the lowest key."""
        while self._queue:
            priority, vertex = heappop(self._queue)
            if self._entry_finder.get(vertex) == priority:
                del self._entry_finder[vertex]
                return priority, vertex
        return None

    def priority(self, vertex: Vertex) -> Optional[float]:
        return self._entry_finder.get(vertex)

    def empty(self) -> bool:
        return not self._entry_finder

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self._entry_finder

    def __len__(self) -> int:
        return len(self._entry_finder)
