"""
Best-first shortest-path search.

``ShortestPaths`` runs Dijkstra's algorithm from a source vertex, or A* towards a
fixed destination when a heuristic is supplied. Distances and predecessors are
kept in an injected ``WeightStore`` so the caller decides how results are
represented and can inspect them after the search.

Example:
    >>> graph = Graph(edges=[(1, 2, 1.0), (2, 3, 1.0)])
    >>> paths = ShortestPaths(graph, MappingWeightStore(graph), source=1)
    >>> paths.set_paths()
    >>> paths.get_weight(3)
    2.0
    >>> paths.path_to(3)
    [1, 2, 3]
"""

import logging
from time import time
from typing import Dict, List, Optional, Set

from ..config import DEFAULT_CONFIG, SearchConfig
from ..exceptions import (
    GraphOperationError,
    InvalidVertexError,
    SearchStateError,
    UnreachableVertexError,
)
from ..models import PathResult, SearchMetrics
from ..stores import MappingWeightStore, WeightStore
from ..types import NO_VERTEX, GraphProtocol, Heuristic, Vertex, WeightedGraphProtocol
from ..utils import MemoryManager, is_finite
from .fringe import Fringe
from .heuristics import zero_heuristic

logger = logging.getLogger(__name__)


class ShortestPaths:
    """
    Shortest paths in a graph from a source vertex.

    With ``dest`` left at ``NO_VERTEX`` the search computes distances to every
    reachable vertex. With a destination the search stops as soon as the
    destination is finalized, and only the path to it may be requested.

    The heuristic must be non-negative and must not overestimate the remaining
    distance to the destination for results to be optimal. It is not checked.
    """

    def __init__(
        self,
        graph: GraphProtocol,
        store: WeightStore,
        source: Vertex,
        dest: Vertex = NO_VERTEX,
        heuristic: Optional[Heuristic] = None,
        config: Optional[SearchConfig] = None,
    ):
        if source == NO_VERTEX:
            raise InvalidVertexError(f"Source vertex cannot be the sentinel {NO_VERTEX}")
        self._graph = graph
        self._store = store
        self._source = source
        self._dest = dest
        self._heuristic = heuristic if heuristic is not None else zero_heuristic
        self._config = config or DEFAULT_CONFIG
        self._marked: Set[Vertex] = set()
        self._searched = False
        self.metrics: Optional[SearchMetrics] = None

    @property
    def source(self) -> Vertex:
        """The starting vertex."""
        return self._source

    @property
    def dest(self) -> Vertex:
        """The target vertex, or ``NO_VERTEX`` if there is none."""
        return self._dest

    @property
    def graph(self) -> GraphProtocol:
        return self._graph

    @property
    def store(self) -> WeightStore:
        return self._store

    @property
    def searched(self) -> bool:
        """Whether ``set_paths`` has run."""
        return self._searched

    def set_paths(self) -> None:
        """
        Run the search.

        Must be called exactly once before ``get_weight``, ``get_predecessor``
        and ``path_to``.

        Raises:
            SearchStateError: If the search already ran on this instance.
            MemoryError: If the configured memory ceiling is exceeded.
        """
        if self._searched:
            raise SearchStateError("set_paths has already been called on this search")
        self._searched = True

        store = self._store
        fringe = Fringe()
        estimates: Dict[Vertex, float] = {}

        def priority(vertex: Vertex) -> float:
            if vertex not in estimates:
                estimates[vertex] = self._heuristic(vertex)
            return estimates[vertex] + store.get_weight(vertex)

        memory_manager = None
        if self._config.collect_metrics or self._config.max_memory_mb:
            memory_manager = MemoryManager(self._config.max_memory_mb)
        metrics = SearchMetrics(start_time=time())

        logger.debug(f"Starting search from {self._source} to {self._dest or 'all vertices'}")

        try:
            store.set_predecessor(self._source, NO_VERTEX)
            store.set_weight(self._source, 0.0)
            fringe.add_or_update(self._source, priority(self._source))

            while not fringe.empty():
                if memory_manager is not None:
                    memory_manager.check_memory()

                _, vertex = fringe.pop()  # type: ignore[misc]
                self._marked.add(vertex)
                metrics.vertices_finalized += 1
                weight = store.get_weight(vertex)
                logger.debug("Finalized vertex %s at distance %s", vertex, weight)

                if self._dest != NO_VERTEX and vertex == self._dest:
                    metrics.early_exit = True
                    break

                for suc in self._graph.successors(vertex):
                    if suc in self._marked:
                        continue
                    candidate = weight + store.get_edge_weight(vertex, suc)
                    current = store.get_weight(suc)
                    if candidate < current:
                        logger.debug("  Relaxing %s: %s -> %s", suc, current, candidate)
                        store.set_weight(suc, candidate)
                        store.set_predecessor(suc, vertex)
                        metrics.edges_relaxed += 1
                    fringe.add_or_update(suc, priority(suc))
        finally:
            metrics.end_time = time()
            if memory_manager is not None:
                metrics.max_memory_used = memory_manager.peak_memory
            if self._config.collect_metrics:
                self.metrics = metrics

        logger.info(
            f"Search from {self._source} finalized {metrics.vertices_finalized} vertices "
            f"in {metrics.duration:.1f}ms"
        )

    def _require_paths(self) -> None:
        if not self._searched:
            raise SearchStateError("set_paths must be called before querying results")

    def get_weight(self, vertex: Vertex) -> float:
        """Distance of ``vertex`` from the source, infinity if unreached."""
        self._require_paths()
        return self._store.get_weight(vertex)

    def get_predecessor(self, vertex: Vertex) -> Vertex:
        """Predecessor of ``vertex`` on its shortest path, ``NO_VERTEX`` if none."""
        self._require_paths()
        return self._store.get_predecessor(vertex)

    def get_edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> float:
        """Weight of the edge ``(from_vertex, to_vertex)``, infinity if absent."""
        return self._store.get_edge_weight(from_vertex, to_vertex)

    def is_finalized(self, vertex: Vertex) -> bool:
        """Whether the search fixed the distance of ``vertex``."""
        self._require_paths()
        return vertex in self._marked

    def distances(self) -> Dict[Vertex, float]:
        """Distances of every finalized, reachable vertex."""
        self._require_paths()
        result = {}
        for vertex in sorted(self._marked):
            weight = self._store.get_weight(vertex)
            if is_finite(weight):
                result[vertex] = weight
        return result

    def path_to(self, vertex: Optional[Vertex] = None) -> List[Vertex]:
        """
        Build the shortest path from the source to ``vertex``.

        Without an argument the path to the destination is returned. Every call
        returns a new list.

        Raises:
            InvalidVertexError: If the target is ``NO_VERTEX``, including when no
                argument is given and no destination was fixed.
            SearchStateError: If a different destination was fixed, or the
                search has not run.
            UnreachableVertexError: If the search never reached the target.
        """
        target = self._dest if vertex is None else vertex
        if target == NO_VERTEX:
            raise InvalidVertexError("Cannot build a path to the sentinel vertex")
        if self._dest != NO_VERTEX and target != self._dest:
            raise SearchStateError(
                f"Search was run towards {self._dest}; no path to {target} is available"
            )
        self._require_paths()

        if not is_finite(self._store.get_weight(target)):
            raise UnreachableVertexError(f"Vertex {target} is not reachable from {self._source}")

        path = [target]
        seen = {target}
        current = target
        while current != self._source:
            current = self._store.get_predecessor(current)
            if current == NO_VERTEX:
                raise UnreachableVertexError(
                    f"Predecessor chain of {target} does not lead back to {self._source}"
                )
            if current in seen:
                raise GraphOperationError(f"Predecessor cycle through {current}")
            seen.add(current)
            path.append(current)
        path.reverse()
        return path

    def path_result(self, vertex: Optional[Vertex] = None) -> PathResult:
        """Like ``path_to`` but bundles the path with its total weight."""
        path = self.path_to(vertex)
        return PathResult(vertices=path, total_weight=self._store.get_weight(path[-1]))


def dijkstra(
    graph: WeightedGraphProtocol, source: Vertex, config: Optional[SearchConfig] = None
) -> ShortestPaths:
    """Run a single-source search over a map-backed store and return it."""
    paths = ShortestPaths(graph, MappingWeightStore(graph), source, config=config)
    paths.set_paths()
    return paths


def astar(
    graph: WeightedGraphProtocol,
    source: Vertex,
    dest: Vertex,
    heuristic: Optional[Heuristic] = None,
    config: Optional[SearchConfig] = None,
) -> ShortestPaths:
    """Run a search towards ``dest`` over a map-backed store and return it."""
    if dest == NO_VERTEX:
        raise InvalidVertexError("astar needs a destination vertex")
    paths = ShortestPaths(
        graph, MappingWeightStore(graph), source, dest=dest, heuristic=heuristic, config=config
    )
    paths.set_paths()
    return paths
