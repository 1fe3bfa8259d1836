"""
Landmark (ALT) lower bounds for A* search.

Distances from and to a few landmark vertices are precomputed with the search
engine itself. The triangle inequality then bounds the remaining distance from
any vertex ``v`` to the destination ``t``:

    d(v, t) >= d(L, t) - d(L, v)
    d(v, t) >= d(v, L) - d(t, L)

The heuristic is the largest of these bounds over all landmarks, which keeps it
admissible on any graph with non-negative weights.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..exceptions import ValidationError
from ..graph import Graph
from ..stores import MappingWeightStore
from ..types import NO_VERTEX, Vertex
from .shortest_paths import ShortestPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LandmarkDistance:
    """
    Precomputed distances for a landmark.

    Attributes:
        forward: Distances from the landmark to every reachable vertex
        backward: Distances from every vertex that reaches the landmark to it
    """

    forward: Dict[Vertex, float]
    backward: Dict[Vertex, float]


def _distances_from(graph: Graph, source: Vertex) -> Dict[Vertex, float]:
    paths = ShortestPaths(graph, MappingWeightStore(graph), source)
    paths.set_paths()
    return paths.distances()


class LandmarkHeuristic:
    """
    ALT heuristic towards a fixed destination.

    Landmarks are either given or selected by farthest-first traversal starting
    from a random vertex (reproducible with ``seed``).
    """

    def __init__(
        self,
        graph: Graph,
        dest: Vertex,
        landmarks: Optional[Sequence[Vertex]] = None,
        num_landmarks: int = 4,
        seed: Optional[int] = None,
    ):
        if dest == NO_VERTEX:
            raise ValidationError("A landmark heuristic needs a destination vertex")
        if num_landmarks < 1:
            raise ValidationError("num_landmarks must be at least 1")
        self.graph = graph
        self.dest = dest
        self._reversed = graph.reversed()
        self.landmarks: Dict[Vertex, LandmarkDistance] = {}

        if landmarks is None:
            landmarks = self._select_landmarks(num_landmarks, random.Random(seed))
        for landmark in landmarks:
            self._add_landmark(landmark)
        logger.debug(f"Landmark heuristic towards {dest} uses {list(self.landmarks)}")

    def _add_landmark(self, landmark: Vertex) -> LandmarkDistance:
        if landmark not in self.landmarks:
            self.landmarks[landmark] = LandmarkDistance(
                forward=_distances_from(self.graph, landmark),
                backward=_distances_from(self._reversed, landmark),
            )
        return self.landmarks[landmark]

    def _select_landmarks(self, count: int, rng: random.Random) -> List[Vertex]:
        """Pick landmarks that are far apart, measured along forward distances."""
        vertices = self.graph.vertices()
        if not vertices:
            return []
        chosen = [rng.choice(vertices)]
        forward = {chosen[0]: self._add_landmark(chosen[0]).forward}

        while len(chosen) < min(count, len(vertices)):
            best_vertex = None
            best_distance = -1.0
            for vertex in vertices:
                if vertex in forward:
                    continue
                # Vertices no landmark reaches count as infinitely far away.
                nearest = min(d.get(vertex, math.inf) for d in forward.values())
                if nearest > best_distance:
                    best_distance = nearest
                    best_vertex = vertex
            if best_vertex is None:
                break
            chosen.append(best_vertex)
            forward[best_vertex] = self._add_landmark(best_vertex).forward
        return chosen

    def __call__(self, vertex: Vertex) -> float:
        estimate = 0.0
        for distances in self.landmarks.values():
            forward, backward = distances.forward, distances.backward
            if vertex in forward and self.dest in forward:
                estimate = max(estimate, forward[self.dest] - forward[vertex])
            if vertex in backward and self.dest in backward:
                estimate = max(estimate, backward[vertex] - backward[self.dest])
        return estimate
