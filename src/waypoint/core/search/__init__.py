"""Best-first shortest-path search: Dijkstra and A*."""

from .fringe import Fringe
from .heuristics import coordinate_heuristic, table_heuristic, zero_heuristic
from .landmarks import LandmarkDistance, LandmarkHeuristic
from .shortest_paths import ShortestPaths, astar, dijkstra

__all__ = [
    "Fringe",
    "LandmarkDistance",
    "LandmarkHeuristic",
    "ShortestPaths",
    "astar",
    "coordinate_heuristic",
    "dijkstra",
    "table_heuristic",
    "zero_heuristic",
]
