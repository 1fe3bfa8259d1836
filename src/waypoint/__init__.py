"""
Waypoint - Best-first shortest-path search over abstract graphs

This package provides a Dijkstra/A* search engine that runs over any graph
exposing successor enumeration, with pluggable storage for distances and
predecessors. It includes:

- A directed weighted graph with non-negative edge weights
- Map-backed, array-backed and record-backed weight stores
- Zero, table, coordinate and landmark (ALT) heuristics
- A command line interface for searching JSON graph documents
"""

__version__ = "0.1.0"
__author__ = "Waypoint Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 10):
    raise RuntimeError("Waypoint requires Python 3.10 or higher")

from .core.graph import Graph
from .core.search import ShortestPaths, astar, dijkstra
from .core.stores import ArrayWeightStore, MappingWeightStore, RecordWeightStore
from .core.types import NO_VERTEX

__all__ = [
    "ArrayWeightStore",
    "Graph",
    "MappingWeightStore",
    "NO_VERTEX",
    "RecordWeightStore",
    "ShortestPaths",
    "astar",
    "dijkstra",
]
