"""Core graph and search functionality."""

from .config import SearchConfig
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidVertexError,
    NegativeWeightError,
    SearchStateError,
    UnreachableVertexError,
    ValidationError,
    VertexNotFoundError,
)
from .graph import Graph
from .models import PathResult, PathValidationError, SearchMetrics
from .stores import (
    ArrayWeightStore,
    MappingWeightStore,
    RecordWeightStore,
    VertexRecord,
    WeightStore,
)
from .types import NO_VERTEX, GraphProtocol, Heuristic, Vertex
from .search import (
    LandmarkHeuristic,
    ShortestPaths,
    astar,
    coordinate_heuristic,
    dijkstra,
    table_heuristic,
    zero_heuristic,
)

__all__ = [
    "ArrayWeightStore",
    "ConfigurationError",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "Heuristic",
    "InvalidVertexError",
    "LandmarkHeuristic",
    "MappingWeightStore",
    "NO_VERTEX",
    "NegativeWeightError",
    "PathResult",
    "PathValidationError",
    "RecordWeightStore",
    "SearchConfig",
    "SearchMetrics",
    "SearchStateError",
    "ShortestPaths",
    "UnreachableVertexError",
    "ValidationError",
    "Vertex",
    "VertexNotFoundError",
    "VertexRecord",
    "WeightStore",
    "astar",
    "coordinate_heuristic",
    "dijkstra",
    "table_heuristic",
    "zero_heuristic",
]
