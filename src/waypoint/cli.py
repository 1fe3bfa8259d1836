"""Command Line Interface for the shortest-path search engine.

This module provides a CLI that loads a graph document and runs a search on it.

The CLI supports the following commands:
    - search: Find the shortest path to a destination, or distances to every
      vertex reachable from the source
    - info: Summarize a graph document

Graph documents have the form ``{"vertices": [1, 2], "edges": [[1, 2, 1.5]]}``.
They can be provided either as a direct JSON string or as a file path prefixed
with '@'.

Example Usage:
    python -m waypoint search @graphs/line.json --source 1 --dest 3
    python -m waypoint search '{"edges": [[1, 2, 1.0]]}' --source 1
    python -m waypoint info @graphs/line.json
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .core.config import SearchConfig
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidOperationError,
    ResourceNotFoundError,
    ValidationError,
    VertexNotFoundError,
)
from .core.graph import Graph
from .core.search import LandmarkHeuristic, ShortestPaths
from .core.stores import ArrayWeightStore, MappingWeightStore, RecordWeightStore, WeightStore
from .core.types import NO_VERTEX, Heuristic

logger = logging.getLogger(__name__)

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "vertices": {"type": "array", "items": {"type": "integer", "minimum": 1}},
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "prefixItems": [
                    {"type": "integer", "minimum": 1},
                    {"type": "integer", "minimum": 1},
                    {"type": "number", "minimum": 0},
                ],
                "minItems": 3,
                "maxItems": 3,
            },
        },
    },
    "additionalProperties": False,
}

STORES = ("mapping", "array", "records")
HEURISTICS = ("zero", "landmarks")


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       working directory.

    Returns:
        Parsed JSON data.

    Raises:
        ResourceNotFoundError: If the specified file is not found.
        ValidationError: If the JSON is invalid.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)
        if not os.path.exists(file_path):
            raise ResourceNotFoundError(f"File not found: {file_path}")
        with open(file_path, "r") as f:
            json_str = f.read()

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}")


def load_graph(json_str: str) -> Graph:
    """Parse and schema-check a graph document, then build the graph."""
    data = parse_json_input(json_str)
    try:
        validate(instance=data, schema=GRAPH_SCHEMA)
    except JsonSchemaError as e:
        raise ValidationError(f"Invalid graph document: {e.message}")
    return Graph.from_dict(data)


def build_store(kind: str, graph: Graph) -> WeightStore:
    """Create the weight store named on the command line."""
    if kind == "array":
        vertices = graph.vertices()
        return ArrayWeightStore(graph, size=max(vertices) if vertices else 0)
    if kind == "records":
        store = RecordWeightStore(graph)
        for vertex in graph.vertices():
            store.add_record(vertex)
        return store
    return MappingWeightStore(graph)


def build_heuristic(kind: str, graph: Graph, dest: int, seed: Optional[int]) -> Optional[Heuristic]:
    """Create the heuristic named on the command line."""
    if kind == "zero":
        return None
    if dest == NO_VERTEX:
        raise ConfigurationError("The landmarks heuristic needs --dest")
    return LandmarkHeuristic(graph, dest, seed=seed)


def format_path(path: List[int]) -> str:
    return " -> ".join(str(vertex) for vertex in path)


def run_search(args: argparse.Namespace) -> None:
    """Run the ``search`` command and print its results."""
    graph = load_graph(args.graph)
    config = SearchConfig.from_dict(parse_json_input(args.config)) if args.config else None

    for vertex in (args.source, args.dest):
        if vertex != NO_VERTEX and not graph.has_vertex(vertex):
            raise VertexNotFoundError(f"Vertex {vertex} not found in graph")

    store = build_store(args.store, graph)
    heuristic = build_heuristic(args.heuristic, graph, args.dest, args.seed)
    paths = ShortestPaths(graph, store, args.source, args.dest, heuristic, config)
    paths.set_paths()

    if args.dest != NO_VERTEX:
        result = paths.path_result()
        print(f"Path: {format_path(result.vertices)}")
        print(f"Distance: {result.total_weight:g}")
    else:
        print(f"Distances from {args.source}:")
        for vertex, weight in paths.distances().items():
            print(f"  {vertex}: {weight:g}  ({format_path(paths.path_to(vertex))})")
        unreached = [v for v in graph.vertices() if not paths.is_finalized(v)]
        if unreached:
            print(f"Unreachable: {', '.join(str(v) for v in unreached)}")

    if paths.metrics is not None:
        logger.info(f"Search metrics: {paths.metrics.to_dict()}")


def run_info(args: argparse.Namespace) -> None:
    """Run the ``info`` command."""
    graph = load_graph(args.graph)
    print(f"Vertices: {graph.vertex_count}")
    print(f"Edges: {graph.edge_count}")
    for vertex in graph.vertices():
        successors = ", ".join(
            f"{suc} ({graph.edge_weight(vertex, suc):g})" for suc in graph.successors(vertex)
        )
        print(f"- {vertex}: {successors or '(none)'}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="waypoint", description="Shortest-path search CLI")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    search = subparsers.add_parser("search", help="Search shortest paths in a graph")
    search.add_argument("graph", help="JSON string or @filename containing the graph")
    search.add_argument("--source", type=int, required=True, help="Source vertex")
    search.add_argument(
        "--dest", type=int, default=NO_VERTEX, help="Destination vertex (default: all vertices)"
    )
    search.add_argument("--store", choices=STORES, default="mapping", help="Weight store")
    search.add_argument("--heuristic", choices=HEURISTICS, default="zero", help="A* heuristic")
    search.add_argument("--seed", type=int, default=None, help="Seed for landmark selection")
    search.add_argument("--config", help="JSON string or @filename with search settings")

    info = subparsers.add_parser("info", help="Summarize a graph")
    info.add_argument("graph", help="JSON string or @filename containing the graph")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "search":
            run_search(args)
        elif args.command == "info":
            run_info(args)
    except (
        ValidationError,
        GraphOperationError,
        InvalidOperationError,
        ResourceNotFoundError,
        ConfigurationError,
        MemoryError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
