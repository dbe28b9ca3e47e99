"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from pathgraph.errors import EdgeListFormatError, UnknownLabel
from pathgraph.io import LabeledGraph, graph_to_edgelist, read_edge_list
from pathgraph.logging import get_logger, set_global_log_level
from pathgraph.query import PathResult, find_path_by_label
from pathgraph.algorithms.base import PathAlg

logger = get_logger(__name__)


def _load_graph(source: str) -> LabeledGraph:
    """Read an edge-list file, printing a user-facing error and exiting on failure."""
    logger.debug(f"Loading graph from: {source}")
    try:
        labeled = read_edge_list(source)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {source}")
        print(f"❌ ERROR: Graph file not found: {source}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Failed to read graph file {source}: {e}")
        print(f"❌ ERROR: Failed to read graph file: {e}")
        sys.exit(1)
    except EdgeListFormatError as e:
        logger.error(f"Failed to parse graph file {source}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)
    return labeled


def _format_result(result: PathResult, labeled: LabeledGraph) -> List[str]:
    """Render a path result as the lines printed for a query."""
    if not result.found:
        return ["No Path Found"]

    lines = [f"Path: {' -> '.join(result.labels)}"]
    if result.trivial:
        lines.append("Source and target are the same node; no edges marked")
        return lines

    graph = labeled.graph
    to_name = labeled.node_map.to_name
    lines.append("Marked edges:")
    for u, v in result.edges:
        lines.append(f"   {to_name[u]} -> {to_name[v]} ({graph.weight(u, v)})")
    if result.algorithm == PathAlg.SHORTEST:
        lines.append(f"Total weight: {result.value}")
    else:
        lines.append(f"Bottleneck: {result.value}")
    return lines


def _run_query(
    algorithm: PathAlg, source: str, src_label: str, dst_label: str, as_json: bool
) -> None:
    """Run one path query and print its outcome."""
    labeled = _load_graph(source)
    try:
        result = find_path_by_label(labeled, src_label, dst_label, algorithm)
    except UnknownLabel as e:
        logger.error(f"Unknown label {e.label!r} in {algorithm.name.lower()} query")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    for line in _format_result(result, labeled):
        print(line)


def _inspect_graph(source: str) -> None:
    """Print a summary of the graph and its edge list."""
    labeled = _load_graph(source)
    graph = labeled.graph
    print(f"Nodes: {graph.size()}")
    print(f"Edges: {graph.number_of_edges()}")
    edge_lines = graph_to_edgelist(graph, labeled.node_map)
    if edge_lines:
        print("Edge list:")
        for line in edge_lines:
            print(f"   {line}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Find shortest and widest paths in a weighted directed graph.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{shortest,widest,inspect}",
        help="Available commands",
    )

    query_help = {
        "shortest": "Find the path with the minimum total weight",
        "widest": "Find the path with the largest bottleneck weight",
    }
    for name, help_text in query_help.items():
        query_parser = subparsers.add_parser(name, help=help_text)
        query_parser.add_argument(
            "graph", help="Edge-list file ('-' reads standard input)"
        )
        query_parser.add_argument("source", help="Source node label")
        query_parser.add_argument("target", help="Target node label")
        query_parser.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate an edge-list file and print its contents"
    )
    inspect_parser.add_argument(
        "graph", help="Edge-list file ('-' reads standard input)"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "inspect":
        _inspect_graph(args.graph)
    else:
        _run_query(
            PathAlg.from_string(args.command),
            args.graph,
            args.source,
            args.target,
            args.json,
        )


if __name__ == "__main__":
    main()
