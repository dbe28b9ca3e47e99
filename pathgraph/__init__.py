"""pathgraph: shortest and widest paths on weighted directed graphs.

Primary API:
    parse_edge_list() - Build a frozen, labeled graph from edge-list text
    IndexedDiGraph - Directed graph over dense integer node indices
    find_shortest_path() - Minimum-total-weight path between two nodes
    find_widest_path() - Maximum-bottleneck path between two nodes
    find_path_by_label() - Query by labels, returning a PathResult

Example:
    from pathgraph import find_shortest_path, find_widest_path, parse_edge_list

    labeled = parse_edge_list("A B 1\\nB C 2\\nA C 5")
    find_shortest_path(labeled.graph, 0, 2)  # [0, 1, 2]
    find_widest_path(labeled.graph, 0, 2)  # [0, 2]
"""

from __future__ import annotations

from pathgraph import cli, logging
from pathgraph.algorithms.base import PathAlg
from pathgraph.config import EDGE_LIST_CONFIG, EdgeListConfig
from pathgraph.errors import (
    DuplicateNode,
    EdgeListFormatError,
    InvalidArgument,
    MissingEdge,
    OutOfRange,
    PathGraphError,
    PathValidationError,
    UnknownLabel,
    UnknownNode,
)
from pathgraph.graph import IndexedDiGraph
from pathgraph.io import (
    LabeledGraph,
    NodeMap,
    graph_to_edgelist,
    parse_edge_list,
    read_edge_list,
)
from pathgraph.query import (
    PathResult,
    find_path,
    find_path_by_label,
    find_shortest_path,
    find_widest_path,
)
from pathgraph.validate import validate_path

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Graph
    "IndexedDiGraph",
    "LabeledGraph",
    "NodeMap",
    # Queries
    "PathAlg",
    "PathResult",
    "find_path",
    "find_path_by_label",
    "find_shortest_path",
    "find_widest_path",
    "validate_path",
    # I/O
    "parse_edge_list",
    "read_edge_list",
    "graph_to_edgelist",
    "EdgeListConfig",
    "EDGE_LIST_CONFIG",
    # Errors
    "PathGraphError",
    "InvalidArgument",
    "OutOfRange",
    "PathValidationError",
    "DuplicateNode",
    "UnknownNode",
    "MissingEdge",
    "EdgeListFormatError",
    "UnknownLabel",
    # Utilities
    "cli",
    "logging",
]
