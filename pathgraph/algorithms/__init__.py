"""Path-finding algorithms over ``IndexedDiGraph``."""

from pathgraph.algorithms.base import PathAlg
from pathgraph.algorithms.path_utils import (
    path_bottleneck,
    path_cost,
    path_edges,
    resolve_to_path,
)
from pathgraph.algorithms.spf import shortest_path, spf
from pathgraph.algorithms.widest import widest, widest_path

__all__ = [
    "PathAlg",
    "path_bottleneck",
    "path_cost",
    "path_edges",
    "resolve_to_path",
    "shortest_path",
    "spf",
    "widest",
    "widest_path",
]
