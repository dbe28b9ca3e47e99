from __future__ import annotations

from numbers import Integral
from typing import Sequence, Set

from pathgraph.errors import DuplicateNode, MissingEdge, UnknownNode
from pathgraph.graph import IndexedDiGraph, NodeIndex
from pathgraph.algorithms.base import PathSeq


def validate_path(graph: IndexedDiGraph, path: Sequence[NodeIndex]) -> PathSeq:
    """
    Check a solver's output against the structural path postcondition.

    Nodes are checked in order: a repeated index fails before an unknown one
    found later in the sequence. Edges are checked only once every node has
    passed.

    Args:
        graph: The graph the path was computed on.
        path: Node sequence returned by a solver.

    Returns:
        The path as a list, otherwise unchanged.

    Raises:
        DuplicateNode: If a node index appears more than once.
        UnknownNode: If an index is not a node of graph.
        MissingEdge: If two consecutive nodes are not joined by an edge.
    """
    seen: Set[NodeIndex] = set()
    size = graph.size()
    for node in path:
        # Non-integers may be unhashable, so reject them before the seen lookup
        if isinstance(node, bool) or not isinstance(node, Integral):
            raise UnknownNode(path, node)
        if node in seen:
            raise DuplicateNode(path, node)
        seen.add(node)
        if not 0 <= node < size:
            raise UnknownNode(path, node)

    for u, v in zip(path, path[1:]):
        if not graph.has_edge(u, v):
            raise MissingEdge(path, u, v)

    return list(path)
