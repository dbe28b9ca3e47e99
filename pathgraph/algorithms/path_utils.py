from __future__ import annotations

from typing import List, Optional, Tuple

from pathgraph.errors import DuplicateNode
from pathgraph.graph import IndexedDiGraph, NodeIndex, Weight
from pathgraph.algorithms.base import PathSeq, PredMap


def resolve_to_path(src_node: NodeIndex, dst_node: NodeIndex, pred: PredMap) -> PathSeq:
    """
    Rebuild the source->destination path from a single-predecessor map.

    Args:
        src_node: Source node index.
        dst_node: Destination node index.
        pred: Predecessor map from ``spf`` or ``widest``. The source itself has
            no entry.

    Returns:
        ``[src_node]`` if both ends coincide, ``[]`` if dst_node was never
        reached, otherwise the node sequence from src_node to dst_node.

    Raises:
        DuplicateNode: If following the predecessors revisits a node.
    """
    if src_node == dst_node:
        return [src_node]
    if dst_node not in pred:
        return []

    reversed_path = [dst_node]
    seen = {dst_node}
    node = dst_node
    while node != src_node:
        node = pred[node]
        if node in seen:
            raise DuplicateNode(list(reversed(reversed_path)), node)
        seen.add(node)
        reversed_path.append(node)

    reversed_path.reverse()
    return reversed_path


def path_edges(path: PathSeq) -> List[Tuple[NodeIndex, NodeIndex]]:
    """Return the consecutive (u, v) pairs of a path."""
    return list(zip(path, path[1:]))


def path_cost(graph: IndexedDiGraph, path: PathSeq) -> Weight:
    """Total weight of the edges along ``path`` (0 for fewer than two nodes)."""
    return sum(graph.weight(u, v) for u, v in path_edges(path))


def path_bottleneck(graph: IndexedDiGraph, path: PathSeq) -> Optional[Weight]:
    """
    Smallest edge weight along ``path``.

    Returns:
        The bottleneck weight, or None when the path has no edges.
    """
    weights = [graph.weight(u, v) for u, v in path_edges(path)]
    return min(weights) if weights else None
