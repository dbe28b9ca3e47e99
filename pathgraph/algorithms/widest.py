"""Maximum-bottleneck (widest) path search.

A Dijkstra variant over bottlenecks instead of distances. Extending a path by
an edge can only keep or lower its bottleneck, so the frontier node with the
largest tentative bottleneck cannot be improved through any node that is
still on the frontier, which is what makes finalizing it safe.
"""

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from pathgraph.graph import IndexedDiGraph, NodeIndex
from pathgraph.algorithms.base import INF, PathSeq, PredMap, Value
from pathgraph.algorithms.path_utils import resolve_to_path
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def widest(
    graph: IndexedDiGraph,
    src_node: NodeIndex,
    dst_node: Optional[NodeIndex] = None,
) -> Tuple[Dict[NodeIndex, Value], PredMap]:
    """
    Compute maximum-bottleneck values from a source node.

    The source starts at ``INF``; every other node is unreached until an edge
    leads to it. Nodes are finalized in order of decreasing bottleneck, ties
    broken by the smaller node index. Relaxing ``u -> w`` proposes
    ``min(bottleneck[u], weight)`` and is accepted only if strictly larger than
    the current value of ``w``.

    Args:
        graph: The graph to search.
        src_node: The source node index.
        dst_node: If given, stop as soon as this node is finalized.

    Returns:
        A tuple of (bottlenecks, pred):
          - bottlenecks: Maps each reached node to its bottleneck from
            src_node (``INF`` for src_node itself).
          - pred: Maps each reached node except src_node to its predecessor.

    Raises:
        OutOfRange: If src_node or dst_node is not a node of graph.
    """
    graph.check_node(src_node, "source")
    if dst_node is not None:
        graph.check_node(dst_node, "target")

    bottlenecks: Dict[NodeIndex, Value] = {src_node: INF}
    pred: PredMap = {}
    finalized: Set[NodeIndex] = set()
    # Max-heap through negated keys
    max_pq: List[Tuple[Value, NodeIndex]] = [(-INF, src_node)]

    while max_pq:
        neg_width, node_id = heappop(max_pq)
        if node_id in finalized:
            continue
        finalized.add(node_id)
        if node_id == dst_node:
            break

        current_width = -neg_width
        for neighbor_id, weight in graph.out_edges_of(node_id):
            if neighbor_id in finalized:
                continue
            candidate = min(current_width, weight)
            if neighbor_id not in bottlenecks or candidate > bottlenecks[neighbor_id]:
                bottlenecks[neighbor_id] = candidate
                pred[neighbor_id] = node_id
                heappush(max_pq, (-candidate, neighbor_id))

    logger.debug(
        f"Widest search from {src_node}: finalized {len(finalized)} of "
        f"{graph.size()} nodes"
    )
    return bottlenecks, pred


def widest_path(
    graph: IndexedDiGraph, src_node: NodeIndex, dst_node: NodeIndex
) -> PathSeq:
    """
    Return the path from src_node to dst_node with the largest bottleneck.

    Returns:
        ``[src_node]`` when both ends coincide, ``[]`` when dst_node is
        unreachable, otherwise the full node sequence.

    Raises:
        OutOfRange: If either index is not a node of graph.
    """
    graph.check_node(src_node, "source")
    graph.check_node(dst_node, "target")
    if src_node == dst_node:
        return [src_node]

    _, pred = widest(graph, src_node, dst_node)
    return resolve_to_path(src_node, dst_node, pred)
