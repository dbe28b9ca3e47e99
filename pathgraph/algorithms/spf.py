from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from pathgraph.graph import IndexedDiGraph, NodeIndex, Weight
from pathgraph.algorithms.base import PathSeq, PredMap
from pathgraph.algorithms.path_utils import resolve_to_path
from pathgraph.logging import get_logger

logger = get_logger(__name__)


def spf(
    graph: IndexedDiGraph,
    src_node: NodeIndex,
    dst_node: Optional[NodeIndex] = None,
) -> Tuple[Dict[NodeIndex, Weight], PredMap]:
    """
    Compute minimum-cost distances from a source node using Dijkstra's method.

    Nodes are finalized in order of increasing tentative distance; ties are
    broken by the smaller node index, so the result is deterministic. An edge
    only replaces a node's predecessor when it strictly lowers the distance.

    Args:
        graph: The graph to search. All weights must be non-negative.
        src_node: The source node index.
        dst_node: If given, stop as soon as this node is finalized.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its distance from src_node. When
            the search stops early, nodes still on the frontier carry their
            tentative distance.
          - pred: Maps each reached node except src_node to its predecessor.

    Raises:
        OutOfRange: If src_node or dst_node is not a node of graph.
    """
    graph.check_node(src_node, "source")
    if dst_node is not None:
        graph.check_node(dst_node, "target")

    costs: Dict[NodeIndex, Weight] = {src_node: 0}
    pred: PredMap = {}
    finalized: Set[NodeIndex] = set()
    min_pq: List[Tuple[Weight, NodeIndex]] = [(0, src_node)]

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if node_id in finalized:
            continue
        finalized.add(node_id)
        if node_id == dst_node:
            break

        for neighbor_id, weight in graph.out_edges_of(node_id):
            if neighbor_id in finalized:
                continue
            new_cost = current_cost + weight
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                heappush(min_pq, (new_cost, neighbor_id))

    logger.debug(
        f"SPF from {src_node}: finalized {len(finalized)} of {graph.size()} nodes"
    )
    return costs, pred


def shortest_path(
    graph: IndexedDiGraph, src_node: NodeIndex, dst_node: NodeIndex
) -> PathSeq:
    """
    Return the minimum-total-weight path from src_node to dst_node.

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

    _, pred = spf(graph, src_node, dst_node)
    return resolve_to_path(src_node, dst_node, pred)
