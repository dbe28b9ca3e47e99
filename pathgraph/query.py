"""Path queries against a frozen graph.

Every query checks its node indices, runs the selected solver and then runs
``validate_path`` on the result, so both algorithms hand out paths under the
same postcondition. A validation failure means a solver defect; it is logged
at ERROR level and re-raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pathgraph.errors import PathValidationError
from pathgraph.graph import IndexedDiGraph, NodeIndex, Weight
from pathgraph.io import LabeledGraph
from pathgraph.logging import get_logger
from pathgraph.validate import validate_path
from pathgraph.algorithms.base import PathAlg, PathSeq
from pathgraph.algorithms.path_utils import path_bottleneck, path_cost, path_edges
from pathgraph.algorithms.spf import shortest_path
from pathgraph.algorithms.widest import widest_path

logger = get_logger(__name__)

_SOLVERS: Dict[
    PathAlg, Callable[[IndexedDiGraph, NodeIndex, NodeIndex], PathSeq]
] = {
    PathAlg.SHORTEST: shortest_path,
    PathAlg.WIDEST: widest_path,
}


def find_path(
    graph: IndexedDiGraph,
    src_node: NodeIndex,
    dst_node: NodeIndex,
    algorithm: PathAlg = PathAlg.SHORTEST,
) -> PathSeq:
    """
    Run one path query and validate its result.

    Args:
        graph: The graph to query.
        src_node: Source node index.
        dst_node: Target node index.
        algorithm: Which optimality criterion to use.

    Returns:
        The validated node sequence (empty if dst_node is unreachable).

    Raises:
        OutOfRange: If either index is not a node of graph. No search is run.
        PathValidationError: If the solver produced a malformed path.
    """
    graph.check_node(src_node, "source")
    graph.check_node(dst_node, "target")

    algorithm = PathAlg(algorithm)
    path = _SOLVERS[algorithm](graph, src_node, dst_node)
    try:
        validate_path(graph, path)
    except PathValidationError as exc:
        logger.error(
            f"{algorithm.name.lower()} path {src_node} -> {dst_node} failed "
            f"validation: {exc} (path={exc.path})"
        )
        raise

    logger.debug(
        f"{algorithm.name.lower()} path {src_node} -> {dst_node}: "
        f"{path if path else 'no path'}"
    )
    return path


def find_shortest_path(
    graph: IndexedDiGraph, src_node: NodeIndex, dst_node: NodeIndex
) -> PathSeq:
    """Minimum-total-weight path; see ``find_path``."""
    return find_path(graph, src_node, dst_node, PathAlg.SHORTEST)


def find_widest_path(
    graph: IndexedDiGraph, src_node: NodeIndex, dst_node: NodeIndex
) -> PathSeq:
    """Maximum-bottleneck path; see ``find_path``."""
    return find_path(graph, src_node, dst_node, PathAlg.WIDEST)


@dataclass(frozen=True)
class PathResult:
    """
    A validated path together with what a presentation layer needs to show it.

    Attributes:
        algorithm: Algorithm that produced the path.
        source: Source node index.
        target: Target node index.
        nodes: Node indices along the path (empty when no path exists).
        labels: Display labels of ``nodes``.
        edges: The (u, v) pairs the path traverses, i.e. the edges to mark.
        value: Total weight for SHORTEST, bottleneck for WIDEST; None when the
            path has no edges.
    """

    algorithm: PathAlg
    source: NodeIndex
    target: NodeIndex
    nodes: Tuple[NodeIndex, ...]
    labels: Tuple[str, ...]
    edges: Tuple[Tuple[NodeIndex, NodeIndex], ...]
    value: Optional[Weight]

    @property
    def found(self) -> bool:
        return bool(self.nodes)

    @property
    def trivial(self) -> bool:
        return self.source == self.target

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict."""
        return {
            "algorithm": self.algorithm.name.lower(),
            "source": self.source,
            "target": self.target,
            "found": self.found,
            "nodes": list(self.nodes),
            "labels": list(self.labels),
            "edges": [list(edge) for edge in self.edges],
            "value": self.value,
        }


def find_path_by_label(
    labeled: LabeledGraph,
    src_label: str,
    dst_label: str,
    algorithm: PathAlg = PathAlg.SHORTEST,
) -> PathResult:
    """
    Query by node labels instead of indices.

    Raises:
        UnknownLabel: If either label is not in the graph.
        PathValidationError: If the solver produced a malformed path.
    """
    node_map = labeled.node_map
    src_node = node_map.index(src_label)
    dst_node = node_map.index(dst_label)

    algorithm = PathAlg(algorithm)
    graph = labeled.graph
    path = find_path(graph, src_node, dst_node, algorithm)

    value: Optional[Weight] = None
    if len(path) >= 2:
        if algorithm == PathAlg.SHORTEST:
            value = path_cost(graph, path)
        else:
            value = path_bottleneck(graph, path)

    edges: List[Tuple[NodeIndex, NodeIndex]] = path_edges(path)
    return PathResult(
        algorithm=algorithm,
        source=src_node,
        target=dst_node,
        nodes=tuple(path),
        labels=tuple(node_map.to_name[idx] for idx in path),
        edges=tuple(edges),
        value=value,
    )
