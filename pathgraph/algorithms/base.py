from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Union

from pathgraph.graph import NodeIndex, Weight

#: Tentative value tracked per node: a distance (shortest path) or a
#: bottleneck (widest path). The source of a widest-path search starts at INF.
Value = Union[int, float]

#: A path is the ordered list of node indices from source to target inclusive.
#: An empty list means "no path"; ``[src]`` is the trivial zero-edge path.
PathSeq = List[NodeIndex]

#: Predecessor map produced by the solvers: node -> the node it was reached from.
PredMap = Dict[NodeIndex, NodeIndex]

INF = float("inf")


class PathAlg(IntEnum):
    """
    Types of path finding algorithms
    """

    #: Minimum total edge weight (Dijkstra).
    SHORTEST = 1
    #: Maximum bottleneck, i.e. the largest minimum edge weight along the path.
    WIDEST = 2

    @classmethod
    def from_string(cls, value: str) -> PathAlg:
        """Parse a case-insensitive algorithm name such as ``"widest"``.

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(alg.name.lower() for alg in cls)
            raise ValueError(
                f"Unknown path algorithm '{value}'. Expected one of: {valid}."
            ) from None


__all__ = ["INF", "NodeIndex", "PathAlg", "PathSeq", "PredMap", "Value", "Weight"]
