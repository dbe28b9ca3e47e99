from __future__ import annotations

from numbers import Integral
from typing import Any, Iterable, Optional, Sequence, Tuple

import networkx as nx

from pathgraph.errors import InvalidArgument, OutOfRange

NodeIndex = int
Weight = int
EdgeTriple = Tuple[NodeIndex, NodeIndex, Weight]


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class IndexedDiGraph(nx.DiGraph):
    """
    A directed, integer-weighted graph over a fixed, dense node set.

    This class enforces:
      - Nodes are exactly the integers ``0 .. node_count - 1``, created up front.
      - At most one edge per ordered pair; adding it again replaces the weight.
      - Edge endpoints must be existing node indices (OutOfRange otherwise).
      - Weights are non-negative integers (InvalidArgument otherwise).
      - After ``freeze()`` any mutation raises ``networkx.NetworkXError``.

    ``size()`` returns the node count, shadowing ``networkx.Graph.size`` (which
    counts edges). ``number_of_edges()`` is overridden to keep returning the
    edge count.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(
        self,
        node_count: int = 0,
        labels: Optional[Sequence[str]] = None,
        **attr: Any,
    ) -> None:
        """
        Initialize an IndexedDiGraph with ``node_count`` isolated nodes.

        Args:
            node_count: Number of nodes. Must be a non-negative integer.
            labels: Optional display label per node, in index order.
            **attr: Graph-level attributes forwarded to networkx.

        Raises:
            InvalidArgument: If node_count is negative or not an integer, or if
                labels does not have exactly node_count entries.
        """
        if not _is_int(node_count) or node_count < 0:
            raise InvalidArgument(
                f"Node count must be a non-negative integer, got {node_count!r}."
            )
        if labels is not None and len(labels) != node_count:
            raise InvalidArgument(
                f"Expected {node_count} label(s), got {len(labels)}."
            )
        super().__init__(**attr)
        if labels is None:
            self.add_nodes_from(range(node_count))
        else:
            self.add_nodes_from(
                (idx, {"label": label}) for idx, label in enumerate(labels)
            )

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[EdgeTriple],
        labels: Optional[Sequence[str]] = None,
    ) -> IndexedDiGraph:
        """
        Build a frozen graph from a complete edge list.

        Edges are inserted in order, so a later triple for the same ordered
        pair overwrites the weight of an earlier one.

        Args:
            node_count: Number of nodes.
            edges: Iterable of (u, v, weight) triples.
            labels: Optional display label per node.

        Returns:
            The frozen graph.
        """
        graph = cls(node_count, labels=labels)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph.freeze()

    #
    # Node access
    #
    def size(self) -> int:
        """Return the node count."""
        return len(self._node)

    def number_of_edges(
        self, u: Optional[NodeIndex] = None, v: Optional[NodeIndex] = None
    ) -> int:
        """Return the edge count, or whether ``u -> v`` exists (0 or 1)."""
        # networkx counts edges through size(), which is overridden above
        if u is None:
            return int(nx.DiGraph.size(self))
        return super().number_of_edges(u, v)

    def check_node(self, index: Any, role: str = "node") -> NodeIndex:
        """
        Ensure ``index`` names a node of this graph.

        Args:
            index: Candidate node index.
            role: Used in the error message (e.g. "source", "target").

        Returns:
            The index, unchanged.

        Raises:
            OutOfRange: If index is not an integer in ``[0, size())``.
        """
        if not _is_int(index) or not 0 <= index < len(self._node):
            raise OutOfRange(index, len(self._node), role)
        return index

    def label(self, index: NodeIndex) -> str:
        """Return the display label of a node, or its index as a string."""
        self.check_node(index)
        return str(self._node[index].get("label", index))

    #
    # Edge management
    #
    def add_edge(self, u: NodeIndex, v: NodeIndex, weight: Weight) -> None:
        """
        Insert or replace the directed edge ``u -> v``.

        Args:
            u: Source node index.
            v: Target node index.
            weight: Non-negative integer weight.

        Raises:
            OutOfRange: If u or v is not a node index.
            InvalidArgument: If weight is negative or not an integer.
        """
        self.check_node(u, "source")
        self.check_node(v, "target")
        if not _is_int(weight):
            raise InvalidArgument(f"Edge weight must be an integer, got {weight!r}.")
        if weight < 0:
            raise InvalidArgument(
                f"Edge {u} -> {v} has negative weight {weight}; "
                "weights must be non-negative."
            )
        super().add_edge(u, v, weight=int(weight))

    def weight(self, u: NodeIndex, v: NodeIndex) -> Weight:
        """
        Return the weight of edge ``u -> v``.

        Raises:
            KeyError: If there is no such edge.
        """
        try:
            return self._adj[u][v]["weight"]
        except KeyError:
            raise KeyError(f"No edge from {u!r} to {v!r}.") from None

    def out_edges_of(self, u: NodeIndex) -> Iterable[Tuple[NodeIndex, Weight]]:
        """Yield (target, weight) for each outgoing edge of ``u``."""
        for v, attr in self._adj[u].items():
            yield v, attr["weight"]

    def freeze(self) -> IndexedDiGraph:
        """Freeze the graph in place and return it."""
        return nx.freeze(self)

    @property
    def is_frozen(self) -> bool:
        return nx.is_frozen(self)
