"""Edge-list parsing and export.

The textual format is one edge per line::

    <sourceLabel> <targetLabel> <integerWeight>

Labels are mapped to dense node indices in first-seen order, so the first
label on the first line becomes node 0.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from pathgraph.config import EDGE_LIST_CONFIG, EdgeListConfig
from pathgraph.errors import EdgeListFormatError, UnknownLabel
from pathgraph.graph import EdgeTriple, IndexedDiGraph, NodeIndex
from pathgraph.logging import get_logger

logger = get_logger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
# Weights are 32-bit signed integers
_WEIGHT_MIN = -(2**31)
_WEIGHT_MAX = 2**31 - 1


@dataclass
class NodeMap:
    """Bidirectional mapping between node labels and integer indices.

    Attributes:
        to_index: Maps labels to node indices.
        to_name: Maps node indices back to labels.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[str, NodeIndex] = field(default_factory=dict)
    to_name: Dict[NodeIndex, str] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[str]) -> NodeMap:
        """Create a NodeMap from a list of labels in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def index(self, label: str) -> NodeIndex:
        """Return the index of ``label``.

        Raises:
            UnknownLabel: If the label is not mapped.
        """
        try:
            return self.to_index[label]
        except KeyError:
            raise UnknownLabel(label) from None

    def names(self) -> List[str]:
        """Labels in index order."""
        return [self.to_name[i] for i in range(len(self.to_name))]

    def __contains__(self, label: object) -> bool:
        return label in self.to_index

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


@dataclass(frozen=True)
class LabeledGraph:
    """A frozen graph together with the labels it was parsed from."""

    graph: IndexedDiGraph
    node_map: NodeMap


def _parse_weight(token: str) -> Optional[int]:
    """Return the weight token as an int, or None if it is not a 32-bit integer."""
    if not _INT_RE.fullmatch(token):
        return None
    # 32-bit values have at most 10 significant digits
    if len(token.lstrip("+-").lstrip("0")) > 10:
        return None
    value = int(token)
    if not _WEIGHT_MIN <= value <= _WEIGHT_MAX:
        return None
    return value


def _tokenize(
    lines: List[str], config: EdgeListConfig
) -> List[Tuple[str, str, int]]:
    """Split and check every line before anything is built."""
    rows: List[Tuple[str, str, int]] = []
    for line_no, line in enumerate(lines):
        tokens = line.rstrip("\r\n").split(config.separator)
        # Trailing empty tokens are dropped, interior ones are kept
        while tokens and not tokens[-1]:
            tokens.pop()
        if len(tokens) != 3:
            raise EdgeListFormatError(
                f"Format error on line {line_no} of your graph. "
                f"Check the format is '{config.format_hint()}'",
                line_no,
            )
        src, dst, weight_token = tokens
        weight = _parse_weight(weight_token)
        if weight is None:
            raise EdgeListFormatError(
                f"Weight value on line {line_no} is not an integer value", line_no
            )
        if weight < 0:
            raise EdgeListFormatError(
                f"Weight value on line {line_no} is negative", line_no
            )
        rows.append((src, dst, weight))
    return rows


def parse_edge_list(
    data: Union[str, Iterable[str]],
    config: Optional[EdgeListConfig] = None,
) -> LabeledGraph:
    """
    Build a frozen graph from an edge list.

    Args:
        data: The whole text, or an iterable of lines.
        config: Format options. Defaults to ``EDGE_LIST_CONFIG``.

    Returns:
        LabeledGraph with one node per distinct label and one edge per line.
        A later line for an already-seen ordered pair overwrites its weight.

    Raises:
        EdgeListFormatError: If a line does not have exactly three tokens or
            its weight is not a non-negative integer. Nothing is built.
    """
    if config is None:
        config = EDGE_LIST_CONFIG

    if isinstance(data, str):
        text = data.strip() if config.strip_input else data
        lines = text.split("\n")
    else:
        lines = list(data)

    rows = _tokenize(lines, config)

    names: List[str] = []
    to_index: Dict[str, NodeIndex] = {}
    edges: List[EdgeTriple] = []
    for src, dst, weight in rows:
        for label in (src, dst):
            if label not in to_index:
                to_index[label] = len(names)
                names.append(label)
        edges.append((to_index[src], to_index[dst], weight))

    graph = IndexedDiGraph.from_edges(len(names), edges, labels=names)
    logger.debug(
        f"Parsed edge list: {len(rows)} line(s), {graph.size()} node(s), "
        f"{graph.number_of_edges()} edge(s)"
    )
    return LabeledGraph(graph=graph, node_map=NodeMap.from_names(names))


def read_edge_list(
    path: Union[str, Path],
    config: Optional[EdgeListConfig] = None,
) -> LabeledGraph:
    """
    Read and parse an edge-list file. ``"-"`` reads standard input.

    Raises:
        OSError: If the file cannot be read.
        EdgeListFormatError: See ``parse_edge_list``.
    """
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return parse_edge_list(text, config)


def graph_to_edgelist(
    graph: IndexedDiGraph,
    node_map: Optional[NodeMap] = None,
    separator: str = " ",
) -> List[str]:
    """
    Export a graph as edge-list lines.

    Edges are listed by ascending source index, then ascending target index.
    Labels come from ``node_map`` when given, otherwise from the node ``label``
    attribute, falling back to the index itself.

    Args:
        graph: The graph to export.
        node_map: Optional label mapping.
        separator: Token separator (default is a space).

    Returns:
        One line per edge, without trailing newlines.
    """

    def name(idx: NodeIndex) -> str:
        if node_map is not None:
            return node_map.to_name[idx]
        return graph.label(idx)

    lines: List[str] = []
    for u in range(graph.size()):
        for v, weight in sorted(graph.out_edges_of(u)):
            lines.append(separator.join((name(u), name(v), str(weight))))
    return lines
