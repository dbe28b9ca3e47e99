"""Exception types raised by pathgraph.

Every error derives from ``PathGraphError`` and from the builtin exception a
caller would naturally catch for the same condition (``ValueError`` for bad
arguments, ``IndexError`` for bad node indices, ``KeyError`` for unknown
labels). Path validation failures derive from ``AssertionError``: they signal
a defect in a solver, not a user mistake.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class PathGraphError(Exception):
    """Base class for all pathgraph errors."""


class InvalidArgument(PathGraphError, ValueError):
    """Malformed construction parameter (negative node count, bad weight)."""


class OutOfRange(PathGraphError, IndexError):
    """A node index lies outside ``[0, size)``.

    Attributes:
        index: The offending index.
        size: Node count of the graph it was checked against.
        role: What the index was used for (``"source"``, ``"target"``, ...).
    """

    def __init__(self, index: Any, size: int, role: str = "node") -> None:
        self.index = index
        self.size = size
        self.role = role
        super().__init__(
            f"{role.capitalize()} index {index!r} is out of range for a graph "
            f"with {size} node(s)."
        )


class PathValidationError(PathGraphError, AssertionError):
    """A solver returned a path that breaks its own postcondition.

    Attributes:
        path: The rejected node sequence.
    """

    message = "Invalid path"

    def __init__(self, path: Sequence[int], detail: Optional[str] = None) -> None:
        self.path = list(path)
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class DuplicateNode(PathValidationError):
    """A node index appears more than once in a path."""

    message = "Duplicate nodes found in path"

    def __init__(self, path: Sequence[int], node: int) -> None:
        self.node = node
        super().__init__(path, f"node {node} repeats in {list(path)}")


class UnknownNode(PathValidationError):
    """A path contains an index that is not a node of the graph."""

    message = "Missing node found in path"

    def __init__(self, path: Sequence[int], node: Any) -> None:
        self.node = node
        super().__init__(path, f"node {node!r} is not in the graph")


class MissingEdge(PathValidationError):
    """Two consecutive path nodes are not joined by an edge."""

    message = "Missing Edge"

    def __init__(self, path: Sequence[int], u: int, v: int) -> None:
        self.u = u
        self.v = v
        super().__init__(path, f"no edge {u} -> {v}")


class EdgeListFormatError(PathGraphError, ValueError):
    """An edge-list line could not be parsed.

    Attributes:
        line_no: Zero-based line number of the offending line.
    """

    def __init__(self, message: str, line_no: int) -> None:
        self.line_no = line_no
        super().__init__(message)


class UnknownLabel(PathGraphError, KeyError):
    """A node label is not present in the graph."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the label only.
        return "Source or Target Id not found in Graph"
