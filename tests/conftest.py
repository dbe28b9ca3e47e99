"""Shared sample graphs.

Node indices are shown as letters in the diagrams: A=0, B=1, C=2, ...
Edge labels are weights.
"""

from __future__ import annotations

import pytest

from pathgraph.graph import IndexedDiGraph


@pytest.fixture
def triangle1():
    #         [1]       [2]
    #   A ───────► B ───────► C
    #   │                     ▲
    #   └─────────────────────┘
    #             [5]
    return IndexedDiGraph.from_edges(
        3,
        [(0, 1, 1), (1, 2, 2), (0, 2, 5)],
        labels=["A", "B", "C"],
    )


@pytest.fixture
def triangle_isolated():
    # triangle1 plus an isolated node D (index 3)
    return IndexedDiGraph.from_edges(
        4,
        [(0, 1, 1), (1, 2, 2), (0, 2, 5)],
        labels=["A", "B", "C", "D"],
    )


@pytest.fixture
def line1():
    #      [1]      [1]      [1]
    #  A ──────► B ──────► C ──────► D
    return IndexedDiGraph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1)])


@pytest.fixture
def diamond1():
    # Two equal-cost, equal-width routes from A to D.
    #
    #       [4]        [4]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   └────────►C─────────┘
    #       [4]        [4]
    return IndexedDiGraph.from_edges(
        4, [(0, 2, 4), (0, 1, 4), (2, 3, 4), (1, 3, 4)]
    )


@pytest.fixture
def square1():
    # Cheap route through B has a narrow link, wide route through C costs more.
    #
    #       [1]        [2]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   └────────►C─────────┘
    #       [7]        [9]
    return IndexedDiGraph.from_edges(
        4, [(0, 1, 1), (1, 3, 2), (0, 2, 7), (2, 3, 9)]
    )


@pytest.fixture
def graph_cycles():
    # Directed cycles, a self-loop and a back edge; E (4) is reachable only
    # through the cycle B -> C -> B.
    #
    #          [3]
    #   A ─────────► B ◄──┐ [6]
    #   ▲  [1]       │    │
    #   └────────────┤    │
    #                │[4] │
    #                ▼    │
    #                C ───┘
    #                │[2]        (C has a self-loop of weight 8)
    #                ▼
    #                D ─────────► E
    #                     [5]
    return IndexedDiGraph.from_edges(
        5,
        [
            (0, 1, 3),
            (1, 0, 1),
            (1, 2, 4),
            (2, 1, 6),
            (2, 2, 8),
            (2, 3, 2),
            (3, 4, 5),
        ],
    )
