"""Column assignment within a tradition (horizontal de-overlapping).

Greedy first-fit interval packing: nodes are visited in ``year_start``
order and each one joins the lowest-indexed column whose most recent node
ends far enough above it. This is not guaranteed to use the minimum number
of columns, but earlier nodes always favour the leftmost column.
"""

from __future__ import annotations

__all__ = ["assign_columns"]

from collections.abc import Sequence

from sankey_timeline.layout.constants import NODE_GAP
from sankey_timeline.parser.model import PositionedNode


def assign_columns(nodes: Sequence[PositionedNode], node_gap: float = NODE_GAP) -> int:
    """Assign ``node.column`` for nodes sorted by ``year_start``.

    Each column remembers the ``y0`` (pixel top) of its latest node. A node
    fits a column when its bottom ``y1`` lies more than ``node_gap`` below
    that top (y grows downward, towards earlier years).

    Returns the number of columns used.
    """
    columns: list[float] = []

    for node in nodes:
        for j, top in enumerate(columns):
            if node.y1 < top - node_gap:
                columns[j] = node.y0
                node.column = j
                break
        else:
            columns.append(node.y0)
            node.column = len(columns) - 1

    return len(columns)
