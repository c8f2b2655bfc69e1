"""Horizontal placement: one grid slot per tradition, split into columns."""

from __future__ import annotations

__all__ = ["node_width", "place_columns"]

from collections.abc import Iterable

from sankey_timeline.layout.constants import GRID_GAP, MOBILE_NODE_WIDTH, NODE_WIDTH
from sankey_timeline.parser.model import PositionedNode


def node_width(is_mobile: bool) -> float:
    return MOBILE_NODE_WIDTH if is_mobile else NODE_WIDTH


def place_columns(
    nodes: Iterable[PositionedNode],
    columns: int,
    grids: int,
    grid: int,
    width: float,
    is_mobile: bool = False,
    grid_gap: float = GRID_GAP,
) -> None:
    """Set x extents for the nodes of one tradition.

    ``grids`` is the number of traditions and ``grid`` this tradition's
    slot index. The slot is ``width / grids`` wide and its usable part
    (minus ``grid_gap``) is split evenly across ``columns``. Nodes are
    centred in their column with a fixed rendered width.
    """
    grid_width = width / grids
    column_width = (grid_width - grid_gap) / max(columns, 1)
    w = node_width(is_mobile)

    for node in nodes:
        node.x_mid = (
            column_width * node.column
            + column_width / 2
            + grid * (grid_width + grid_gap / 2)
        )
        node.x0 = node.x_mid - w / 2
        node.x1 = node.x_mid + w / 2
        node.width = w
