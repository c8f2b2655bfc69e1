"""Layout coordinator: filtering, time scale, columns, placement and links.

Each call is a pure pass over the raw entities: every node and link it
returns is new, so repeating a call with the same arguments yields the
same layout.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sankey_timeline.layout.columns import assign_columns
from sankey_timeline.layout.constants import GRID_GAP, NODE_GAP, YEAR_STEP
from sankey_timeline.layout.links import build_links
from sankey_timeline.layout.normalize import group_by_tradition, normalize_entities
from sankey_timeline.layout.placement import place_columns
from sankey_timeline.layout.routing import route_links
from sankey_timeline.layout.scale import TimeScale, apply_time_scale
from sankey_timeline.parser.model import Entity, Filters, Layout, PositionedNode

logger = logging.getLogger(__name__)


def compute_layout(
    entities: Sequence[Entity] | None,
    *,
    min_year: float,
    max_year: float,
    width: float,
    height: float,
    filters: Filters | None = None,
    is_mobile: bool = False,
    show_cross_links: bool = True,
    year_step: float = YEAR_STEP,
    node_gap: float = NODE_GAP,
    grid_gap: float = GRID_GAP,
) -> Layout:
    """Position every entity and route every link.

    ``min_year``/``max_year`` come from the full unfiltered dataset (see
    :func:`sankey_timeline.layout.canvas.compute_canvas_size`). Missing or
    empty input is logged and yields an empty layout.
    """
    if not entities:
        logger.warning("No timeline data to lay out")
        return Layout()

    groups = group_by_tradition(normalize_entities(entities, max_year, filters))
    traditions = sorted(groups)
    scale = TimeScale(min_year, max_year, height, year_step=year_step)

    nodes: list[PositionedNode] = []
    column_counts: dict[str, int] = {}
    for i, key in enumerate(traditions):
        tnodes = sorted(groups[key], key=lambda n: n.year_start)
        apply_time_scale(tnodes, scale)
        columns = assign_columns(tnodes, node_gap=node_gap)
        place_columns(tnodes, columns, len(traditions), i, width,
                      is_mobile=is_mobile, grid_gap=grid_gap)
        column_counts[key] = columns
        nodes.extend(tnodes)

    links = route_links(build_links(nodes), show_cross_links=show_cross_links)
    logger.debug("Laid out %d nodes in %d traditions, %d links",
                 len(nodes), len(traditions), len(links))

    return Layout(nodes=nodes, links=links, column_counts=column_counts)
