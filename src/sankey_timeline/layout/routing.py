"""Link geometry: SVG path strings and arrowheads.

Direct links are drawn as thick ribbons (a single cubic curve stroked with
the node width) from the bottom of the target up to the top of the source.
Cross links are thin quadratic curves between node midpoints, finished
with a small triangle pointing into the target.
"""

from __future__ import annotations

__all__ = [
    "arrowhead",
    "cross_link_path",
    "direct_link_path",
    "format_number",
    "route_links",
]

import math
from collections.abc import Sequence

from sankey_timeline.layout.constants import LINK_TRIANGLE_SIZE, PATH_PRECISION
from sankey_timeline.parser.model import Link, PositionedNode


def format_number(value: float, precision: int = PATH_PRECISION) -> str:
    """Format a coordinate for a path string (``12``, ``12.5``, ``-0.3333``)."""
    rounded = round(float(value), precision)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0")


def _pt(x: float, y: float) -> str:
    return f"{format_number(x)} {format_number(y)}"


def direct_link_path(s: PositionedNode, t: PositionedNode) -> str:
    """Cubic curve from the target's bottom edge to the source's top edge.

    Both ends use the horizontal midpoint so the stroke keeps a constant
    thickness along the ribbon.
    """
    cy = (t.y1 + s.y0) / 2
    return (
        f"M {_pt(t.x_mid, t.y1)} "
        f"C {_pt(t.x_mid, cy)}, {_pt(s.x_mid, cy)}, {_pt(s.x_mid, s.y0)}"
    )


def cross_link_path(s: PositionedNode, t: PositionedNode) -> tuple[str, tuple[float, float]]:
    """Quadratic curve between midpoints; returns ``(d, control_point)``.

    The control point shares the target's y so the curve arrives flat.
    """
    control = ((s.x_mid + t.x_mid) / 2, t.y_mid)
    d = f"M {_pt(s.x_mid, s.y_mid)} Q {_pt(*control)}, {_pt(t.x_mid, t.y_mid)}"
    return d, control


def arrowhead(
    t: PositionedNode,
    control_x: float,
    size: float = LINK_TRIANGLE_SIZE,
) -> list[tuple[float, float]]:
    """Triangle vertices at the target midpoint, tip first.

    The curve always enters the target horizontally, so only the side of
    the control point matters: it points left when the curve comes from
    the right.
    """
    long_side = math.cos(math.pi / 3) * size
    short_side = math.sin(math.pi / 6) * size
    x, y = t.x_mid, t.y_mid

    if control_x > x:
        return [
            (x - long_side, y),
            (x + short_side, y + long_side),
            (x + short_side, y - long_side),
        ]
    return [
        (x + long_side, y),
        (x - short_side, y + long_side),
        (x - short_side, y - long_side),
    ]


def format_points(points: Sequence[tuple[float, float]]) -> str:
    return " ".join(f"{format_number(x)}, {format_number(y)}" for x, y in points)


def route_links(links: Sequence[Link], show_cross_links: bool = True) -> list[Link]:
    """Compute ``d``, ``stroke_width`` and arrowheads for each link.

    Geometry is reset first so a link never keeps output from an earlier
    pass. Unresolved links and, when ``show_cross_links`` is False, cross
    links are left without geometry.
    """
    for link in links:
        link.d = None
        link.stroke_width = None
        link.triangle = None
        link.triangle_points = []

        s, t = link.source_node, link.target_node
        if s is None or t is None:
            continue

        if link.is_direct:
            link.d = direct_link_path(s, t)
            link.stroke_width = s.width
        elif link.is_cross and show_cross_links:
            link.d, (control_x, _) = cross_link_path(s, t)
            link.triangle_points = arrowhead(t, control_x)
            link.triangle = format_points(link.triangle_points)

    return list(links)
