"""SVG generation for timelines using drawsvg."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from sankey_timeline.layout.canvas import Year
from sankey_timeline.layout.scale import TimeScale
from sankey_timeline.parser.model import Layout, Link, PositionedNode
from sankey_timeline.render.constants import (
    AXIS_LABEL_GAP,
    AXIS_WIDTH,
    CANVAS_PADDING,
    HEADER_HEIGHT,
    MIN_LABEL_NODE_HEIGHT,
    NODE_LABEL_GAP,
    TITLE_HEIGHT,
)
from sankey_timeline.render.style import Theme


def render_svg(
    layout: Layout,
    theme: Theme,
    width: float,
    height: float,
    scale: TimeScale | None = None,
    ticks: Sequence[Year] | None = None,
    title: str = "",
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a computed layout to an SVG string.

    ``width``/``height`` are the timeline dimensions the layout was
    computed for; the axis, headers and padding are added around them.
    Links without a path (unresolved, or hidden cross links) are skipped.
    """
    if not layout.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    top = padding + HEADER_HEIGHT + (TITLE_HEIGHT if title else 0)
    left = padding + AXIS_WIDTH
    svg_width = int(round(left + width + padding))
    svg_height = int(round(top + height + padding))

    d = draw.Drawing(svg_width, svg_height)

    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            padding, padding + theme.title_font_size,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    if scale is not None and ticks:
        _render_year_axis(d, ticks, scale, theme, left, top, width)

    _render_headers(d, layout, theme, left, top)

    content = draw.Group(transform=f"translate({left},{top})")
    _render_direct_links(content, layout.links, theme)
    _render_nodes(content, layout.nodes, theme)
    _render_cross_links(content, layout.links, theme)
    d.append(content)

    return d.as_svg()


def _link_opacity(link: Link, base: float, theme: Theme) -> float:
    s, t = link.source_node, link.target_node
    if (s and s.filter_out) or (t and t.filter_out):
        return base * theme.filtered_opacity
    return base


def _render_year_axis(
    d: draw.Drawing,
    ticks: Sequence[Year],
    scale: TimeScale,
    theme: Theme,
    left: float,
    top: float,
    width: float,
) -> None:
    """Render year labels and horizontal grid lines."""
    for tick in ticks:
        y = top + scale(tick.value)
        if tick.type != "minor":
            d.append(draw.Text(
                str(tick.value),
                theme.axis_font_size,
                left - AXIS_LABEL_GAP, y,
                fill=theme.axis_color,
                font_family=theme.label_font_family,
                text_anchor="end",
                dominant_baseline="central",
            ))
        d.append(draw.Line(
            left, y, left + width, y,
            stroke=theme.grid_color,
            stroke_width=1.0 if tick.type == "major" else 0.5,
        ))


def _render_headers(
    d: draw.Drawing,
    layout: Layout,
    theme: Theme,
    left: float,
    top: float,
) -> None:
    """Render one tradition name above the leftmost column of its slot."""
    first_nodes: dict[str, PositionedNode] = {}
    for node in layout.nodes:
        current = first_nodes.get(node.tradition_key)
        if current is None or node.x0 < current.x0:
            first_nodes[node.tradition_key] = node

    for key in layout.traditions():
        node = first_nodes.get(key)
        if node is None:
            continue
        d.append(draw.Text(
            node.entity.tradition.name,
            theme.header_font_size,
            left + node.x0, top - HEADER_HEIGHT / 2,
            fill=node.color,
            font_family=theme.label_font_family,
            font_weight="bold",
            dominant_baseline="central",
        ))


def _render_direct_links(group: draw.Group, links: Sequence[Link], theme: Theme) -> None:
    """Render direct links as ribbons as wide as their source node."""
    for link in links:
        if not link.is_direct or link.d is None:
            continue
        group.append(draw.Path(
            d=link.d,
            stroke=link.source_node.color,
            stroke_width=link.stroke_width,
            stroke_opacity=_link_opacity(link, theme.direct_link_opacity, theme),
            fill="none",
        ))


def _render_cross_links(group: draw.Group, links: Sequence[Link], theme: Theme) -> None:
    """Render cross links as thin dashed curves with an arrowhead."""
    for link in links:
        if not link.is_cross or link.d is None:
            continue
        color = theme.cross_link_color or link.source_node.color
        opacity = _link_opacity(link, theme.cross_link_opacity, theme)
        group.append(draw.Path(
            d=link.d,
            stroke=color,
            stroke_width=theme.cross_link_width,
            stroke_dasharray=theme.cross_link_dash,
            stroke_opacity=opacity,
            fill="none",
        ))
        if link.triangle_points:
            coords = [c for point in link.triangle_points for c in point]
            group.append(draw.Lines(*coords, close=True, fill=color, fill_opacity=opacity))


def _render_nodes(group: draw.Group, nodes: Sequence[PositionedNode], theme: Theme) -> None:
    """Render nodes as rounded bars, labelled when tall enough."""
    for node in nodes:
        opacity = theme.filtered_opacity if node.filter_out else 1.0
        rect = draw.Rectangle(
            node.x0, node.y0,
            node.width, max(node.height, 1.0),
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=node.color,
            fill_opacity=opacity,
        )
        rect.append_title(node.entity.title)
        group.append(rect)

        if not theme.show_node_labels or node.filter_out:
            continue
        if node.height < MIN_LABEL_NODE_HEIGHT:
            continue
        group.append(draw.Text(
            node.entity.title,
            theme.label_font_size,
            node.x1 + NODE_LABEL_GAP, node.y0 + theme.label_font_size,
            fill=theme.label_color,
            font_family=theme.label_font_family,
        ))
