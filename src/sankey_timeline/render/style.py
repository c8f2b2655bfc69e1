"""Theme and style constants for timeline rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a timeline."""

    name: str
    background_color: str
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    header_font_size: float
    axis_color: str
    axis_font_size: float
    grid_color: str
    node_corner_radius: float = 2.0
    direct_link_opacity: float = 0.35
    cross_link_color: str = ""  # empty = inherit source tradition colour
    cross_link_width: float = 1.0
    cross_link_opacity: float = 0.6
    cross_link_dash: str = "4 3"
    filtered_opacity: float = 0.12
    show_node_labels: bool = True
