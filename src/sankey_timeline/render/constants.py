"""Render constants used by the SVG renderer.

Theme-dependent values remain in style.py.
"""

CANVAS_PADDING: float = 20.0
"""Padding around the whole SVG canvas."""

AXIS_WIDTH: float = 56.0
"""Width of the year axis column left of the timeline."""

HEADER_HEIGHT: float = 36.0
"""Height of the tradition header row above the timeline."""

TITLE_HEIGHT: float = 36.0
"""Extra height reserved when a title is drawn."""

AXIS_LABEL_GAP: float = 8.0
"""Gap between a year label and the start of its grid line."""

NODE_LABEL_GAP: float = 4.0
"""Horizontal gap between a node and its label."""

MIN_LABEL_NODE_HEIGHT: float = 12.0
"""Nodes shorter than this are drawn without a label."""
