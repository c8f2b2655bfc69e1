"""Layout constants used across layout modules.

Centralizes the sizes shared by the time scale, column packer, horizontal
placement and link routing.
"""

# ---------------------------------------------------------------------------
# Time axis
# ---------------------------------------------------------------------------
YEAR_STEP: int = 50
"""Granularity of year ticks. Half a step is added above the latest year."""

YEAR_HEIGHT: float = 60.0
"""Pixel height of one year step on desktop."""

MOBILE_YEAR_HEIGHT: float = 40.0
"""Pixel height of one year step on mobile."""

MAJOR_TICK_EVERY: int = 2
"""Every n-th year tick is drawn as a major tick."""

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 8.0
"""Rendered node width on desktop."""

MOBILE_NODE_WIDTH: float = 6.0
"""Rendered node width on mobile."""

NODE_GAP: float = 8.0
"""Minimum vertical pixel gap between two nodes sharing a column."""

GRID_GAP: float = 24.0
"""Horizontal gap reserved inside each tradition's grid slot."""

# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------
LINK_TRIANGLE_SIZE: float = 8.0
"""Size of the arrowhead drawn at the target of a cross link."""

PATH_PRECISION: int = 4
"""Decimal places kept when writing coordinates into path strings."""
