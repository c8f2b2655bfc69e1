"""Linear year -> pixel mapping for the vertical time axis."""

from __future__ import annotations

from collections.abc import Iterable

from sankey_timeline.layout.constants import YEAR_STEP
from sankey_timeline.parser.model import PositionedNode


class TimeScale:
    """Map years onto ``[height, 0]`` so later years sit higher on the canvas.

    The domain runs from ``min_year`` to ``max_year + year_step / 2``; the
    extra half step leaves room above the latest tick.
    """

    def __init__(
        self,
        min_year: float,
        max_year: float,
        height: float,
        year_step: float = YEAR_STEP,
    ) -> None:
        self.min_year = min_year
        self.max_year = max_year
        self.height = height
        self.domain = (min_year, max_year + year_step / 2)
        self.range = (height, 0.0)

    def __call__(self, year: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (year - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, y: float) -> float:
        """Return the year at pixel ``y``."""
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (y - r0) / (r1 - r0) * (d1 - d0)


def apply_time_scale(nodes: Iterable[PositionedNode], scale: TimeScale) -> None:
    """Set vertical extents of each node from its (clamped) year range."""
    for node in nodes:
        node.y0 = scale(node.year_finish)
        node.y1 = scale(node.year_start)
        node.y_mid = (node.y0 + node.y1) / 2
        node.height = abs(node.y1 - node.y0)
