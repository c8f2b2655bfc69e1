"""Canvas sizing, year ticks and dataset statistics.

These feed the layout engine its time bounds and give renderers a year
axis to draw next to the nodes.
"""

from __future__ import annotations

__all__ = ["CanvasSize", "Stats", "Year", "compute_canvas_size",
           "compute_stats", "compute_year_ticks"]

import datetime
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from sankey_timeline.layout.constants import MAJOR_TICK_EVERY, YEAR_HEIGHT, YEAR_STEP
from sankey_timeline.parser.model import Entity


@dataclass(frozen=True)
class CanvasSize:
    min_year: int
    max_year: int
    height: float


@dataclass(frozen=True)
class Year:
    """A tick on the year axis."""

    value: int
    type: str  # "major", "minor" or "current"
    idx: int


@dataclass
class Stats:
    traditions: set[str] = field(default_factory=set)
    node_count: int = 0
    relation_count: int = 0


def compute_canvas_size(
    entities: Sequence[Entity],
    year_height: float = YEAR_HEIGHT,
    current_year: int | None = None,
    year_step: int = YEAR_STEP,
) -> CanvasSize:
    """Compute the time bounds and canvas height for a dataset.

    ``min_year`` is the earliest start rounded down to the tick grid and
    ``max_year`` is the current year: items running into the present are
    clamped there by the layout engine.
    """
    if current_year is None:
        current_year = datetime.date.today().year
    if not entities:
        return CanvasSize(min_year=current_year, max_year=current_year, height=0.0)

    earliest = min(e.year_start for e in entities)
    min_year = int(math.floor(earliest / year_step) * year_step)
    max_year = max(current_year, min_year)
    steps = (max_year + year_step / 2 - min_year) / year_step
    return CanvasSize(min_year=min_year, max_year=max_year, height=steps * year_height)


def compute_year_ticks(
    min_year: int,
    max_year: int,
    year_step: int = YEAR_STEP,
    major_every: int = MAJOR_TICK_EVERY,
) -> list[Year]:
    """Return ticks every ``year_step`` years from ``min_year`` up to ``max_year``.

    A final ``current`` tick marks ``max_year`` when it falls between steps.
    """
    ticks: list[Year] = []
    value = min_year
    idx = 0
    while value <= max_year:
        kind = "major" if idx % major_every == 0 else "minor"
        ticks.append(Year(value=value, type=kind, idx=idx))
        value += year_step
        idx += 1
    if not ticks or ticks[-1].value != max_year:
        ticks.append(Year(value=max_year, type="current", idx=idx))
    return ticks


def compute_stats(entities: Sequence[Entity]) -> Stats:
    stats = Stats()
    for entity in entities:
        stats.traditions.add(entity.tradition.key)
        stats.node_count += 1
        stats.relation_count += sum(len(ids) for _, _, ids in entity.relations())
    return stats
