"""Data model for timeline datasets and their computed layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LinkKind(Enum):
    """Relation axis of a link."""

    DIRECT = "direct"  # same tradition, lineage/derivation
    CROSS = "cross"  # across traditions, influence


@dataclass(frozen=True)
class Tradition:
    """A named category owning one horizontal slot of the timeline."""

    key: str
    name: str
    color: str


@dataclass(frozen=True)
class Entity:
    """One raw timeline item, as read from the dataset.

    Relation fields are named after what the listed ids are: an entity
    listing ``b`` in ``direct_targets`` is the source of a direct link to
    ``b``; listing ``b`` in ``direct_sources`` makes it the target.
    """

    id: str
    tradition: Tradition
    year_start: float
    year_finish: float
    title: str = ""
    direct_targets: tuple[str, ...] = ()
    direct_sources: tuple[str, ...] = ()
    cross_targets: tuple[str, ...] = ()
    cross_sources: tuple[str, ...] = ()
    # Category-scoped value lists (e.g. "schools" -> titles), used by filters
    attributes: dict[str, tuple[str, ...]] = field(default_factory=dict, hash=False)

    def relations(self) -> list[tuple[LinkKind, bool, tuple[str, ...]]]:
        """Return ``(kind, is_source, neighbour_ids)`` in link-building order."""
        return [
            (LinkKind.DIRECT, True, self.direct_targets),
            (LinkKind.DIRECT, False, self.direct_sources),
            (LinkKind.CROSS, True, self.cross_targets),
            (LinkKind.CROSS, False, self.cross_sources),
        ]


@dataclass
class Filters:
    """Active filters: a year window plus per-attribute excluded titles."""

    year_range: tuple[float, float] | None = None
    exclusions: dict[str, set[str]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return self.year_range is None and not any(self.exclusions.values())


@dataclass
class PositionedNode:
    """Layout output for one entity. Built fresh on every layout pass.

    Rectangle coordinates follow SVG conventions::

        (x0, y0) ---- (x1, y0)
            |             |
        (x0, y1) ---- (x1, y1)

    ``y0`` is the pixel of the (clamped) finish year and sits above ``y1``.
    """

    entity: Entity
    year_finish: float
    color: str
    filter_out: bool = False
    # Populated by layout engine
    column: int = 0
    x0: float = 0.0
    x1: float = 0.0
    y0: float = 0.0
    y1: float = 0.0
    x_mid: float = 0.0
    y_mid: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def id(self) -> str:
        return self.entity.id

    @property
    def year_start(self) -> float:
        return self.entity.year_start

    @property
    def tradition_key(self) -> str:
        return self.entity.tradition.key

    @property
    def half_width(self) -> float:
        return self.width / 2

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.entity.title,
            "tradition": self.tradition_key,
            "year_start": self.year_start,
            "year_finish": self.year_finish,
            "x0": self.x0,
            "x1": self.x1,
            "y0": self.y0,
            "y1": self.y1,
            "xMid": self.x_mid,
            "yMid": self.y_mid,
            "width": self.width,
            "height": self.height,
            "column": self.column,
            "color": self.color,
            "filterOut": self.filter_out,
        }


@dataclass
class Link:
    """A directed relation between two entities (populated by routing)."""

    source: str
    target: str
    kind: LinkKind
    source_node: PositionedNode | None = None
    target_node: PositionedNode | None = None
    d: str | None = None
    stroke_width: float | None = None
    triangle: str | None = None
    triangle_points: list[tuple[float, float]] = field(default_factory=list)

    @property
    def is_direct(self) -> bool:
        return self.kind is LinkKind.DIRECT

    @property
    def is_cross(self) -> bool:
        return self.kind is LinkKind.CROSS

    @property
    def is_resolved(self) -> bool:
        return self.source_node is not None and self.target_node is not None

    def as_dict(self) -> dict:
        out: dict = {
            "source": self.source,
            "target": self.target,
            "type": self.kind.value,
        }
        if self.d is not None:
            out["d"] = self.d
        if self.stroke_width is not None:
            out["strokeWidth"] = self.stroke_width
        if self.triangle is not None:
            out["triangle"] = self.triangle
        return out


@dataclass
class Layout:
    """Complete result of one layout pass."""

    nodes: list[PositionedNode] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    column_counts: dict[str, int] = field(default_factory=dict)

    def node(self, node_id: str) -> PositionedNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def traditions(self) -> list[str]:
        """Return tradition keys in slot order."""
        return list(self.column_counts)

    def as_dict(self) -> dict:
        return {
            "nodes": [n.as_dict() for n in self.nodes],
            "links": [link.as_dict() for link in self.links],
        }
