"""Filtering, year clamping and tradition grouping of raw entities."""

from __future__ import annotations

__all__ = ["group_by_tradition", "is_filtered_out", "normalize_entities"]

from collections import defaultdict
from collections.abc import Iterable

from sankey_timeline.parser.model import Entity, Filters, PositionedNode


def is_filtered_out(entity: Entity, filters: Filters | None) -> bool:
    """Return True when any active filter excludes the entity.

    The year window excludes entities that start before ``from_year`` or
    finish after ``to_year``. Attribute exclusions match on value titles.
    """
    if filters is None:
        return False

    if filters.year_range is not None:
        from_year, to_year = filters.year_range
        if entity.year_start < from_year or entity.year_finish > to_year:
            return True

    for name, excluded in filters.exclusions.items():
        if not excluded:
            continue
        if any(value in excluded for value in entity.attributes.get(name, ())):
            return True

    return False


def normalize_entities(
    entities: Iterable[Entity],
    max_year: float,
    filters: Filters | None = None,
) -> list[PositionedNode]:
    """Create one :class:`PositionedNode` per entity.

    Filtered entities are flagged, not dropped, so lane assignment does not
    change when filters are toggled. Finish years past ``max_year`` are
    clamped to it.
    """
    nodes: list[PositionedNode] = []
    for entity in entities:
        nodes.append(PositionedNode(
            entity=entity,
            year_finish=min(entity.year_finish, max_year),
            color=entity.tradition.color,
            filter_out=is_filtered_out(entity, filters),
        ))
    return nodes


def group_by_tradition(nodes: Iterable[PositionedNode]) -> dict[str, list[PositionedNode]]:
    """Group nodes by tradition key, keeping input order within a group."""
    groups: dict[str, list[PositionedNode]] = defaultdict(list)
    for node in nodes:
        groups[node.tradition_key].append(node)
    return dict(groups)
