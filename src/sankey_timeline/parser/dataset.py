"""Loader for JSON timeline datasets.

A dataset is either a bare list of nodes or an object::

    {
      "title": "Schools of thought",
      "traditions": [{"key": "zen", "name": "Zen", "color": "#c0392b"}],
      "nodes": [
        {"id": "linji", "title": "Linji", "tradition": "zen",
         "year_start": 850, "year_finish": 1200,
         "direct_targets": ["rinzai"], "cross_sources": ["huayan"],
         "attributes": {"regions": ["China"]}}
      ]
    }

Relation lists and attribute lists accept plain strings or objects
carrying an ``id`` (relations) or ``title`` (attributes), which is the
shape content stores usually export.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from sankey_timeline.parser.model import Entity, Tradition

DEFAULT_COLOR = "#888888"

_RELATION_FIELDS = (
    "direct_targets",
    "direct_sources",
    "cross_targets",
    "cross_sources",
)
_NODE_FIELDS = {"id", "title", "tradition", "year_start", "year_finish", "attributes",
                *_RELATION_FIELDS}


@dataclass
class Dataset:
    """A parsed dataset: traditions plus raw entities."""

    title: str = ""
    traditions: dict[str, Tradition] = field(default_factory=dict)
    entities: list[Entity] = field(default_factory=list)
    # Tradition keys referenced by nodes but missing from the table
    unknown_traditions: set[str] = field(default_factory=set)

    def entity_ids(self) -> set[str]:
        return {e.id for e in self.entities}


def parse_dataset(text: str) -> Dataset:
    """Parse a JSON dataset into traditions and entities."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Dataset is not valid JSON: {e}") from e
    return load_dataset(raw)


def load_dataset(raw: dict | list) -> Dataset:
    """Build a :class:`Dataset` from already-decoded JSON data."""
    if isinstance(raw, list):
        raw = {"nodes": raw}
    if not isinstance(raw, dict) or "nodes" not in raw:
        raise ValueError(
            "Dataset must be a list of nodes or an object with a 'nodes' key."
        )

    dataset = Dataset(title=str(raw.get("title", "")))
    has_table = "traditions" in raw
    for item in raw.get("traditions") or []:
        tradition = _parse_tradition(item)
        dataset.traditions[tradition.key] = tradition

    for index, item in enumerate(raw["nodes"] or []):
        if not isinstance(item, dict):
            raise ValueError(f"Node #{index} must be an object, got {type(item).__name__}")
        dataset.entities.append(_parse_entity(item, index, dataset, has_table))

    return dataset


def _parse_tradition(item: dict | str) -> Tradition:
    if isinstance(item, str):
        return Tradition(key=item, name=item, color=DEFAULT_COLOR)
    if "key" not in item:
        raise ValueError(f"Tradition entry is missing 'key': {item!r}")
    key = str(item["key"])
    color = item.get("color") or item.get("secondary_color") or DEFAULT_COLOR
    return Tradition(key=key, name=str(item.get("name", key)), color=color)


def _parse_entity(item: dict, index: int, dataset: Dataset, has_table: bool) -> Entity:
    missing = [k for k in ("id", "tradition", "year_start", "year_finish") if k not in item]
    if missing:
        raise ValueError(f"Node #{index} is missing required field(s): {', '.join(missing)}")

    node_id = str(item["id"])
    raw_tradition = item["tradition"]
    if isinstance(raw_tradition, dict):
        tradition = _parse_tradition(raw_tradition)
        known = dataset.traditions.setdefault(tradition.key, tradition)
        tradition = known
    else:
        key = str(raw_tradition)
        tradition = dataset.traditions.get(key)
        if tradition is None:
            if has_table:
                dataset.unknown_traditions.add(key)
            tradition = Tradition(key=key, name=key, color=DEFAULT_COLOR)
            dataset.traditions[key] = tradition

    try:
        year_start = float(item["year_start"])
        year_finish = float(item["year_finish"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Node '{node_id}' has a non-numeric year: {e}") from e

    relations = {name: _ids(item.get(name)) for name in _RELATION_FIELDS}

    attributes: dict[str, tuple[str, ...]] = {}
    for name, values in (item.get("attributes") or {}).items():
        attributes[name] = _titles(values)
    # Top-level list fields that are not known node fields are attribute lists too
    for name, values in item.items():
        if name not in _NODE_FIELDS and isinstance(values, list):
            attributes.setdefault(name, _titles(values))

    return Entity(
        id=node_id,
        title=str(item.get("title", node_id)),
        tradition=tradition,
        year_start=_as_number(year_start),
        year_finish=_as_number(year_finish),
        attributes=attributes,
        **relations,
    )


def _ids(values) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v["id"]) if isinstance(v, dict) else str(v) for v in values)


def _titles(values) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v["title"]) if isinstance(v, dict) else str(v) for v in values)


def _as_number(value: float) -> float:
    """Keep whole years as ints so they print without a decimal point."""
    return int(value) if float(value).is_integer() else value
