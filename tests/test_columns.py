"""Tests for column assignment and horizontal placement."""

import pytest

from factories import make_entity
from sankey_timeline.layout.columns import assign_columns
from sankey_timeline.layout.constants import GRID_GAP, MOBILE_NODE_WIDTH, NODE_WIDTH
from sankey_timeline.layout.normalize import normalize_entities
from sankey_timeline.layout.placement import place_columns
from sankey_timeline.layout.scale import TimeScale, apply_time_scale


def _scaled(*spans, min_year=1000, max_year=1100, height=1000):
    entities = [make_entity(f"n{i}", s, f) for i, (s, f) in enumerate(spans)]
    nodes = normalize_entities(entities, max_year)
    nodes.sort(key=lambda n: n.year_start)
    apply_time_scale(nodes, TimeScale(min_year, max_year, height))
    return nodes


def test_empty_tradition_has_no_columns():
    assert assign_columns([]) == 0


def test_single_node_opens_column_zero():
    nodes = _scaled((1000, 1050))
    assert assign_columns(nodes) == 1
    assert nodes[0].column == 0


def test_overlapping_nodes_get_distinct_columns():
    nodes = _scaled((1000, 1050), (1040, 1100))
    assert assign_columns(nodes) == 2
    assert [n.column for n in nodes] == [0, 1]


def test_sequential_nodes_share_a_column():
    nodes = _scaled((1000, 1020), (1060, 1100))
    assert assign_columns(nodes) == 1
    assert [n.column for n in nodes] == [0, 0]


def test_gap_is_required_between_nodes():
    # Touching spans are closer than NODE_GAP pixels
    nodes = _scaled((1000, 1050), (1050, 1100))
    assert assign_columns(nodes) == 2


def test_custom_gap():
    nodes = _scaled((1000, 1050), (1050, 1100))
    assert assign_columns(nodes, node_gap=-1.0) == 1


def test_first_fit_reuses_lowest_column():
    nodes = _scaled((1000, 1010), (1005, 1090), (1030, 1040), (1060, 1070))
    assert assign_columns(nodes) == 2
    # n2 fits back into column 0 after n0 ends; n3 follows n2 there
    assert [n.column for n in nodes] == [0, 1, 0, 0]


def test_place_columns_single_slot():
    nodes = _scaled((1000, 1050), (1040, 1100))
    columns = assign_columns(nodes)
    place_columns(nodes, columns, grids=1, grid=0, width=224.0)
    column_width = (224.0 - GRID_GAP) / 2
    assert nodes[0].x_mid == pytest.approx(column_width / 2)
    assert nodes[1].x_mid == pytest.approx(column_width * 1.5)
    assert nodes[0].width == NODE_WIDTH
    assert nodes[0].x1 - nodes[0].x0 == pytest.approx(NODE_WIDTH)


def test_place_columns_slot_offset():
    nodes = _scaled((1000, 1050))
    place_columns(nodes, 1, grids=3, grid=2, width=300.0)
    grid_width = 100.0
    expected = (grid_width - GRID_GAP) / 2 + 2 * (grid_width + GRID_GAP / 2)
    assert nodes[0].x_mid == pytest.approx(expected)


def test_place_columns_mobile_width():
    nodes = _scaled((1000, 1050))
    place_columns(nodes, 1, grids=1, grid=0, width=300.0, is_mobile=True)
    assert nodes[0].width == MOBILE_NODE_WIDTH
    assert nodes[0].half_width == MOBILE_NODE_WIDTH / 2
