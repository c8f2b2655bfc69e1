"""Tests for link construction."""

from factories import make_entity
from sankey_timeline.layout.links import build_links, lineage, link_graph
from sankey_timeline.layout.normalize import normalize_entities
from sankey_timeline.parser.model import LinkKind


def _nodes(*entities):
    return normalize_entities(entities, max_year=2000)


def test_direct_target_makes_entity_the_source():
    nodes = _nodes(
        make_entity("a", 1000, 1050, direct_targets=["b"]),
        make_entity("b", 1060, 1100),
    )
    links = build_links(nodes)
    assert len(links) == 1
    link = links[0]
    assert (link.source, link.target, link.kind) == ("a", "b", LinkKind.DIRECT)
    assert link.source_node is nodes[0]
    assert link.target_node is nodes[1]


def test_direct_source_makes_entity_the_target():
    nodes = _nodes(
        make_entity("a", 1000, 1050),
        make_entity("b", 1060, 1100, direct_sources=["a"]),
    )
    links = build_links(nodes)
    assert [(l.source, l.target) for l in links] == [("a", "b")]
    assert links[0].source_node is nodes[0]
    assert links[0].target_node is nodes[1]


def test_mirrored_declarations_collapse():
    nodes = _nodes(
        make_entity("a", 1000, 1050, direct_targets=["b"]),
        make_entity("b", 1060, 1100, direct_sources=["a"]),
    )
    links = build_links(nodes)
    assert len(links) == 1


def test_reverse_pair_collapses_first_wins():
    nodes = _nodes(
        make_entity("a", 1000, 1050, direct_targets=["b"]),
        make_entity("b", 1060, 1100, direct_targets=["a"]),
    )
    links = build_links(nodes)
    assert [(l.source, l.target) for l in links] == [("a", "b")]


def test_direct_declared_before_cross_wins():
    nodes = _nodes(
        make_entity("a", 1000, 1050, direct_targets=["b"], cross_targets=["b"]),
        make_entity("b", 1060, 1100, tradition="y"),
    )
    links = build_links(nodes)
    assert len(links) == 1
    assert links[0].kind is LinkKind.DIRECT


def test_cross_links():
    nodes = _nodes(
        make_entity("a", 1000, 1050, cross_targets=["b"]),
        make_entity("b", 1060, 1100, tradition="y", cross_sources=["c"]),
        make_entity("c", 1000, 1030, tradition="z"),
    )
    links = build_links(nodes)
    assert [(l.source, l.target, l.kind) for l in links] == [
        ("a", "b", LinkKind.CROSS),
        ("c", "b", LinkKind.CROSS),
    ]


def test_unknown_neighbour_keeps_link_unresolved():
    nodes = _nodes(make_entity("a", 1000, 1050, direct_targets=["ghost"]))
    links = build_links(nodes)
    assert len(links) == 1
    assert links[0].target == "ghost"
    assert links[0].source_node is nodes[0]
    assert links[0].target_node is None
    assert not links[0].is_resolved


def test_link_graph_and_lineage():
    nodes = _nodes(
        make_entity("a", 1000, 1050, direct_targets=["b"]),
        make_entity("b", 1060, 1100, direct_targets=["c"], cross_targets=["d"]),
        make_entity("c", 1110, 1150, direct_targets=["ghost"]),
        make_entity("d", 1110, 1150, tradition="y"),
    )
    links = build_links(nodes)
    G = link_graph(links, LinkKind.DIRECT)
    # Unresolved and cross links are left out
    assert set(G.edges) == {("a", "b"), ("b", "c")}
    ancestors, descendants = lineage(G, "b")
    assert ancestors == {"a"}
    assert descendants == {"c"}
    assert lineage(G, "d") == (set(), set())
