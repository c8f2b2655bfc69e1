"""Link construction from the relation lists embedded in each entity.

Entities may declare a relation from either end (``a`` lists ``b`` as a
target, ``b`` lists ``a`` as a source). Both declarations describe the same
link and collapse to one; the first declaration seen wins.
"""

from __future__ import annotations

__all__ = ["build_links", "lineage", "link_graph"]

from collections.abc import Sequence

import networkx as nx

from sankey_timeline.parser.model import Link, LinkKind, PositionedNode


def build_links(nodes: Sequence[PositionedNode]) -> list[Link]:
    """Return the deduplicated links declared by ``nodes``.

    Links whose neighbour id does not match any node are kept with the
    missing side set to None; routing leaves them without geometry.
    """
    nodes_by_id = {node.id: node for node in nodes}
    seen = nx.Graph()
    links: list[Link] = []

    for node in nodes:
        for kind, is_source, neighbour_ids in node.entity.relations():
            for other_id in neighbour_ids:
                source = node.id if is_source else other_id
                target = other_id if is_source else node.id
                if seen.has_edge(source, target):
                    continue
                seen.add_edge(source, target)

                other = nodes_by_id.get(other_id)
                links.append(Link(
                    source=source,
                    target=target,
                    kind=kind,
                    source_node=node if is_source else other,
                    target_node=other if is_source else node,
                ))

    return links


def link_graph(links: Sequence[Link], kind: LinkKind | None = None) -> nx.DiGraph:
    """Build a directed graph of resolved links, optionally of one kind."""
    G = nx.DiGraph()
    for link in links:
        if kind is not None and link.kind is not kind:
            continue
        if not link.is_resolved:
            continue
        G.add_edge(link.source, link.target, kind=link.kind)
    return G


def lineage(graph: nx.DiGraph, node_id: str) -> tuple[set[str], set[str]]:
    """Return ``(ancestors, descendants)`` of a node in a link graph."""
    if node_id not in graph:
        return set(), set()
    return nx.ancestors(graph, node_id), nx.descendants(graph, node_id)
