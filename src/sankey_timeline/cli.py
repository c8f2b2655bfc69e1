"""CLI for sankey-timeline."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from sankey_timeline import __version__
from sankey_timeline.layout import compute_canvas_size, compute_layout, compute_year_ticks
from sankey_timeline.layout.canvas import compute_stats
from sankey_timeline.layout.constants import MOBILE_YEAR_HEIGHT, YEAR_HEIGHT
from sankey_timeline.layout.links import lineage, link_graph
from sankey_timeline.layout.scale import TimeScale
from sankey_timeline.parser import Dataset, parse_dataset
from sankey_timeline.parser.model import Filters, Layout, LinkKind
from sankey_timeline.render import render_svg
from sankey_timeline.themes import THEMES


def _layout_options(f):
    """Options shared by every command that runs the layout engine."""
    options = [
        click.option("--width", type=float, default=1200.0,
                     help="Timeline width in pixels (default: 1200)"),
        click.option("--year-height", type=float, default=None,
                     help="Pixels per year step (default: 60, 40 with --mobile)"),
        click.option("--mobile", is_flag=True, default=False,
                     help="Use narrow mobile node widths"),
        click.option("--cross-links/--no-cross-links", default=True,
                     help="Route influence links between traditions (default: on)"),
        click.option("--from-year", type=float, default=None,
                     help="Hide items starting before this year"),
        click.option("--to-year", type=float, default=None,
                     help="Hide items finishing after this year"),
        click.option("--exclude", "excludes", multiple=True, metavar="FIELD=VALUE",
                     help="Hide items whose FIELD list contains VALUE (repeatable)"),
        click.option("--current-year", type=int, default=None,
                     help="Year the timeline ends at (default: this year)"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _load(input_file: Path) -> Dataset:
    try:
        return parse_dataset(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _build_filters(
    from_year: float | None,
    to_year: float | None,
    excludes: tuple[str, ...],
) -> Filters | None:
    filters = Filters()
    if from_year is not None or to_year is not None:
        filters.year_range = (
            from_year if from_year is not None else float("-inf"),
            to_year if to_year is not None else float("inf"),
        )
    for item in excludes:
        name, sep, value = item.partition("=")
        if not sep or not name or not value:
            raise click.BadParameter(f"expected FIELD=VALUE, got '{item}'",
                                     param_hint="--exclude")
        filters.exclusions.setdefault(name.strip(), set()).add(value.strip())
    return None if filters.is_empty() else filters


def _run_layout(
    dataset: Dataset,
    width: float,
    year_height: float | None,
    mobile: bool,
    cross_links: bool,
    from_year: float | None,
    to_year: float | None,
    excludes: tuple[str, ...],
    current_year: int | None,
) -> tuple[Layout, TimeScale]:
    if year_height is None:
        year_height = MOBILE_YEAR_HEIGHT if mobile else YEAR_HEIGHT
    canvas = compute_canvas_size(dataset.entities, year_height, current_year=current_year)
    layout = compute_layout(
        dataset.entities,
        min_year=canvas.min_year,
        max_year=canvas.max_year,
        width=width,
        height=canvas.height,
        filters=_build_filters(from_year, to_year, excludes),
        is_mobile=mobile,
        show_cross_links=cross_links,
    )
    return layout, TimeScale(canvas.min_year, canvas.max_year, canvas.height)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """sankey-timeline: Lay out traditions and their lineages on a time axis."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--title", default=None, help="Title drawn above the timeline")
@_layout_options
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    title: str | None,
    width: float,
    year_height: float | None,
    mobile: bool,
    cross_links: bool,
    from_year: float | None,
    to_year: float | None,
    excludes: tuple[str, ...],
    current_year: int | None,
) -> None:
    """Render a timeline dataset to SVG."""
    dataset = _load(input_file)
    layout, scale = _run_layout(dataset, width, year_height, mobile, cross_links,
                                from_year, to_year, excludes, current_year)

    ticks = compute_year_ticks(scale.min_year, scale.max_year)
    svg = render_svg(layout, THEMES[theme], width, scale.height, scale=scale,
                     ticks=ticks, title=dataset.title if title is None else title)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    drawn = sum(1 for link in layout.links if link.d is not None)
    click.echo(f"Rendered {len(layout.nodes)} nodes, "
               f"{drawn} links, "
               f"{len(layout.column_counts)} traditions -> {output}")


@cli.command(name="layout")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Prints to stdout when omitted")
@_layout_options
def layout_cmd(
    input_file: Path,
    output: Path | None,
    width: float,
    year_height: float | None,
    mobile: bool,
    cross_links: bool,
    from_year: float | None,
    to_year: float | None,
    excludes: tuple[str, ...],
    current_year: int | None,
) -> None:
    """Compute node positions and link paths as JSON."""
    dataset = _load(input_file)
    layout, _ = _run_layout(dataset, width, year_height, mobile, cross_links,
                            from_year, to_year, excludes, current_year)
    text = json.dumps(layout.as_dict(), indent=2) + "\n"
    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a timeline dataset."""
    dataset = _load(input_file)

    errors = []
    ids = dataset.entity_ids()
    seen: set[str] = set()

    for entity in dataset.entities:
        if entity.id in seen:
            errors.append(f"Duplicate node id '{entity.id}'")
        seen.add(entity.id)

        if entity.year_start > entity.year_finish:
            errors.append(f"Node '{entity.id}' starts after it finishes "
                          f"({entity.year_start} > {entity.year_finish})")

        for kind, _, neighbour_ids in entity.relations():
            for other_id in neighbour_ids:
                if other_id not in ids:
                    errors.append(f"Node '{entity.id}' references unknown "
                                  f"{kind.value} neighbour '{other_id}'")

    for key in sorted(dataset.unknown_traditions):
        errors.append(f"Tradition '{key}' is not defined in the traditions table")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    stats = compute_stats(dataset.entities)
    click.echo(f"Valid: {stats.node_count} nodes, "
               f"{len(stats.traditions)} traditions, "
               f"{stats.relation_count} relations")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--node", "node_id", default=None, help="Also show the lineage of this node")
@click.option("--current-year", type=int, default=None,
              help="Year the timeline ends at (default: this year)")
def info(input_file: Path, node_id: str | None, current_year: int | None) -> None:
    """Show information about a timeline dataset."""
    dataset = _load(input_file)
    canvas = compute_canvas_size(dataset.entities, current_year=current_year)
    layout = compute_layout(dataset.entities, min_year=canvas.min_year,
                            max_year=canvas.max_year, width=1000.0, height=canvas.height)

    click.echo(f"Title: {dataset.title or '(none)'}")
    click.echo(f"Years: {canvas.min_year} - {canvas.max_year}")
    click.echo(f"Nodes: {len(layout.nodes)}")
    direct = sum(1 for link in layout.links if link.is_direct)
    click.echo(f"Links: {len(layout.links)} ({direct} direct, "
               f"{len(layout.links) - direct} cross)")
    click.echo(f"Traditions: {len(layout.column_counts)}")
    for key, columns in layout.column_counts.items():
        tradition = dataset.traditions[key]
        count = sum(1 for n in layout.nodes if n.tradition_key == key)
        click.echo(f"  {tradition.name} ({tradition.color}): "
                   f"{count} nodes in {columns} columns")

    if node_id is not None:
        if node_id not in dataset.entity_ids():
            click.echo(f"Unknown node '{node_id}'", err=True)
            raise SystemExit(1)
        ancestors, descendants = lineage(link_graph(layout.links, LinkKind.DIRECT), node_id)
        click.echo(f"Lineage of {node_id}:")
        click.echo(f"  ancestors: {', '.join(sorted(ancestors)) or '(none)'}")
        click.echo(f"  descendants: {', '.join(sorted(descendants)) or '(none)'}")
