#!/usr/bin/env python3
"""Batch render every example dataset to SVG in desktop and mobile modes.

Outputs go to /tmp/sankey_timeline_renders/.

Usage:
    python scripts/render_examples.py [--theme light] [--no-cross-links]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from sankey_timeline.layout import (  # noqa: E402
    compute_canvas_size,
    compute_layout,
    compute_year_ticks,
)
from sankey_timeline.layout.constants import MOBILE_YEAR_HEIGHT, YEAR_HEIGHT  # noqa: E402
from sankey_timeline.layout.scale import TimeScale  # noqa: E402
from sankey_timeline.parser import parse_dataset  # noqa: E402
from sankey_timeline.render.svg import render_svg  # noqa: E402
from sankey_timeline.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/sankey_timeline_renders")
EXAMPLES_DIR = project_root / "examples"

MODES = {
    "desktop": (1200.0, YEAR_HEIGHT, False),
    "mobile": (360.0, MOBILE_YEAR_HEIGHT, True),
}


def render_file(
    json_path: Path, output_dir: Path, theme: str, *, show_cross_links: bool = True
) -> tuple[str, list[str]]:
    """Parse, layout, and render a dataset in every mode.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        dataset = parse_dataset(json_path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    for mode, (width, year_height, is_mobile) in MODES.items():
        canvas = compute_canvas_size(dataset.entities, year_height)
        try:
            layout = compute_layout(
                dataset.entities,
                min_year=canvas.min_year,
                max_year=canvas.max_year,
                width=width,
                height=canvas.height,
                is_mobile=is_mobile,
                show_cross_links=show_cross_links,
            )
        except Exception as e:
            issues.append(f"LAYOUT ERROR ({mode}): {e}")
            continue

        unresolved = [link for link in layout.links if not link.is_resolved]
        if unresolved and mode == "desktop":
            issues.append(f"{len(unresolved)} link(s) reference unknown nodes")

        scale = TimeScale(canvas.min_year, canvas.max_year, canvas.height)
        svg = render_svg(
            layout, THEMES[theme], width, canvas.height,
            scale=scale,
            ticks=compute_year_ticks(canvas.min_year, canvas.max_year),
            title=dataset.title,
        )
        (output_dir / f"{name}_{mode}.svg").write_text(svg + "\n")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example datasets")
    parser.add_argument("--theme", choices=sorted(THEMES), default="dark")
    parser.add_argument("--no-cross-links", action="store_true",
                        help="Skip routing of influence links between traditions")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max((len(f.stem) for f in all_files), default=0)
    any_errors = False

    for json_path in all_files:
        name, issues = render_file(json_path, OUTPUT_DIR, args.theme,
                                   show_cross_links=not args.no_cross_links)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
