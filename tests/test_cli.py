"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from sankey_timeline.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
SCHOOLS_JSON = EXAMPLES_DIR / "buddhist_schools.json"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(SCHOOLS_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()
    assert "11 nodes" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    data = tmp_path / "test.json"
    data.write_text(SCHOOLS_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(data)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_svg_ends_with_newline(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(SCHOOLS_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().endswith("\n")


def test_render_with_options(tmp_path):
    """render command accepts theme, mobile, filter and link flags."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(SCHOOLS_JSON), "-o", str(out),
        "--theme", "light", "--mobile", "--no-cross-links",
        "--from-year", "300", "--exclude", "regions=Japan",
        "--current-year", "2024", "--title", "Schools",
    ])
    assert result.exit_code == 0, result.output
    assert "Schools" in out.read_text()


def test_render_bad_exclude(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(SCHOOLS_JSON), "-o", str(tmp_path / "o.svg"), "--exclude", "Japan",
    ])
    assert result.exit_code != 0
    assert "FIELD=VALUE" in result.output


def test_layout_json(tmp_path):
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "layout", str(SCHOOLS_JSON), "-o", str(out), "--current-year", "2024",
    ])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert len(data["nodes"]) == 11
    ids = {n["id"]: n for n in data["nodes"]}
    # Entities running into the present are clamped to the current year
    assert ids["chan"]["year_finish"] == 2024
    # tendai -> rinzai is declared from both ends but emitted once
    pairs = [(l["source"], l["target"]) for l in data["links"]]
    assert pairs.count(("tendai", "rinzai")) == 1


def test_layout_stdout():
    runner = CliRunner()
    result = runner.invoke(cli, ["layout", str(SCHOOLS_JSON), "--no-cross-links"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert all("d" not in l for l in data["links"] if l["type"] == "cross")


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(SCHOOLS_JSON)])
    assert result.exit_code == 0
    assert "Valid:" in result.output


def test_validate_reports_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({
        "traditions": [{"key": "a", "name": "A", "color": "#111111"}],
        "nodes": [
            {"id": "n", "tradition": "a", "year_start": 10, "year_finish": 5,
             "direct_targets": ["ghost"]},
            {"id": "m", "tradition": "b", "year_start": 1, "year_finish": 2},
        ],
    }))
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "starts after it finishes" in result.output
    assert "unknown direct neighbour 'ghost'" in result.output
    assert "Tradition 'b'" in result.output


def test_validate_bad_file(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(SCHOOLS_JSON), "--current-year", "2024"])
    assert result.exit_code == 0, result.output
    assert "Title: Buddhist schools" in result.output
    assert "Years: 150 - 2024" in result.output
    assert "Nodes: 11" in result.output
    assert "Traditions: 3" in result.output


def test_info_lineage():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(SCHOOLS_JSON), "--node", "yogacara"])
    assert result.exit_code == 0, result.output
    assert "ancestors: madhyamaka" in result.output
    assert "descendants: vajrayana" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/file.json"])
    assert result.exit_code != 0
