"""Tests for the inspect CLI subcommands."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from typespec_zod.cli.app import app

runner = CliRunner()


def test_inspect_models(demo_graph_path: Path) -> None:
    result = runner.invoke(app, ["inspect", "models", str(demo_graph_path)])

    assert result.exit_code == 0, result.output
    assert "Profile" in result.output
    assert "Address" in result.output
    assert "(5 rows)" in result.output


def test_inspect_enums(demo_graph_path: Path) -> None:
    result = runner.invoke(app, ["inspect", "enums", str(demo_graph_path)])

    assert result.exit_code == 0, result.output
    assert "Status" in result.output
    assert "(2 rows)" in result.output


def test_inspect_order_lists_dependencies_first(tmp_path: Path) -> None:
    graph = tmp_path / "graph.json"
    graph.write_text(
        '{"models": ['
        '{"name": "Zed", "properties": [{"name": "a", "type": {"kind": "Model", "name": "Alpha"}}]},'
        '{"name": "Alpha"}'
        "]}",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["inspect", "order", str(graph)])

    assert result.exit_code == 0, result.output
    assert result.output.index("AlphaSchema") < result.output.index("ZedSchema")
    assert "(2 rows)" in result.output


def test_inspect_missing_graph(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", "models", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
