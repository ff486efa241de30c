"""End-to-end: type graph JSON on disk -> CLI -> generated package on disk."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from typespec_zod.cli.app import app

runner = CliRunner()

_PACKAGE_FILES = ("schemas.ts", "package.json", "README.md", "tsconfig.json", ".npmignore")


def _emit(graph: Path, out: Path) -> None:
    result = runner.invoke(
        app,
        ["emit", str(graph), "--output-dir", str(out), "--package-name", "demo", "--package-version", "0.1.0"],
    )
    assert result.exit_code == 0, result.output


def _snapshot(out: Path) -> dict[str, bytes]:
    return {name: (out / name).read_bytes() for name in _PACKAGE_FILES}


def test_regeneration_is_byte_identical(tmp_path: Path, demo_graph_path: Path) -> None:
    _emit(demo_graph_path, tmp_path / "first")
    _emit(demo_graph_path, tmp_path / "second")

    assert _snapshot(tmp_path / "first") == _snapshot(tmp_path / "second")


def test_generated_package_is_consistent(tmp_path: Path, demo_graph_path: Path, demo_schemas: str) -> None:
    _emit(demo_graph_path, tmp_path)

    schemas = (tmp_path / "schemas.ts").read_text(encoding="utf-8")
    header = "/**\n * Package: demo\n * Version: 0.1.0\n */\n\n"
    assert schemas == demo_schemas.replace('from "zod";\n\n', f'from "zod";\n\n{header}', 1)

    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo"
    assert package["version"] == "0.1.0"

    readme = (tmp_path / "README.md").read_text(encoding="utf-8")
    for line in schemas.splitlines():
        if line.startswith("export const "):
            name = line.split()[2]
            assert f"`{name}`" in readme


def test_cyclic_graph_completes(tmp_path: Path) -> None:
    graph = tmp_path / "graph.json"
    graph.write_text(
        json.dumps(
            {
                "namespaces": [
                    {
                        "name": "Cycle",
                        "models": [
                            {"name": "A", "properties": [{"name": "b", "type": {"kind": "Model", "name": "B"}}]},
                            {"name": "B", "properties": [{"name": "a", "type": {"kind": "Model", "name": "A"}}]},
                        ],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    out = tmp_path / "out"

    result = runner.invoke(app, ["emit", str(graph), "--output-dir", str(out)])

    assert result.exit_code == 0, result.output
    schemas = (out / "schemas.ts").read_text(encoding="utf-8")
    assert schemas.count("export const ASchema") == 1
    assert schemas.count("export const BSchema") == 1
    assert "export const BSchema: z.ZodType<any> = " in schemas
