"""Read-only views of what ``emit`` would generate."""

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typespec_zod.core.collect import CollectedTypes, collect_types
from typespec_zod.core.dependencies import model_dependencies, topological_sort
from typespec_zod.core.graph import load_type_graph
from typespec_zod.core.translate import schema_name

inspect_app = typer.Typer(help="Inspect the collected types of a type graph.")
console = Console()

GraphArgument = Annotated[Path, typer.Argument(help="Path to the type graph JSON exported from TypeSpec.")]


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _collect(graph: Path) -> CollectedTypes:
    try:
        return collect_types(load_type_graph(graph))
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None


@inspect_app.command("models")
def models(graph: GraphArgument) -> None:
    """List collected models with their dependencies."""
    collected = _collect(graph)
    known = collected.model_names | collected.enum_names
    rows = [
        (
            m.name,
            len(m.properties),
            ", ".join(d for d in model_dependencies(m) if d in known) or "-",
        )
        for m in collected.models
    ]
    _render_table(["model", "properties", "depends_on"], rows)


@inspect_app.command("enums")
def enums(graph: GraphArgument) -> None:
    """List collected enums and their members."""
    collected = _collect(graph)
    rows = [(e.name, ", ".join(m.name for m in e.members) or "-") for e in collected.enums]
    _render_table(["enum", "members"], rows)


@inspect_app.command("order")
def order(graph: GraphArgument) -> None:
    """Show the order in which model schemas are emitted."""
    collected = _collect(graph)
    ordered = topological_sort(collected.models, collected.enums)
    rows = [(index, m.name, schema_name(m.name)) for index, m in enumerate(ordered, start=1)]
    _render_table(["#", "model", "schema"], rows)
