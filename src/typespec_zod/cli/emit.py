from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from typespec_zod.core.emit import run_emit
from typespec_zod.core.graph import load_type_graph
from typespec_zod.core.options import EmitterOptions, load_options
from typespec_zod.emitters import FileSystemEmitter

console = Console()


def emit(
    graph: Annotated[Path, typer.Argument(help="Path to the type graph JSON exported from TypeSpec.")],
    options_file: Annotated[
        Path | None, typer.Option("--options", help="JSON file with emitter options (tspconfig keys).")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option(envvar="TYPESPEC_ZOD_OUTPUT_DIR", help="Directory to write into.")
    ] = None,
    output_file: Annotated[
        str | None, typer.Option(envvar="TYPESPEC_ZOD_OUTPUT_FILE", help="Name of the generated schema module.")
    ] = None,
    package_name: Annotated[
        str | None, typer.Option(envvar="TYPESPEC_ZOD_PACKAGE_NAME", help="npm package name.")
    ] = None,
    package_version: Annotated[
        str | None, typer.Option(envvar="TYPESPEC_ZOD_PACKAGE_VERSION", help="npm package version.")
    ] = None,
) -> None:
    """Generate Zod schemas (and package files when name and version are given)."""
    try:
        base = load_options(options_file) if options_file else EmitterOptions()
        options = base.merged(
            output_dir=output_dir,
            output_file=output_file,
            package_name=package_name,
            package_version=package_version,
        )
        root = load_type_graph(graph)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    written = run_emit(root, FileSystemEmitter(), options)
    if not written:
        console.print("[yellow]No user-defined models or enums found; nothing to emit.[/yellow]")
        return
    for path in written:
        console.print(f"[green]Wrote[/green] {path}")
