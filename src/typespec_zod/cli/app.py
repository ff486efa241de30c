import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from typespec_zod.cli.emit import emit
from typespec_zod.cli.inspect import inspect_app

app = typer.Typer(
    name="typespec-zod",
    help="typespec-zod CLI: generate Zod schemas from a TypeSpec type graph.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("typespec_zod")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def _main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details.")] = False,
) -> None:
    _configure_logging(verbose)


app.command("emit")(emit)
app.add_typer(inspect_app, name="inspect")


def main() -> None:
    app()
