"""Typer application and console-script entry point.

The root callback turns the global flags into the
:class:`~openapi_arrangement.output.OutputManager` used by the ``order``
and ``refs`` commands. Each command reports its own
:class:`~openapi_arrangement.exceptions.ArrangementError` failures, so
:func:`main` only has to start the app.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from openapi_arrangement import NAME
from openapi_arrangement import info as version_info
from openapi_arrangement.commands import order_command, refs_command
from openapi_arrangement.output import OutputFormat, OutputManager, set_output

app = typer.Typer(
    name=NAME,
    help="Order OpenAPI/JSON-Schema schemas for code generation.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("order")(order_command)
app.command("refs")(refs_command)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(version_info(" "))
        raise typer.Exit()


def _data_format(json_output: bool, plain_output: bool) -> OutputFormat:
    if json_output and plain_output:
        raise typer.BadParameter("--json and --plain are mutually exclusive.")
    if json_output:
        return OutputFormat.JSON
    if plain_output:
        return OutputFormat.PLAIN
    return OutputFormat.AUTO


def _enable_debug_logging() -> None:
    """Send the package's ``logging`` records (greedy choices, located paths) to stderr."""
    logger = logging.getLogger("openapi_arrangement")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
    json_output: bool = typer.Option(False, "--json", help="Write schemas as JSON."),
    plain_output: bool = typer.Option(False, "--plain", help="Write schemas as tab-separated text."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print data and errors."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug output on stderr."),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Write schemas to this file, replacing its contents."
    ),
) -> None:
    """Order OpenAPI/JSON-Schema schemas for code generation."""
    set_output(
        OutputManager(
            format=_data_format(json_output, plain_output),
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
            output_file=output_file,
        )
    )
    if verbose:
        _enable_debug_logging()


def main() -> None:
    """Entry point of the ``openapi-arrangement`` console script."""
    app(prog_name=NAME)
