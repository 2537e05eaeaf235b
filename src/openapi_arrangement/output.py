"""Terminal output for openapi-arrangement.

Arranged schemas are data: they go to stdout, or to the ``-o`` file, and
nothing else does, so ``--json`` output can be piped straight into a code
generator. Progress, errors and hints go to stderr.

Data is rendered as a Rich table when stdout is a terminal and as
tab-separated text otherwise. ``NO_COLOR`` (any value), ``TERM=dumb`` and
``--no-color`` switch Rich styling off.

The CLI builds one :class:`OutputManager` per invocation in
:func:`~openapi_arrangement.app.main_callback`; commands reach it through
:func:`get_output` and the :func:`info` / :func:`error` / :func:`suggest` /
:func:`debug` shortcuts.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from openapi_arrangement.ordering.orderer import OrderedSchema, SchemaInfo

ORDER_COLUMNS = ("Position", "Name", "Ref", "Forward")


class OutputFormat(str, Enum):
    """How arranged schemas are written. ``AUTO`` picks ``RICH`` or ``PLAIN``."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


def _order_row(entry: OrderedSchema) -> list[str]:
    forward = ", ".join(sorted(entry.unseen_refs)) or "-"
    return [str(entry.position), entry.name, entry.ref, forward]


class OutputManager:
    """Writes arranged schemas and diagnostics for one CLI invocation.

    Args:
        format: Data format. ``AUTO`` resolves to ``RICH`` on a colour
            terminal and to ``PLAIN`` otherwise.
        no_color: Disable Rich styling on both streams.
        quiet: Drop info and suggestion messages. Errors are always shown.
        verbose: Show debug messages.
        output_file: Write data to this path instead of stdout. The file
            is truncated by the first write of the run.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        output_file: Optional[str] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._output_file = output_file
        self._file_started = False

        if format == OutputFormat.AUTO:
            rich_ok = _is_tty() and not self._no_color
            format = OutputFormat.RICH if rich_ok else OutputFormat.PLAIN
        self._format = format
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # ------------------------------------------------------------------ #
    # Data (stdout or the output file)
    # ------------------------------------------------------------------ #

    def _write(self, lines: Iterable[str]) -> None:
        text = "".join(f"{line}\n" for line in lines)
        if self._output_file is None:
            sys.stdout.write(text)
            sys.stdout.flush()
            return
        mode = "a" if self._file_started else "w"
        with open(self._output_file, mode, encoding="utf-8") as f:
            f.write(text)
        self._file_started = True

    def _write_json(self, data: Any) -> None:
        self._write([json.dumps(data, indent=2, ensure_ascii=False)])

    def print_order(self, order: Sequence[OrderedSchema], strategy: Optional[str] = None) -> None:
        """Write the arranged entries: position, name, ref and forward refs.

        JSON output is the list of :meth:`OrderedSchema.to_dict` records.
        The Rich table is only used for a terminal, never for ``-o``.
        """
        if self._format == OutputFormat.JSON:
            self._write_json([entry.to_dict() for entry in order])
            return

        rows = [_order_row(entry) for entry in order]
        if self._format == OutputFormat.RICH and self._output_file is None:
            title = f"Schemas ({strategy})" if strategy else "Schemas"
            table = Table(title=title, header_style="bold cyan")
            for column in ORDER_COLUMNS:
                table.add_column(column)
            for row in rows:
                table.add_row(*(escape(cell) for cell in row))
            Console(file=sys.stdout, no_color=self._no_color, force_terminal=True).print(table)
            return

        self._write("\t".join(row) for row in [list(ORDER_COLUMNS), *rows])

    def print_refs(self, infos: Iterable[SchemaInfo]) -> None:
        """Write the direct references of each schema, one schema per line.

        JSON output maps each ref to its ``{target: required}`` table.
        """
        if self._format == OutputFormat.JSON:
            self._write_json({info.ref: info.direct_refs for info in infos})
        else:
            self._write(info.describe() for info in infos)

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def _notify(self, plain: str, markup: str) -> None:
        if self._no_color:
            print(plain, file=sys.stderr, flush=True)
        else:
            self._stderr.print(markup)

    def info(self, message: str) -> None:
        if not self._quiet:
            self._notify(message, escape(message))

    def error(self, message: str) -> None:
        self._notify(f"Error: {message}", f"[bold red]Error:[/bold red] {escape(message)}")

    def suggest(self, message: str) -> None:
        if not self._quiet:
            self._notify(f"→ {message}", f"[dim]→ {escape(message)}[/dim]")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._notify(f"[debug] {message}", f"[dim]\\[debug] {escape(message)}[/dim]")


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Per-invocation instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager. Tests call this between cases."""
    global _output
    _output = None


def info(message: str) -> None:
    get_output().info(message)


def error(message: str) -> None:
    get_output().error(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)
