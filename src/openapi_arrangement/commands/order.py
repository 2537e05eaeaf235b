"""Ordering commands -- print schemas in generation order.

Provides ``order`` (the arranged schema list with the references each
entry uses before they are declared) and ``refs`` (the direct references
of every schema, in document order). Both load the document, locate its
schema container and report failures through the output module with the
exit code of the raised :class:`~openapi_arrangement.exceptions.ArrangementError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

import typer

from openapi_arrangement.config import resolve_config
from openapi_arrangement.exceptions import ArrangementError, SchemasNotFoundError
from openapi_arrangement.ordering import Orderer, build_orderer
from openapi_arrangement.output import debug, error, get_output, info, suggest
from openapi_arrangement.parser import load_document


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Report an :class:`ArrangementError` and exit with its code."""
    try:
        yield
    except ArrangementError as exc:
        error(str(exc))
        if isinstance(exc, SchemasNotFoundError):
            suggest("Pass --path to point at the schema container.")
        raise typer.Exit(code=exc.exit_code) from None


def _load_orderer(source: str, path: Optional[str]) -> Orderer:
    """Load *source* and build an :class:`Orderer` for its schemas.

    Raises:
        SchemasNotFoundError: If the document has no schema container.
    """
    doc = load_document(source)
    orderer = build_orderer(doc, path)
    if orderer is None:
        where = path if path is not None else "#/components/schemas or #/$defs"
        raise SchemasNotFoundError(f"No schemas found at {where} in {source}")
    debug(f"Loaded {len(orderer.schemas)} schemas from {source}")
    return orderer


def order_command(
    source: str = typer.Argument(..., help="Document file, URL, or '-' for stdin."),
    path: Optional[str] = typer.Option(
        None, "--path", help="Schema container path, e.g. '#/components/schemas/'."
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="greedy_required_first, alphabetical, or a sort key (name, ref, ...).",
    ),
) -> None:
    """Print schemas in the order they should be generated.

    Example::

        openapi-arrangement order openapi.yaml
        openapi-arrangement --json order schema.json --path '#/$defs/'
    """
    with _exit_on_error():
        config = resolve_config(cli_path=path, cli_strategy=strategy)
        orderer = _load_orderer(source, config.path)
        order = orderer.sort(config.strategy)

    get_output().print_order(order, orderer.strategy)
    forward = sum(1 for entry in order if entry.unseen_refs)
    info(f"{len(order)} schemas, {forward} with forward references")


def refs_command(
    source: str = typer.Argument(..., help="Document file, URL, or '-' for stdin."),
    path: Optional[str] = typer.Option(
        None, "--path", help="Schema container path, e.g. '#/components/schemas/'."
    ),
) -> None:
    """Print the direct references of every schema in document order."""
    with _exit_on_error():
        config = resolve_config(cli_path=path)
        orderer = _load_orderer(source, config.path)

    get_output().print_refs(orderer.schemas.values())
