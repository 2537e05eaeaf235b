"""Locate the schema container inside a loaded document.

OpenAPI 3.x keeps named schemas under ``#/components/schemas`` while
JSON-Schema documents use ``#/$defs``. Without an explicit path both are
tried in that order and the first non-empty one wins. An explicit path is
a JSON-pointer-like string (``#/components/schemas``) or a bare key
(``definitions``); empty segments are ignored, so ``#/foo//bar`` is the
same location as ``#/foo/bar``.

Absence is reported as ``None``, which callers must keep apart from an
empty but present container.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple, Optional

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES: dict[str, list[str]] = {
    "#/components/schemas/": ["components", "schemas"],
    "#/$defs/": ["$defs"],
}
"""Default container paths in priority order, mapped to their key segments."""


class SchemaLocation(NamedTuple):
    """A found schema container and the path used to find it."""

    path: str
    schemas: Mapping[str, Any]


def path_candidates(path: Optional[str] = None) -> dict[str, list[str]]:
    """Return the candidate paths to try, mapped to their key segments.

    Args:
        path: Explicit container path, or ``None`` for the defaults.

    Returns:
        :data:`DEFAULT_CANDIDATES` when *path* is ``None``; otherwise a
        single entry mapping *path* to its non-empty segments, without a
        leading ``#``.
    """
    if path is None:
        return {key: list(pieces) for key, pieces in DEFAULT_CANDIDATES.items()}
    pieces = [piece for piece in path.split("/") if piece]
    if pieces and pieces[0] == "#":
        pieces.pop(0)
    return {path: pieces}


def dig(doc: Any, pieces: Sequence[str]) -> Any:
    """Follow *pieces* into *doc*, returning ``None`` if any step fails.

    Mappings are indexed by key and sequences by integer index.
    """
    current = doc
    for piece in pieces:
        if isinstance(current, Mapping):
            if piece not in current:
                return None
            current = current[piece]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(piece)]
            except (ValueError, IndexError):
                return None
        else:
            return None
    return current


def get_schemas(
    doc: Any, candidates: Mapping[str, Sequence[str]], allow_empty: bool = True
) -> tuple[Optional[Any], Optional[str]]:
    """Return ``(schemas, path)`` for the first candidate that resolves.

    Args:
        doc: The loaded document.
        candidates: Path to key segments, tried in order.
        allow_empty: Accept an empty container. When ``False`` empty
            containers are skipped like missing ones.

    Returns:
        The container and its path, or ``(None, None)`` if none matched.
    """
    for path, pieces in candidates.items():
        schemas = dig(doc, pieces)
        if schemas is None:
            continue
        if not allow_empty and not schemas:
            continue
        return schemas, path
    return None, None


def locate_schemas(doc: Any, path: Optional[str] = None) -> Optional[SchemaLocation]:
    """Find the schema container of *doc*.

    Args:
        doc: The loaded document.
        path: Explicit container path. ``None`` tries the defaults and
            skips empty containers.

    Returns:
        A :class:`SchemaLocation`, or ``None`` if nothing was found. A
        found container that is not a mapping counts as not found.
    """
    schemas, used = get_schemas(doc, path_candidates(path), allow_empty=path is not None)
    if schemas is None or used is None:
        logger.debug("No schema container found (path=%r)", path)
        return None
    if not isinstance(schemas, Mapping):
        logger.debug("Container at %s is a %s, not a mapping", used, type(schemas).__name__)
        return None
    logger.debug("Found %d schemas at %s", len(schemas), used)
    return SchemaLocation(path=used, schemas=schemas)
