"""Read a JSON or YAML document from a file, a URL or stdin.

``-`` reads stdin and ``http://`` / ``https://`` sources are fetched with
httpx. The file suffix, the response content type or the URL suffix picks
the parser; without a hint JSON is tried before YAML.

The parsed value is returned as is. Whether it holds a schema container
(or is a mapping at all) is decided by
:func:`~openapi_arrangement.parser.locator.locate_schemas`.
"""

from __future__ import annotations

import json
import sys
from contextlib import suppress
from pathlib import Path, PurePosixPath
from typing import Any, Optional

import httpx
import yaml

from openapi_arrangement.exceptions import SpecParseError

_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def load_document(source: str) -> Any:
    """Load and parse the document at *source* (path, URL or ``-``).

    Raises:
        SpecParseError: If the source cannot be read, is empty, or is
            neither JSON nor YAML.
    """
    if source == "-":
        text, fmt = sys.stdin.read(), None
    elif source.startswith(("http://", "https://")):
        text, fmt = _fetch(source)
    else:
        text, fmt = _read_file(Path(source))
    if not text.strip():
        raise SpecParseError(f"Document is empty: {source}")
    return parse_document(text, fmt)


def parse_document(text: str, fmt: Optional[str] = None) -> Any:
    """Parse *text* as ``"json"``, ``"yaml"``, or either when *fmt* is None.

    An empty YAML document parses to ``None``.
    """
    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SpecParseError(f"Invalid JSON: {exc}") from exc
    if fmt is None:
        with suppress(json.JSONDecodeError):
            return json.loads(text)
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        kind = "YAML" if fmt == "yaml" else "JSON or YAML"
        raise SpecParseError(f"Invalid {kind}: {exc}") from exc


def _read_file(path: Path) -> tuple[str, Optional[str]]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SpecParseError(f"Document not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecParseError(f"Cannot read {path}: {exc}") from exc
    return text, _SUFFIX_FORMATS.get(path.suffix.lower())


def _fetch(url: str) -> tuple[str, Optional[str]]:
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(f"HTTP {exc.response.status_code} fetching {url}") from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        fmt: Optional[str] = "json"
    elif "yaml" in content_type:
        fmt = "yaml"
    else:
        fmt = _SUFFIX_FORMATS.get(PurePosixPath(response.url.path).suffix.lower())
    return response.text, fmt
