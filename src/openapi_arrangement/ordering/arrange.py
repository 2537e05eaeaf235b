"""Convenience entry points that locate, build and sort in one call.

All functions return the sorted list of
:class:`~openapi_arrangement.ordering.orderer.OrderedSchema` entries, or
``None`` when the document has no schema container.
"""

from __future__ import annotations

from typing import Any, Optional

from openapi_arrangement.ordering.orderer import (
    ALPHABETICAL,
    GREEDY_REQUIRED_FIRST,
    OrderedSchema,
    Orderer,
)
from openapi_arrangement.parser.locator import locate_schemas


def build_orderer(doc: Any, path: Optional[str] = None) -> Optional[Orderer]:
    """Return an :class:`Orderer` for the schemas of *doc*, or ``None``."""
    location = locate_schemas(doc, path)
    if location is None:
        return None
    return Orderer(location.path, location.schemas)


def arrange(
    doc: Any, path: Optional[str] = None, strategy: str = GREEDY_REQUIRED_FIRST
) -> Optional[list[OrderedSchema]]:
    """Arrange the schemas of *doc* with *strategy*."""
    orderer = build_orderer(doc, path)
    if orderer is None:
        return None
    return orderer.sort(strategy)


def alphabetical(doc: Any, path: Optional[str] = None) -> Optional[list[OrderedSchema]]:
    """Arrange schemas in alphabetical order."""
    return arrange(doc, path, ALPHABETICAL)


def dependencies_first(doc: Any, path: Optional[str] = None) -> Optional[list[OrderedSchema]]:
    """Arrange schemas to minimize forward declarations."""
    return arrange(doc, path, GREEDY_REQUIRED_FIRST)
