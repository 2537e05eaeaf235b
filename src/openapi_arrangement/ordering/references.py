"""Extract direct ``$ref`` edges from a single schema definition.

Each schema refers to other schemas through its combinators or its
properties. This module collects those references into a mapping of
reference string to a ``required`` flag:

* ``allOf`` -- every branch must hold, so every ``$ref`` is **required**.
* ``anyOf`` -- any branch may hold, so every ``$ref`` is **optional**.
* ``oneOf`` -- treated like ``anyOf``. Exclusivity between branches is not
  verified; that belongs to a separate validation step.
* otherwise -- each property ``$ref`` is required when the property name is
  listed in ``required`` and optional when it is not.

Only the first combinator present is consulted, in the order above.

The required flag is sticky: once a reference is marked required it is
never downgraded by a later optional occurrence.

Extraction is best-effort. Malformed shapes (a non-string ``$ref``, a
combinator that is not a list, etc.) simply contribute no edge.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def gather_array_refs(
    refs: dict[str, bool], items: Any, required: bool
) -> dict[str, bool]:
    """Add the ``$ref`` of every item in *items* to *refs*.

    Args:
        refs: Mapping updated in place.
        items: Sequence of sub-schemas, typically the value of ``allOf``.
        required: Flag recorded for every reference found.

    Returns:
        The same *refs* mapping, for convenience.
    """
    if not _is_sequence(items):
        return refs
    for item in items:
        if not isinstance(item, Mapping):
            continue
        ref = item.get("$ref")
        if not isinstance(ref, str):
            continue
        refs[ref] = required or refs.get(ref, False)
    return refs


def gather_refs(refs: dict[str, bool], schema: Any) -> dict[str, bool]:
    """Add every direct reference of *schema* to *refs*.

    Inline sub-schemas are not descended into; only ``$ref`` entries that
    sit directly in a combinator list or a property are considered.

    Args:
        refs: Mapping updated in place. Existing ``True`` values are kept.
        schema: The raw schema definition.

    Returns:
        The same *refs* mapping, for convenience.
    """
    if not isinstance(schema, Mapping):
        return refs

    items = schema.get("allOf")
    if items is not None:
        return gather_array_refs(refs, items, True)

    items = schema.get("anyOf")
    if items is None:
        items = schema.get("oneOf")
    if items is not None:
        return gather_array_refs(refs, items, False)

    reqs = schema.get("required", [])
    if not _is_sequence(reqs):
        reqs = []
    properties = schema.get("properties", {})
    if not isinstance(properties, Mapping):
        return refs
    for name, spec in properties.items():
        if not isinstance(spec, Mapping):
            continue
        ref = spec.get("$ref")
        if not isinstance(ref, str):
            continue
        refs[ref] = name in reqs or refs.get(ref, False)
    return refs


def extract_refs(schema: Any) -> dict[str, bool]:
    """Return a fresh mapping of the direct references of *schema*."""
    return gather_refs({}, schema)
