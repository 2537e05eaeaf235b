"""Order schema definitions for code generation.

:class:`Orderer` holds one :class:`SchemaInfo` per schema and arranges them
with a selectable strategy:

* ``greedy_required_first`` (default) -- repeatedly pick the schema whose
  emission right now causes the fewest forward references, mandatory ones
  weighing more than optional ones. See :meth:`Orderer.count_comparison`.
* ``alphabetical`` -- stable sort by schema name.
* any key registered in :data:`SORT_KEYS` -- stable sort by that key.

Whatever the strategy, the result is a list of :class:`OrderedSchema`
entries whose ``unseen_refs`` lists the references that are not yet
declared at that position and therefore need a forward declaration.

A reference in ``direct_refs`` is matched against the other schemas by
full reference (``#/components/schemas/Pet``) or by bare schema name
(``Pet``), the full reference taking precedence.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional

from openapi_arrangement.exceptions import UnknownSortKeyError
from openapi_arrangement.ordering.references import extract_refs

logger = logging.getLogger(__name__)

GREEDY_REQUIRED_FIRST = "greedy_required_first"
ALPHABETICAL = "alphabetical"


@dataclass(frozen=True)
class SchemaInfo:
    """A schema, the reference to it, its name, and what it refers to.

    Attributes:
        ref: Container path joined with the name, e.g.
            ``#/components/schemas/Pet``. Unique within an :class:`Orderer`.
        name: Name of the schema within its container.
        schema: The raw definition, passed through untouched.
        direct_refs: Referenced ``$ref`` strings mapped to ``True`` when
            the reference is required and ``False`` when optional.
    """

    ref: str
    name: str
    schema: Any
    direct_refs: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_definition(cls, ref: str, name: str, schema: Any) -> SchemaInfo:
        """Build an info record, extracting references from *schema*."""
        return cls(ref=ref, name=name, schema=schema, direct_refs=extract_refs(schema))

    def required_refs(self) -> list[str]:
        return [ref for ref, required in self.direct_refs.items() if required]

    def optional_refs(self) -> list[str]:
        return [ref for ref, required in self.direct_refs.items() if not required]

    def describe(self) -> str:
        """Return ``"<ref>: a:req b:opt"`` with references sorted."""
        parts = [
            f"{ref}:{'req' if self.direct_refs[ref] else 'opt'}"
            for ref in sorted(self.direct_refs)
        ]
        return f"{self.ref}: {' '.join(parts)}"


@dataclass(frozen=True)
class OrderedSchema:
    """A :class:`SchemaInfo` annotated with its place in an ordering.

    Attributes:
        info: The underlying schema record.
        unseen_refs: References of ``info`` not declared by any earlier
            entry. These need a forward declaration.
        position: Zero-based index in the ordering.
    """

    info: SchemaInfo
    unseen_refs: frozenset[str]
    position: int

    @property
    def ref(self) -> str:
        return self.info.ref

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def schema(self) -> Any:
        return self.info.schema

    @property
    def direct_refs(self) -> dict[str, bool]:
        return self.info.direct_refs

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable summary (the raw schema is omitted)."""
        return {
            "position": self.position,
            "name": self.name,
            "ref": self.ref,
            "direct_refs": dict(sorted(self.direct_refs.items())),
            "unseen_refs": sorted(self.unseen_refs),
        }


# --- Custom sort keys ---


SORT_KEYS: dict[str, Callable[[SchemaInfo], Any]] = {
    "name": lambda info: info.name,
    "ref": lambda info: info.ref,
    "required_count": lambda info: len(info.required_refs()),
    "optional_count": lambda info: len(info.optional_refs()),
    "ref_count": lambda info: len(info.direct_refs),
}
"""Registered custom sort keys. A leading ``@`` on a key is ignored."""


def get_sort_key(key: str) -> Callable[[SchemaInfo], Any]:
    """Return the accessor registered for *key*.

    Raises:
        UnknownSortKeyError: If *key* is not in :data:`SORT_KEYS`.
    """
    name = key[1:] if key.startswith("@") else key
    accessor = SORT_KEYS.get(name)
    if accessor is None:
        raise UnknownSortKeyError(key, SchemaInfo.__name__)
    return accessor


def sort_key_value(info: SchemaInfo, key: str) -> Any:
    """Evaluate the registered sort key *key* on *info*."""
    return get_sort_key(key)(info)


# --- Forward reference marking ---


def mark_unseen(order: Sequence[SchemaInfo]) -> list[OrderedSchema]:
    """Annotate *order* with the references each entry uses before declaration.

    Walks the order left to right. An entry's own name and reference count
    as seen when it is emitted, so a self-reference never needs a forward
    declaration.

    Args:
        order: Schemas in emission order.

    Returns:
        One :class:`OrderedSchema` per entry, in the same order.
    """
    seen: set[str] = set()
    result: list[OrderedSchema] = []
    for position, info in enumerate(order):
        seen.update((info.name, info.ref))
        unseen = frozenset(ref for ref in info.direct_refs if ref not in seen)
        result.append(OrderedSchema(info=info, unseen_refs=unseen, position=position))
    return result


# --- Orderer ---


class _Candidate(NamedTuple):
    """Forward reference counts for one schema during greedy selection."""

    optfwd: int  # optional references to it from chosen schemas
    manfwd: int  # mandatory references to it from chosen schemas
    optrem: int  # its own optional references not yet chosen
    manrem: int  # its own mandatory references not yet chosen
    info: SchemaInfo


class Orderer:
    """Orders the schemas of one container.

    Args:
        path: Container path, prefixed to each name to form its reference.
        schema_specs: Schema name to raw definition, in document order.

    Attributes:
        schemas: Reference to :class:`SchemaInfo`, in document order.
        order: Result of the most recent :meth:`sort`.
        strategy: Strategy used by the most recent :meth:`sort`.
    """

    def __init__(self, path: Optional[str], schema_specs: Mapping[str, Any]) -> None:
        prefix = path or ""
        self.schemas: dict[str, SchemaInfo] = {}
        for name, schema in schema_specs.items():
            ref = f"{prefix}{name}"
            self.schemas[ref] = SchemaInfo.from_definition(ref, str(name), schema)
        self.order: list[OrderedSchema] = []
        self.strategy: Optional[str] = None

        # Bare names resolve too, but never shadow a full reference.
        self._targets: dict[str, str] = {}
        for info in self.schemas.values():
            self._targets.setdefault(info.name, info.ref)
        for info in self.schemas.values():
            self._targets[info.ref] = info.ref
        self._edges: dict[str, dict[str, bool]] = {
            ref: self._resolve_edges(info) for ref, info in self.schemas.items()
        }

    def _resolve_edges(self, info: SchemaInfo) -> dict[str, bool]:
        edges: dict[str, bool] = {}
        for key, required in info.direct_refs.items():
            target = self._targets.get(key)
            if target is None:
                continue
            edges[target] = required or edges.get(target, False)
        return edges

    def requires(self, source: SchemaInfo, target: SchemaInfo) -> bool:
        """Return True if *source* has a required reference to *target*."""
        return self._edges[source.ref].get(target.ref, False)

    def sort(self, strategy: str = GREEDY_REQUIRED_FIRST) -> list[OrderedSchema]:
        """Arrange all schemas with *strategy* and mark forward references.

        Every call recomputes the order from scratch.

        Args:
            strategy: ``greedy_required_first``, ``alphabetical``, or a key
                registered in :data:`SORT_KEYS`.

        Returns:
            The new :attr:`order`.

        Raises:
            UnknownSortKeyError: If *strategy* is not a known strategy nor
                a registered sort key.
        """
        if strategy == GREEDY_REQUIRED_FIRST:
            order = self.greedy_required_first()
        elif strategy == ALPHABETICAL:
            order = sorted(self.schemas.values(), key=SORT_KEYS["name"])
        else:
            accessor = get_sort_key(strategy)
            order = sorted(self.schemas.values(), key=accessor)
        self.strategy = strategy
        self.order = mark_unseen(order)
        logger.debug("Sorted %d schemas with %s", len(self.order), strategy)
        return self.order

    def count_comparison(self, candidate: _Candidate, best: _Candidate) -> Optional[bool]:
        """Return whether *candidate* beats *best*, or ``None`` on a full tie.

        Criteria, first difference wins: fewer mandatory references from
        chosen schemas, fewer own mandatory references left, fewer optional
        references from chosen schemas, fewer own optional references left.
        If all counts tie, *candidate* wins when *best* requires it but it
        does not require *best*, and loses in the reverse case.
        """
        if candidate.manfwd != best.manfwd:
            return candidate.manfwd < best.manfwd
        if candidate.manrem != best.manrem:
            return candidate.manrem < best.manrem
        if candidate.optfwd != best.optfwd:
            return candidate.optfwd < best.optfwd
        if candidate.optrem != best.optrem:
            return candidate.optrem < best.optrem
        best_req_si = self.requires(best.info, candidate.info)
        si_req_best = self.requires(candidate.info, best.info)
        if best_req_si == si_req_best:
            return None
        return not si_req_best

    def _measure(
        self, info: SchemaInfo, chosen: Sequence[SchemaInfo], used: set[str]
    ) -> _Candidate:
        optfwd = manfwd = 0
        for other in chosen:
            required = self._edges[other.ref].get(info.ref)
            if required is None:
                continue
            if required:
                manfwd += 1
            else:
                optfwd += 1
        optrem = manrem = 0
        for key, required in info.direct_refs.items():
            if self._targets.get(key) in used:
                continue
            if required:
                manrem += 1
            else:
                optrem += 1
        return _Candidate(optfwd, manfwd, optrem, manrem, info)

    def greedy_required_first(self) -> list[SchemaInfo]:
        """Pick the best remaining schema one at a time until none remain.

        Exactly one schema is chosen per round, so cycles of any length
        terminate. Full ties fall back to the smaller name.
        """
        chosen: list[SchemaInfo] = []
        used: set[str] = set()
        remaining = list(self.schemas.values())
        while remaining:
            best = self._measure(remaining[0], chosen, used)
            for info in remaining[1:]:
                candidate = self._measure(info, chosen, used)
                better = self.count_comparison(candidate, best)
                if better is None:
                    better = info.name < best.info.name
                if better:
                    best = candidate
            logger.debug(
                "Chose %s (manfwd=%d manrem=%d optfwd=%d optrem=%d)",
                best.info.ref, best.manfwd, best.manrem, best.optfwd, best.optrem,
            )
            chosen.append(best.info)
            used.add(best.info.ref)
            remaining = [info for info in remaining if info.ref not in used]
        return chosen
