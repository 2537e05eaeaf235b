"""Schema ordering -- extract references and arrange schemas.

Typical usage::

    from openapi_arrangement.ordering import Orderer

    orderer = Orderer("#/components/schemas/", doc["components"]["schemas"])
    for entry in orderer.sort():
        ...

Sub-modules:

* :mod:`~openapi_arrangement.ordering.references` -- Direct ``$ref``
  extraction with required/optional flags.
* :mod:`~openapi_arrangement.ordering.orderer` -- :class:`Orderer`, the
  ordering strategies and forward reference marking.
* :mod:`~openapi_arrangement.ordering.arrange` -- One-call entry points
  working on a whole document.
"""

from openapi_arrangement.ordering.arrange import (
    alphabetical,
    arrange,
    build_orderer,
    dependencies_first,
)
from openapi_arrangement.ordering.orderer import (
    ALPHABETICAL,
    GREEDY_REQUIRED_FIRST,
    SORT_KEYS,
    OrderedSchema,
    Orderer,
    SchemaInfo,
    mark_unseen,
)
from openapi_arrangement.ordering.references import extract_refs, gather_refs

__all__ = [
    "ALPHABETICAL",
    "GREEDY_REQUIRED_FIRST",
    "SORT_KEYS",
    "OrderedSchema",
    "Orderer",
    "SchemaInfo",
    "alphabetical",
    "arrange",
    "build_orderer",
    "dependencies_first",
    "extract_refs",
    "gather_refs",
    "mark_unseen",
]
