"""Document parser -- load a document and locate its schema container.

Typical usage::

    from openapi_arrangement.parser import load_document, locate_schemas

    doc = load_document("openapi.yaml")
    location = locate_schemas(doc)  # None if there is no container
    if location is not None:
        print(location.path, list(location.schemas))

Sub-modules:

* :mod:`~openapi_arrangement.parser.loader` -- I/O layer (URL, file, stdin)
  plus JSON/YAML format detection.
* :mod:`~openapi_arrangement.parser.locator` -- Finds the named-schema
  mapping by JSON-pointer-like path or the built-in defaults.
"""

from openapi_arrangement.parser.loader import load_document
from openapi_arrangement.parser.locator import SchemaLocation, locate_schemas

__all__ = ["load_document", "locate_schemas", "SchemaLocation"]
