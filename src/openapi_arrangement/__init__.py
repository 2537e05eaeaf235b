"""openapi-arrangement -- Order OpenAPI/JSON-Schema schemas for code generation.

This package takes the named schema definitions of an OpenAPI 3.x document
(``#/components/schemas``) or a JSON-Schema document (``#/$defs``) and
arranges them into a linear sequence suitable for emitting source code.
Schemas that are used before they are declared need a forward declaration;
the default ordering keeps those to a minimum.

Typical usage::

    from openapi_arrangement import dependencies_first

    for entry in dependencies_first(doc):
        print(entry.name, sorted(entry.unseen_refs))

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models for configuration.
    config: Project/environment configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    parser: Document loading and schema-container location.
    ordering: Reference extraction and schema ordering.
"""

NAME = "openapi-arrangement"

__version__ = "0.1.0"


def info(separator: str = ": ") -> str:
    """Return the program name and version joined by *separator*."""
    return f"{NAME}{separator}{__version__}"


from openapi_arrangement.ordering.arrange import (  # noqa: E402
    alphabetical,
    arrange,
    dependencies_first,
)

__all__ = ["NAME", "__version__", "info", "alphabetical", "arrange", "dependencies_first"]
