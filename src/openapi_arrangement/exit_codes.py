"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~openapi_arrangement.exceptions.ArrangementError`
subclass. Shell wrappers and build scripts can inspect the exit code to
tell a missing schema container apart from a malformed document.

Example::

    $ openapi-arrangement order api.yaml --path '#/nowhere'
    $ echo $?
    4   # EXIT_NOT_FOUND -- no schema container at the given path
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (e.g. an unknown sort key)."""

EXIT_NOT_FOUND = 4
"""No schema container was found in the document."""

EXIT_SPEC_PARSE_ERROR = 7
"""The input document could not be loaded or parsed."""
