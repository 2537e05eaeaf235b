"""Exception hierarchy for openapi-arrangement.

All exceptions inherit from :class:`ArrangementError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`openapi_arrangement.exit_codes`. The CLI commands catch
``ArrangementError``, report it on stderr and exit with its code.

Subclass hierarchy::

    ArrangementError (exit 1)
    +-- InvalidUsageError       (exit 2)
    |   +-- UnknownSortKeyError (exit 2)
    +-- SchemasNotFoundError    (exit 4)
    +-- SpecParseError          (exit 7)
    +-- ConfigError             (exit 1)
"""

from openapi_arrangement.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SPEC_PARSE_ERROR,
)


class ArrangementError(Exception):
    """Base exception for all openapi-arrangement errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`openapi_arrangement.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ArrangementError):
    """Raised for invalid CLI arguments or API misuse."""

    exit_code = EXIT_INVALID_USAGE


class UnknownSortKeyError(InvalidUsageError, ValueError):
    """Raised when a custom sort key is not registered for the entry type.

    Args:
        key: The sort key that could not be resolved.
        entry_type: Name of the type the key was evaluated against.
    """

    def __init__(self, key: str, entry_type: str):
        super().__init__(
            f"{key} is not a {entry_type} attribute nor a registered sort key"
        )
        self.key = key
        self.entry_type = entry_type


class SchemasNotFoundError(ArrangementError):
    """Raised by the CLI when no schema container exists in the document."""

    exit_code = EXIT_NOT_FOUND


class SpecParseError(ArrangementError):
    """Raised when the input document cannot be loaded or parsed."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class ConfigError(ArrangementError):
    """Raised for configuration problems (invalid project file, bad env values)."""

    exit_code = EXIT_GENERIC_FAILURE
