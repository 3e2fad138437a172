"""Exception hierarchy for the dataknobs_schema package.

Validation failures are never raised by a schema's ``validate``; they are
returned as a failed ``Result``. The exceptions here cover the cases that are
not ordinary validation outcomes:

- ``AsyncValidationError``: a schema returned an awaitable where only
  synchronous results are supported. This is a programming error and is
  not meant to be caught and recovered from.
- ``SchemaConfigurationError``: a schema constructor or the schema factory
  was given invalid configuration.
- ``SchemaValidationError``: raised only by ``validate_or_raise`` for callers
  that prefer exceptions over inspecting a ``Result``.

Example:
    ```python
    from dataknobs_schema import integer, validate_or_raise
    from dataknobs_schema.exceptions import SchemaValidationError

    try:
        validate_or_raise(integer(min=0), -1)
    except SchemaValidationError as e:
        for issue in e.issues:
            print(issue.message)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .result import Issue


class SchemaError(Exception):
    """Base exception for all dataknobs_schema errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class AsyncValidationError(SchemaError):
    """Raised when a schema's validate returns an awaitable result."""

    def __init__(self, vendor: str | None = None):
        self.vendor = vendor
        super().__init__(
            "async standard schema validators are not supported",
            context={"vendor": vendor} if vendor is not None else None,
        )


class SchemaConfigurationError(SchemaError):
    """Raised when a schema is constructed from invalid configuration."""

    pass


class SchemaValidationError(SchemaError):
    """Raised by ``validate_or_raise`` when a value fails validation."""

    def __init__(self, issues: Sequence[Issue]):
        self.issues = tuple(issues)
        lines = "; ".join(str(issue) for issue in self.issues)
        super().__init__(
            f"Validation failed with {len(self.issues)} issue(s): {lines}",
            context={"issues": [issue.to_dict() for issue in self.issues]},
        )
