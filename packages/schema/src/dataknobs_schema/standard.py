"""The standard schema contract and the synchronous ``parse`` entry point.

Any object exposing an integer ``version``, a string ``vendor`` and a
``validate(value) -> Result`` method is a standard schema. The built-in
validators in this package satisfy the contract, and the composite
validators accept any conforming object, including schemas from other
libraries.

Only synchronous validation is supported. ``parse`` is the single relay
through which every nested schema is invoked, so a schema returning an
awaitable is rejected at whatever depth it appears.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from .exceptions import AsyncValidationError, SchemaError, SchemaValidationError
from .result import Result

logger = logging.getLogger(__name__)

VERSION = 1
VENDOR = "dataknobs"

InputT = TypeVar("InputT", contravariant=True)
OutputT = TypeVar("OutputT", covariant=True)


@runtime_checkable
class StandardSchema(Protocol[InputT, OutputT]):
    """Structural interface shared by all standard schemas.

    ``InputT`` is the type a schema accepts and ``OutputT`` the type of
    the value in a successful result. They differ only for coercing
    schemas such as ``date()``.
    """

    version: int
    vendor: str

    def validate(self, value: Any) -> Any:
        """Validate ``value`` and return a ``Result``."""
        ...


def is_standard_schema(obj: Any) -> bool:
    """Check whether ``obj`` exposes the standard schema capability.

    Args:
        obj: Object to inspect

    Returns:
        True if ``obj`` has an int ``version``, a str ``vendor`` and a
        callable ``validate``
    """
    return (
        isinstance(getattr(obj, "version", None), int)
        and isinstance(getattr(obj, "vendor", None), str)
        and callable(getattr(obj, "validate", None))
    )


def parse(schema: StandardSchema[Any, OutputT], value: Any) -> Result[OutputT]:
    """Validate ``value`` with ``schema``, refusing asynchronous results.

    Args:
        schema: Any standard schema
        value: Value to validate

    Returns:
        The schema's Result. A ``{value}`` / ``{issues}`` mapping, or a
        result object from another library exposing ``value`` and
        ``issues`` attributes, is converted to a ``Result``.

    Raises:
        AsyncValidationError: If the schema returned an awaitable. This
            signals a misconfigured schema, not invalid data.
        SchemaError: If the schema returned something that is not a result
    """
    parsed = schema.validate(value)

    if inspect.isawaitable(parsed):
        if inspect.iscoroutine(parsed):
            parsed.close()
        vendor = getattr(schema, "vendor", None)
        logger.debug(f"Rejected awaitable result from schema {schema!r} (vendor={vendor})")
        raise AsyncValidationError(vendor)

    if isinstance(parsed, Result):
        return parsed
    return _coerce_result(schema, parsed)


def _coerce_result(schema: Any, parsed: Any) -> Result[Any]:
    # {value} / {issues} mappings, or result objects from other libraries
    if isinstance(parsed, Mapping):
        data = parsed
    elif hasattr(parsed, "issues") or hasattr(parsed, "value"):
        data = {"value": getattr(parsed, "value", None), "issues": getattr(parsed, "issues", None)}
    else:
        raise SchemaError(
            f"Schema {schema!r} returned an unsupported result: {type(parsed).__name__}",
            context={"vendor": getattr(schema, "vendor", None)},
        )

    try:
        return Result.from_dict(data)
    except (TypeError, ValueError) as e:
        raise SchemaError(
            f"Schema {schema!r} returned a malformed result: {e}",
            context={"vendor": getattr(schema, "vendor", None)},
        ) from e


def validate_or_raise(schema: StandardSchema[Any, OutputT], value: Any) -> OutputT:
    """Validate ``value`` and return the output value directly.

    Args:
        schema: Any standard schema
        value: Value to validate

    Returns:
        The validated (possibly coerced) value

    Raises:
        SchemaValidationError: If validation produced issues
        AsyncValidationError: If the schema returned an awaitable
    """
    result = parse(schema, value)
    if result.issues:
        raise SchemaValidationError(result.issues)
    return result.value
