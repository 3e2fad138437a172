"""Composite schemas built from other schemas.

Composites invoke nested schemas through ``parse`` and rebase every nested
issue with ``prepend_path``, one segment per level. They never stop at
the first failing child and never return a partial value alongside issues.

Nesting is handled by plain recursion, so validation depth is bounded
only by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional, TypeVar

from .base import BaseSchema
from .exceptions import SchemaConfigurationError
from .result import Issue, Result, prefix_issues
from .standard import StandardSchema, is_standard_schema, parse

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


def _require_schema(schema: Any, role: str) -> None:
    if not is_standard_schema(schema):
        raise SchemaConfigurationError(
            f"{role} must be a standard schema, got {type(schema).__name__}",
            context={"role": role},
        )


class ArraySchema(BaseSchema[List[InputT], List[OutputT]]):
    """Validates every element of a list or tuple against one schema."""

    def __init__(self, items: StandardSchema[InputT, OutputT]):
        _require_schema(items, "array items")
        self.items = items
        super().__init__()

    def validate(self, value: Any) -> Result[List[OutputT]]:
        if not isinstance(value, (list, tuple)):
            return Result.fail("must be an array")

        issues: List[Issue] = []
        output: List[OutputT] = []

        for index, element in enumerate(value):
            parsed = parse(self.items, element)
            if parsed.issues:
                issues.extend(prefix_issues(index, parsed.issues))
            else:
                output.append(parsed.value)

        if issues:
            return Result.failure(issues)
        return Result.success(output)

    def _describe(self) -> str:
        return repr(self.items)


class StrictObjectSchema(BaseSchema[Dict[str, Any], Dict[str, Any]]):
    """Validates a mapping against a fixed shape, rejecting unknown keys.

    Issues are reported in three groups, in order: one ``unknown field``
    issue per input key missing from the shape, one ``is required`` issue
    per shape key missing from the input, then the issues of each known
    field in input key order.
    """

    def __init__(self, shape: Mapping[str, StandardSchema[Any, Any]]):
        if not isinstance(shape, Mapping):
            raise SchemaConfigurationError(
                f"strict_object shape must be a mapping, got {type(shape).__name__}"
            )
        for key, schema in shape.items():
            _require_schema(schema, f"field '{key}'")
        self.shape: Mapping[str, StandardSchema[Any, Any]] = MappingProxyType(dict(shape))
        super().__init__()

    def validate(self, value: Any) -> Result[Dict[str, Any]]:
        if not isinstance(value, Mapping):
            return Result.fail("must be an object")

        issues: List[Issue] = []
        unknown = value.keys() - self.shape.keys()
        missing = self.shape.keys() - value.keys()

        # set differences, walked in input and shape order respectively
        for key in value:
            if key in unknown:
                issues.append(Issue("unknown field", path=(key,)))

        for key in self.shape:
            if key in missing:
                issues.append(Issue("is required", path=(key,)))

        record: Dict[str, Any] = {}

        for key, field_value in value.items():
            schema = self.shape.get(key)
            if schema is None:
                continue
            parsed = parse(schema, field_value)
            if parsed.issues:
                issues.extend(prefix_issues(key, parsed.issues))
            else:
                record[key] = parsed.value

        if issues:
            return Result.failure(issues)
        return Result.success(record)

    def _describe(self) -> str:
        return ", ".join(f"{key}={schema!r}" for key, schema in self.shape.items())


class NullableSchema(BaseSchema[Optional[InputT], Optional[OutputT]]):
    """Accepts ``None`` and otherwise defers to the wrapped schema."""

    def __init__(self, inner: StandardSchema[InputT, OutputT]):
        _require_schema(inner, "nullable inner")
        self.inner = inner
        super().__init__()

    def validate(self, value: Any) -> Result[OutputT | None]:
        if value is None:
            return Result.success(None)
        return parse(self.inner, value)

    def _describe(self) -> str:
        return repr(self.inner)


def array(schema: StandardSchema[InputT, OutputT]) -> ArraySchema[InputT, OutputT]:
    """Create a schema for lists whose elements all satisfy ``schema``.

    Args:
        schema: Schema applied to each element

    Returns:
        ArraySchema instance; successful output is always a list
    """
    return ArraySchema(schema)


def strict_object(shape: Mapping[str, StandardSchema[Any, Any]]) -> StrictObjectSchema:
    """Create a schema for mappings with exactly the keys in ``shape``.

    Args:
        shape: Field name to schema mapping. It is copied, so later
            changes to the caller's mapping do not affect the schema.

    Returns:
        StrictObjectSchema instance

    Example:
        ```python
        user = strict_object({"name": string(min=1), "age": integer(min=0)})
        user.validate({"name": "Ada", "age": 36}).value
        # {'name': 'Ada', 'age': 36}
        ```
    """
    return StrictObjectSchema(shape)


def nullable(schema: StandardSchema[InputT, OutputT]) -> NullableSchema[InputT, OutputT]:
    """Make ``schema`` also accept ``None``."""
    return NullableSchema(schema)
