"""Primitive schemas: booleans, numbers, integers, strings, dates and instances.

Each primitive checks its input in a fixed order and returns on the first
failing check, so a failed result always carries exactly one issue with no
path. Paths are added by the enclosing composite, if any.
"""

from __future__ import annotations

import math
import sys
from datetime import date as calendar_date
from datetime import datetime, time, timedelta, timezone
from typing import Any, Type, TypeVar

from .base import BaseSchema, Bounds
from .exceptions import SchemaConfigurationError
from .result import Result

T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DATE_SOURCE_MESSAGE = "must be a valid ISO 8601 string or epoch timestamp in milliseconds"


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: int | float) -> bool:
    return isinstance(value, int) or math.isfinite(value)


class BooleanSchema(BaseSchema[bool, bool]):
    """Accepts ``True`` and ``False`` only."""

    def validate(self, value: Any) -> Result[bool]:
        if not isinstance(value, bool):
            return Result.fail("must be a boolean")
        return Result.success(value)


class NumberSchema(BaseSchema[float, float]):
    """Accepts finite ints and floats within inclusive bounds."""

    def __init__(self, bounds: Bounds):
        self.bounds = bounds
        super().__init__()

    def validate(self, value: Any) -> Result[float]:
        if not _is_real(value) or not _is_finite(value):
            return Result.fail("must be a number")

        message = self.bounds.check(value)
        if message:
            return Result.fail(message)

        return Result.success(value)

    def _describe(self) -> str:
        return self.bounds.describe()


class IntegerSchema(BaseSchema[int, int]):
    """Accepts whole numbers within inclusive bounds.

    Whole-valued floats such as ``5.0`` are accepted and returned as-is.
    """

    def __init__(self, bounds: Bounds):
        self.bounds = bounds
        super().__init__()

    def validate(self, value: Any) -> Result[int]:
        if not _is_real(value):
            return Result.fail("must be an integer")
        if not _is_finite(value):
            return Result.fail("must be an integer")
        if isinstance(value, float) and not value.is_integer():
            return Result.fail("must be an integer")

        message = self.bounds.check(value)
        if message:
            return Result.fail(message)

        return Result.success(value)

    def _describe(self) -> str:
        return self.bounds.describe()


class StringSchema(BaseSchema[str, str]):
    """Accepts strings whose length is within inclusive bounds."""

    def __init__(self, bounds: Bounds):
        self.bounds = bounds
        super().__init__()

    def validate(self, value: Any) -> Result[str]:
        if not isinstance(value, str):
            return Result.fail("must be a string")
        if self.bounds.min is not None and len(value) < self.bounds.min:
            return Result.fail(f"must be at least {self.bounds.min} characters long")
        if self.bounds.max is not None and len(value) > self.bounds.max:
            return Result.fail(f"must be at most {self.bounds.max} characters long")
        return Result.success(value)

    def _describe(self) -> str:
        return self.bounds.describe()


class DateSchema(BaseSchema[Any, datetime]):
    """Accepts datetimes, and coerces ISO 8601 strings and epoch milliseconds.

    Strings are parsed with ``datetime.fromisoformat``; a trailing ``Z`` is
    read as UTC, and date-only strings such as ``"2024-01-01"`` are midnight
    UTC. Date-time strings without an offset stay naive, since they name a
    wall-clock time rather than an instant. Numbers are milliseconds since
    the Unix epoch and produce timezone-aware UTC datetimes.
    """

    def validate(self, value: Any) -> Result[datetime]:
        if isinstance(value, datetime):
            return Result.success(value)

        if isinstance(value, str):
            parsed = self._from_string(value)
        elif _is_real(value):
            parsed = self._from_timestamp(value)
        else:
            return Result.fail(_DATE_SOURCE_MESSAGE)

        if parsed is None:
            return Result.fail(_DATE_SOURCE_MESSAGE)
        return Result.success(parsed)

    @staticmethod
    def _from_string(value: str) -> datetime | None:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            day = calendar_date.fromisoformat(text)
        except ValueError:
            day = None
        if day is not None:
            # date-only forms are midnight UTC, as the Z-suffixed forms are
            return datetime.combine(day, time(), tzinfo=timezone.utc)
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None

    @staticmethod
    def _from_timestamp(value: int | float) -> datetime | None:
        if not _is_finite(value):
            return None
        try:
            return _EPOCH + timedelta(milliseconds=value)
        except OverflowError:
            return None


class InstanceOfSchema(BaseSchema[T, T]):
    """Accepts instances of a given class, including subclasses."""

    def __init__(self, cls: Type[T]):
        if not isinstance(cls, type):
            raise SchemaConfigurationError(
                f"instance_of requires a class, got {type(cls).__name__}",
                context={"cls": repr(cls)},
            )
        self.cls = cls
        super().__init__()

    def validate(self, value: Any) -> Result[T]:
        if not isinstance(value, self.cls):
            return Result.fail(f"must be an instance of {self.cls.__name__}")
        return Result.success(value)

    def _describe(self) -> str:
        return self.cls.__name__


def boolean() -> BooleanSchema:
    """Create a schema for boolean values."""
    return BooleanSchema()


def number(
    min: float = -sys.float_info.max,
    max: float = sys.float_info.max,
) -> NumberSchema:
    """Create a schema for finite numbers with optional bounds.

    Args:
        min: Smallest accepted value (inclusive)
        max: Largest accepted value (inclusive)

    Returns:
        NumberSchema instance

    Raises:
        SchemaConfigurationError: If a bound is not a number or min > max
    """
    return NumberSchema(Bounds(min=min, max=max))


def integer(min: int | None = None, max: int | None = None) -> IntegerSchema:
    """Create a schema for whole numbers with optional bounds.

    Args:
        min: Smallest accepted value (inclusive), unbounded if None
        max: Largest accepted value (inclusive), unbounded if None

    Returns:
        IntegerSchema instance

    Raises:
        SchemaConfigurationError: If a bound is not a number or min > max
    """
    return IntegerSchema(Bounds(min=min, max=max))


def string(min: int | None = None, max: int | None = None) -> StringSchema:
    """Create a schema for strings with optional length bounds.

    Args:
        min: Minimum length (inclusive)
        max: Maximum length (inclusive)

    Returns:
        StringSchema instance

    Raises:
        SchemaConfigurationError: If a length is not a non-negative int
            or min > max
    """
    for name, bound in (("min", min), ("max", max)):
        if bound is None:
            continue
        if not isinstance(bound, int) or isinstance(bound, bool):
            raise SchemaConfigurationError(
                f"{name} length must be an int, got {type(bound).__name__}",
                context={name: bound},
            )
        if bound < 0:
            raise SchemaConfigurationError(
                f"{name} length cannot be negative: {bound}", context={name: bound}
            )
    return StringSchema(Bounds(min=min, max=max))


def date() -> DateSchema:
    """Create a schema for datetimes, coercing ISO strings and epoch milliseconds."""
    return DateSchema()


def instance_of(cls: Type[T]) -> InstanceOfSchema[T]:
    """Create a schema accepting instances of ``cls``.

    Args:
        cls: Class that values must be an instance of

    Returns:
        InstanceOfSchema instance
    """
    return InstanceOfSchema(cls)
