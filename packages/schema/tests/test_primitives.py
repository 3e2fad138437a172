"""Tests for primitive schemas."""

import math
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from dataknobs_schema import (
    Bounds,
    Issue,
    SchemaConfigurationError,
    boolean,
    date,
    instance_of,
    integer,
    number,
    string,
)


def only_message(result):
    """Return the message of a single path-less issue."""
    assert result.issues is not None and len(result.issues) == 1
    assert result.issues[0].path is None
    return result.issues[0].message


class TestBoolean:
    """Test boolean()."""

    @pytest.mark.parametrize("value", [True, False])
    def test_accepts_booleans(self, value):
        """Test both boolean values pass through."""
        assert boolean().validate(value).value is value

    @pytest.mark.parametrize("value", [0, 1, "true", None, [], 1.0])
    def test_rejects_non_booleans(self, value):
        """Test truthy and falsy non-booleans are rejected."""
        assert only_message(boolean().validate(value)) == "must be a boolean"


class TestNumber:
    """Test number()."""

    @pytest.mark.parametrize("value", [0, -1.5, 3, 2.5e10, 10**20])
    def test_accepts_finite_numbers(self, value):
        """Test ints and floats are accepted with default bounds."""
        assert number().validate(value).value == value

    @pytest.mark.parametrize("value", ["1", None, True, False, math.nan, math.inf, -math.inf])
    def test_rejects_non_numbers(self, value):
        """Test type and finiteness checks."""
        assert only_message(number().validate(value)) == "must be a number"

    def test_bounds_are_inclusive(self):
        """Test min and max are both inclusive."""
        schema = number(min=0.5, max=1.5)
        assert schema.validate(0.5).ok
        assert schema.validate(1.5).ok
        assert only_message(schema.validate(0.4)) == "must be greater than or equal to 0.5"
        assert only_message(schema.validate(1.6)) == "must be less than or equal to 1.5"

    def test_negative_numbers_allowed_by_default(self):
        """Test the default lower bound is the most negative float."""
        assert number().validate(-1e300).ok

    def test_min_greater_than_max(self):
        """Test inconsistent bounds are rejected at construction."""
        with pytest.raises(SchemaConfigurationError):
            number(min=2, max=1)

    def test_non_numeric_bound(self):
        """Test bounds must be numbers."""
        with pytest.raises(SchemaConfigurationError):
            number(min="0")


class TestInteger:
    """Test integer()."""

    @pytest.mark.parametrize("value", [0, 5, 10])
    def test_accepts_in_range(self, value):
        """Test inclusive bounds."""
        assert integer(min=0, max=10).validate(value).value == value

    @pytest.mark.parametrize(
        "value,message",
        [
            (10.5, "must be an integer"),
            (-1, "must be greater than or equal to 0"),
            (11, "must be less than or equal to 10"),
            (math.nan, "must be an integer"),
            (math.inf, "must be an integer"),
            ("5", "must be an integer"),
            (True, "must be an integer"),
            (None, "must be an integer"),
        ],
    )
    def test_rejects(self, value, message):
        """Test each failing check produces its own message."""
        assert only_message(integer(min=0, max=10).validate(value)) == message

    def test_integrality_checked_before_bounds(self):
        """Test a fractional out-of-range value reports integrality."""
        assert only_message(integer(min=0, max=10).validate(-0.5)) == "must be an integer"

    def test_whole_float_is_accepted(self):
        """Test whole-valued floats pass through unchanged."""
        result = integer().validate(5.0)
        assert result.value == 5.0
        assert isinstance(result.value, float)

    def test_unbounded_by_default(self):
        """Test arbitrarily large ints are accepted without bounds."""
        assert integer().validate(10**100).ok
        assert integer().validate(-(10**100)).ok

    def test_bounds_cannot_be_reassigned(self):
        """Test bounds are fixed after construction."""
        schema = integer(max=5)
        with pytest.raises(AttributeError):
            schema.bounds = Bounds()
        with pytest.raises(AttributeError):
            del schema.bounds
        assert not schema.validate(6).ok


class TestString:
    """Test string()."""

    def test_accepts_any_string_without_bounds(self):
        """Test min and max are optional."""
        assert string().validate("").value == ""
        assert string().validate("x" * 1000).ok

    @pytest.mark.parametrize("value", [1, None, b"bytes", ["a"]])
    def test_rejects_non_strings(self, value):
        """Test type check."""
        assert only_message(string().validate(value)) == "must be a string"

    def test_length_bounds(self):
        """Test inclusive length bounds."""
        schema = string(min=2, max=4)
        assert schema.validate("ab").ok
        assert schema.validate("abcd").ok
        assert only_message(schema.validate("a")) == "must be at least 2 characters long"
        assert only_message(schema.validate("abcde")) == "must be at most 4 characters long"

    def test_only_max(self):
        """Test bounds are independently optional."""
        schema = string(max=1)
        assert schema.validate("").ok
        assert not schema.validate("ab").ok

    def test_negative_length(self):
        """Test negative lengths are rejected at construction."""
        with pytest.raises(SchemaConfigurationError):
            string(min=-1)

    @pytest.mark.parametrize("bounds", [{"min": 1.5}, {"max": 2.0}, {"max": True}, {"min": "1"}])
    def test_non_integer_length(self, bounds):
        """Test lengths must be ints."""
        with pytest.raises(SchemaConfigurationError):
            string(**bounds)

    def test_bounds_cannot_be_reassigned(self):
        """Test schemas are immutable after construction."""
        schema = string(max=1)
        with pytest.raises(AttributeError):
            schema.bounds = Bounds(max=10)
        assert not schema.validate("ab").ok


class TestDate:
    """Test date()."""

    def test_accepts_iso_string(self):
        """Test ISO 8601 strings with a Z suffix are coerced to UTC."""
        result = date().validate("2024-01-01T00:00:00.000Z")
        assert result.value == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert result.value.utcoffset().total_seconds() == 0

    def test_accepts_offset_string(self):
        """Test explicit offsets are honored."""
        result = date().validate("2024-01-01T02:00:00+02:00")
        assert result.value == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_accepts_epoch_zero(self):
        """Test epoch milliseconds are coerced to aware datetimes."""
        assert date().validate(0).value == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_epoch_milliseconds(self):
        """Test the number is read as milliseconds."""
        result = date().validate(1_704_067_200_000)
        assert result.value == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_accepts_datetime_unchanged(self):
        """Test datetime instances pass through as-is."""
        now = datetime.now()
        assert date().validate(now).value is now

    def test_date_only_string_is_utc(self):
        """Test date-only strings are midnight UTC, like epoch inputs."""
        result = date().validate("2024-01-01")
        assert result.value == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert result.value.tzinfo is not None
        assert result.value > date().validate(0).value

    def test_date_time_without_offset_stays_naive(self):
        """Test wall-clock date-times keep no timezone."""
        result = date().validate("2024-01-01T10:00:00")
        assert result.value == datetime(2024, 1, 1, 10, 0)
        assert result.value.tzinfo is None

    @pytest.mark.parametrize(
        "value", ["not-a-date", "", {}, [], None, True, math.nan, math.inf, 10**20]
    )
    def test_rejects(self, value):
        """Test unparseable and unsupported inputs."""
        assert only_message(date().validate(value)) == (
            "must be a valid ISO 8601 string or epoch timestamp in milliseconds"
        )


class TestInstanceOf:
    """Test instance_of()."""

    def test_accepts_instances(self):
        """Test instances and subclass instances are accepted."""
        assert instance_of(Decimal).validate(Decimal("1.5")).value == Decimal("1.5")
        assert instance_of(int).validate(True).ok

    def test_rejects_with_class_name(self):
        """Test the message names the expected class."""
        assert only_message(instance_of(Decimal).validate(1.5)) == (
            "must be an instance of Decimal"
        )

    def test_requires_a_class(self):
        """Test non-class arguments are rejected at construction."""
        with pytest.raises(SchemaConfigurationError):
            instance_of("Decimal")

    def test_class_cannot_be_reassigned(self):
        """Test the target class is fixed after construction."""
        schema = instance_of(int)
        with pytest.raises(AttributeError):
            schema.cls = object
        assert not schema.validate("x").ok


class TestPrimitiveIssues:
    """Test failures from primitives have no path."""

    def test_issue_has_no_path(self):
        """Test the path is left to enclosing composites."""
        assert string().validate(1).issues == (Issue("must be a string"),)
