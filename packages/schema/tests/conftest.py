"""Pytest configuration for dataknobs_schema tests."""

import sys
from pathlib import Path

import pytest


# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_schema import Result  # noqa: E402


class _AwaitableResult:
    """Awaitable that is not a coroutine, like a Future."""

    def __init__(self, result):
        self.result = result

    def __await__(self):
        yield
        return self.result


class AsyncSchema:
    """Third-party style schema whose validate is a coroutine function."""

    version = 1
    vendor = "async-vendor"

    async def validate(self, value):
        return Result.success(value)


class AwaitableSchema:
    """Third-party style schema returning a non-coroutine awaitable."""

    version = 1
    vendor = "awaitable-vendor"

    def validate(self, value):
        return _AwaitableResult(Result.success(value))


class UpperCaseSchema:
    """Third-party style synchronous schema that coerces to upper case."""

    version = 1
    vendor = "other-vendor"

    def validate(self, value):
        if not isinstance(value, str):
            return Result.fail("expected text")
        return Result.success(value.upper())


class DictResultSchema:
    """Third-party style schema returning plain ``{value}`` / ``{issues}`` dicts."""

    version = 1
    vendor = "dict-vendor"

    def validate(self, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return {"issues": [{"message": "expected int"}]}
        return {"value": value * 10}


class MalformedResultSchema:
    """Third-party style schema whose validate returns something else."""

    version = 1
    vendor = "broken-vendor"

    def validate(self, value):
        return None


@pytest.fixture
def async_schema():
    return AsyncSchema()


@pytest.fixture
def awaitable_schema():
    return AwaitableSchema()


@pytest.fixture
def upper_schema():
    return UpperCaseSchema()


@pytest.fixture
def dict_schema():
    return DictResultSchema()


@pytest.fixture
def malformed_schema():
    return MalformedResultSchema()
