"""Small helpers for naming conventions and dictionaries.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, TypeVar

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")

_SNAKE_SEGMENT = re.compile(r"_([a-z])")
_UPPER = re.compile(r"[A-Z]")


def camel_case(text: str) -> str:
    """Convert a snake_case string to camelCase.

    Example:
        ```python
        camel_case("strict_object")
        # 'strictObject'
        ```
    """
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), text)


def snake_case(text: str) -> str:
    """Convert a camelCase string to snake_case.

    Example:
        ```python
        snake_case("instanceOf")
        # 'instance_of'
        ```
    """
    return _UPPER.sub(lambda match: f"_{match.group(0).lower()}", text)


def map_keys(obj: Dict[K, V], fn: Callable[[K], U]) -> Dict[U, V]:
    """Return a new dict with ``fn`` applied to every key."""
    return {fn(key): value for key, value in obj.items()}


def map_values(obj: Dict[K, V], fn: Callable[[V, K], U]) -> Dict[K, U]:
    """Return a new dict with ``fn(value, key)`` applied to every value."""
    return {key: fn(value, key) for key, value in obj.items()}


def is_plain_object(value: Any) -> bool:
    """Check whether ``value`` is a plain ``dict`` (not a subclass)."""
    return type(value) is dict


def wrap(value: V | List[V]) -> List[V]:
    """Wrap ``value`` in a list unless it already is one."""
    return value if isinstance(value, list) else [value]


def resolve(value: V | Callable[[], V]) -> V:
    """Call ``value`` if it is callable, otherwise return it unchanged."""
    return value() if callable(value) else value


def lte(n: float, max: float) -> float:
    """Return ``n``, raising if it is greater than ``max``.

    Raises:
        ValueError: If ``n > max``
    """
    if n > max:
        raise ValueError(f"Must be at most {max}, got {n}")
    return n
