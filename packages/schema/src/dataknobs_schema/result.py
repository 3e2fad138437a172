"""Result and issue types shared by every schema.

A ``Result`` holds either a success value or a non-empty tuple of issues,
never both and never neither. Consumers distinguish the two by checking
``result.issues``, or more conveniently with ``result.ok`` / ``bool(result)``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Dict, Generic, List, Tuple, TypeVar

T = TypeVar("T")

# Object keys and sequence indexes. Any other hashable key (an enum member,
# a sentinel object) is allowed as well.
PathSegment = Hashable


@dataclass(frozen=True)
class Issue:
    """A single validation failure.

    Attributes:
        message: Human-readable description of the failure
        path: Location of the failing value within the input. ``None`` when
            the issue concerns the value as a whole.
    """

    message: str
    path: Tuple[PathSegment, ...] | None = None

    def __post_init__(self) -> None:
        if self.path is not None and not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{message, path?}`` shape."""
        data: Dict[str, Any] = {"message": self.message}
        if self.path:
            data["path"] = list(self.path)
        return data

    @classmethod
    def from_dict(cls, data: Issue | Mapping[str, Any]) -> Issue:
        """Build an Issue from the ``{message, path?}`` shape.

        Raises:
            ValueError: If ``data`` has no string ``message``
        """
        if isinstance(data, Issue):
            return data
        if not isinstance(data, Mapping) or not isinstance(data.get("message"), str):
            raise ValueError(f"Issue must be a mapping with a string 'message': {data!r}")
        path = data.get("path")
        return cls(data["message"], path=tuple(path) if path else None)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{'.'.join(str(segment) for segment in self.path)}: {self.message}"


def prepend_path(segment: PathSegment, issue: Issue) -> Issue:
    """Return a copy of ``issue`` nested one level deeper under ``segment``.

    Args:
        segment: Key or index of the child value within its parent
        issue: Issue reported by the child's schema

    Returns:
        New Issue whose path is ``(segment, *issue.path)``
    """
    return replace(issue, path=(segment, *(issue.path or ())))


def prefix_issues(segment: PathSegment, issues: Iterable[Issue]) -> List[Issue]:
    """Apply ``prepend_path`` to every issue in ``issues``."""
    return [prepend_path(segment, issue) for issue in issues]


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a single validation call.

    Use ``Result.success`` and ``Result.failure`` rather than constructing
    directly. ``value`` is only meaningful when ``issues`` is ``None``; a
    successful result may legitimately carry ``None`` as its value.
    """

    value: Any = None
    issues: Tuple[Issue, ...] | None = None

    def __post_init__(self) -> None:
        if self.issues is None:
            return
        if not isinstance(self.issues, tuple):
            object.__setattr__(self, "issues", tuple(self.issues))
        if not self.issues:
            raise ValueError("A failed result must carry at least one issue")
        if self.value is not None:
            raise ValueError("A result cannot carry both a value and issues")

    @property
    def ok(self) -> bool:
        """True when validation succeeded."""
        return self.issues is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Create a successful result carrying ``value``."""
        return cls(value=value)

    @classmethod
    def failure(cls, issues: Iterable[Issue]) -> Result[Any]:
        """Create a failed result.

        Args:
            issues: One or more issues, in the order they were found

        Raises:
            ValueError: If ``issues`` is empty
        """
        return cls(issues=tuple(issues))

    @classmethod
    def fail(cls, message: str) -> Result[Any]:
        """Create a failed result with a single path-less issue."""
        return cls(issues=(Issue(message),))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{value}`` / ``{issues}`` shape."""
        if self.issues is None:
            return {"value": self.value}
        return {"issues": [issue.to_dict() for issue in self.issues]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Result[Any]:
        """Build a Result from the ``{value}`` / ``{issues}`` shape.

        A present, non-None ``issues`` entry makes the result a failure;
        otherwise ``value`` (default None) is the success value.

        Raises:
            ValueError: If ``issues`` is empty or an issue is malformed
        """
        issues = data.get("issues")
        if issues is None:
            return cls.success(data.get("value"))
        return cls.failure(Issue.from_dict(issue) for issue in issues)
