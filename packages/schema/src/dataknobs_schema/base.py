"""Base class and configuration bags for the built-in schemas.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .exceptions import SchemaConfigurationError
from .result import Result
from .standard import VENDOR, VERSION

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseSchema(ABC, Generic[InputT, OutputT]):
    """Common base for the built-in schemas.

    Subclasses hold only construction-time configuration. All per-call
    state lives in local variables of ``validate``, so one instance can be
    shared freely across calls and threads.

    Instances are read-only once ``BaseSchema.__init__`` has run; subclasses
    set their attributes first and call ``super().__init__()`` last.
    """

    version = VERSION
    vendor = VENDOR

    def __init__(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable, cannot set '{name}'")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable, cannot delete '{name}'")
        super().__delattr__(name)

    @abstractmethod
    def validate(self, value: Any) -> Result[OutputT]:
        """Validate a value against this schema.

        Args:
            value: Value to validate

        Returns:
            Result with the output value or the issues found
        """
        pass

    def _describe(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._describe()})"


@dataclass(frozen=True)
class Bounds:
    """Inclusive lower and upper bounds; ``None`` means unbounded."""

    min: float | None = None
    max: float | None = None

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            bound = getattr(self, name)
            if bound is None:
                continue
            if isinstance(bound, bool) or not isinstance(bound, (int, float)):
                raise SchemaConfigurationError(
                    f"{name} must be a number, got {type(bound).__name__}",
                    context={name: bound},
                )
            if isinstance(bound, float) and math.isnan(bound):
                raise SchemaConfigurationError(f"{name} cannot be NaN")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise SchemaConfigurationError(
                f"min ({self.min}) cannot be greater than max ({self.max})",
                context={"min": self.min, "max": self.max},
            )

    def check(self, value: float) -> str | None:
        """Return an issue message if ``value`` is out of bounds."""
        if self.min is not None and value < self.min:
            return f"must be greater than or equal to {self.min}"
        if self.max is not None and value > self.max:
            return f"must be less than or equal to {self.max}"
        return None

    def describe(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min}")
        if self.max is not None:
            parts.append(f"max={self.max}")
        return ", ".join(parts)
