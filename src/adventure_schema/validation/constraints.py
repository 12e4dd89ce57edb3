"""Constraint primitives.

Each constraint looks at one field value and reports at most one violation.
Constraints are pure: they hold only their parameters and can be shared by
every field and every record that declares them.

Presence is passed explicitly so that an absent value and a present empty
string stay distinguishable:

    >>> Required().check(None, present=False, field="title")
    'title is required'
    >>> Required().check("", present=True, field="title") is None
    True
    >>> StringLength(min=10, max=2000).check("", present=True, field="hook")
    'hook must be between 10 and 2000 characters'
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sized
from enum import Enum
from numbers import Number
from typing import Any, Sequence

from .result import PathSegment, Violation


class ConstraintKind(Enum):
    """The closed set of constraint kinds a schema can declare."""

    REQUIRED = "required"
    STRING_LENGTH = "length"
    NUMERIC_RANGE = "range"
    MIN_COUNT = "min_count"


class Constraint(ABC):
    """Base class for all constraints.

    Args:
        message: Optional message template overriding the default text. It may
            reference ``{field}``, ``{min}`` and ``{max}``.
    """

    kind: ConstraintKind

    def __init__(self, message: str | None = None):
        self.message = message

    @abstractmethod
    def check(self, value: Any, present: bool | None = None, field: str = "Value") -> str | None:
        """Validate a value against this constraint.

        Args:
            value: Field value
            present: Whether the field is present; defaults to ``value is not None``
            field: Field label used in the default message

        Returns:
            The rendered violation message, or None when the value passes
        """
        pass

    def evaluate(
        self,
        path: Sequence[PathSegment],
        value: Any,
        present: bool | None = None,
    ) -> Violation | None:
        """Check a value and wrap any failure in a Violation at ``path``."""
        message = self.check(value, present, field=str(path[-1]))
        if message is None:
            return None
        return Violation(path=tuple(path), message=message)

    def params(self) -> dict[str, Any]:
        """Constraint parameters, as used by message templates and ``to_dict``."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.kind.value, **self.params()}
        if self.message is not None:
            data["message"] = self.message
        return data

    def _render(self, default: str, field: str) -> str:
        template = self.message if self.message is not None else default
        return template.format(field=field, **self.params())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(sorted(self.to_dict().items()))))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({args})"


def _is_present(value: Any, present: bool | None) -> bool:
    return value is not None if present is None else present


class Required(Constraint):
    """Field must be present.

    Absence is the only trigger: a present empty string or empty list passes
    here and is left to StringLength or MinCount.
    """

    kind = ConstraintKind.REQUIRED

    def check(self, value: Any, present: bool | None = None, field: str = "Value") -> str | None:
        if _is_present(value, present):
            return None
        return self._render("{field} is required", field)


class StringLength(Constraint):
    """String length must be within ``[min, max]``, inclusive on both bounds."""

    kind = ConstraintKind.STRING_LENGTH

    def __init__(self, min: int | None = None, max: int | None = None, message: str | None = None):
        """Initialize length constraint.

        Args:
            min: Minimum length (inclusive)
            max: Maximum length (inclusive)
            message: Optional message template
        """
        if min is None and max is None:
            raise ValueError("StringLength needs at least one of min or max")
        if min is not None and min < 0:
            raise ValueError(f"min length cannot be negative: {min}")
        if max is not None and max < 0:
            raise ValueError(f"max length cannot be negative: {max}")
        if min is not None and max is not None and min > max:
            raise ValueError(f"min length ({min}) cannot be greater than max ({max})")
        super().__init__(message)
        self.min = min
        self.max = max

    def params(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    def check(self, value: Any, present: bool | None = None, field: str = "Value") -> str | None:
        if not _is_present(value, present) or value is None:
            return None

        if not isinstance(value, str):
            return f"{field} must be a string, got {type(value).__name__}"

        length = len(value)
        too_short = self.min is not None and length < self.min
        too_long = self.max is not None and length > self.max
        if not (too_short or too_long):
            return None

        if self.max is None:
            return self._render("{field} must be at least {min} characters", field)
        if not self.min:
            return self._render("{field} must not exceed {max} characters", field)
        return self._render("{field} must be between {min} and {max} characters", field)


class NumericRange(Constraint):
    """Numeric value must be within ``[min, max]``, inclusive on both bounds."""

    kind = ConstraintKind.NUMERIC_RANGE

    def __init__(
        self,
        min: int | float | None = None,
        max: int | float | None = None,
        message: str | None = None,
    ):
        """Initialize range constraint.

        Args:
            min: Minimum value (inclusive)
            max: Maximum value (inclusive)
            message: Optional message template
        """
        if min is None and max is None:
            raise ValueError("NumericRange needs at least one of min or max")
        if min is not None and max is not None and float(min) > float(max):
            raise ValueError(f"min ({min}) cannot be greater than max ({max})")
        super().__init__(message)
        self.min = min
        self.max = max

    def params(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    def check(self, value: Any, present: bool | None = None, field: str = "Value") -> str | None:
        if not _is_present(value, present) or value is None:
            return None

        if isinstance(value, bool) or not isinstance(value, Number):
            return f"{field} must be a number, got {type(value).__name__}"

        # NaN fails every comparison, so it can never be within range
        in_range = not (isinstance(value, float) and math.isnan(value))
        if in_range and self.min is not None and float(value) < float(self.min):  # type: ignore[arg-type]
            in_range = False
        if in_range and self.max is not None and float(value) > float(self.max):  # type: ignore[arg-type]
            in_range = False
        if in_range:
            return None

        if self.max is None:
            return self._render("{field} must be at least {min}", field)
        if self.min is None:
            return self._render("{field} must not exceed {max}", field)
        return self._render("{field} must be between {min} and {max}", field)


class MinCount(Constraint):
    """Collection must contain at least ``min`` elements.

    An absent collection passes; declare Required alongside to reject it.
    """

    kind = ConstraintKind.MIN_COUNT

    def __init__(self, min: int, message: str | None = None):
        if min < 0:
            raise ValueError(f"min count cannot be negative: {min}")
        super().__init__(message)
        self.min = min

    def params(self) -> dict[str, Any]:
        return {"min": self.min}

    def check(self, value: Any, present: bool | None = None, field: str = "Value") -> str | None:
        if not _is_present(value, present) or value is None:
            return None

        if isinstance(value, str) or not isinstance(value, Sized):
            return f"{field} must be a collection, got {type(value).__name__}"

        if len(value) < self.min:
            return self._render("{field} must have at least {min} item(s)", field)
        return None


__all__ = [
    "ConstraintKind",
    "Constraint",
    "Required",
    "StringLength",
    "NumericRange",
    "MinCount",
]
