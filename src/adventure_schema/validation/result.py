"""Validation result types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple, Union

PathSegment = Union[str, int]


def format_path(path: Iterable[PathSegment]) -> str:
    """Render a field path as ``acts[0].title``."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


@dataclass(frozen=True)
class Violation:
    """One failed constraint on one field value.

    Attributes:
        path: Field names and list indices from the root record to the field
        message: Human-readable message naming the violated bound
    """

    path: Tuple[PathSegment, ...]
    message: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Violation path cannot be empty")

    @property
    def location(self) -> str:
        return format_path(self.path)

    def prefixed(self, *prefix: PathSegment) -> Violation:
        """Return a copy with the path nested under ``prefix``."""
        return Violation(path=tuple(prefix) + self.path, message=self.message)

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass
class SchemaValidationResult:
    """Outcome of validating one record.

    ``entries`` holds violations and plain error messages in the order they
    were added, so ``errors`` preserves the depth-first, declaration order in
    which the violations were found, with any later messages after them.
    ``is_valid`` is true iff ``errors`` is empty.
    """

    entries: list[Union[Violation, str]] = field(default_factory=list)

    @property
    def violations(self) -> list[Violation]:
        """Entries that carry a field path."""
        return [e for e in self.entries if isinstance(e, Violation)]

    @property
    def messages(self) -> list[str]:
        """Entries that are not tied to a field path."""
        return [e for e in self.entries if isinstance(e, str)]

    @property
    def errors(self) -> list[str]:
        """All error strings, in the order they were added."""
        return [str(e) for e in self.entries]

    @property
    def is_valid(self) -> bool:
        return not self.entries

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def merge(self, other: SchemaValidationResult) -> SchemaValidationResult:
        """Combine two results, keeping this result's errors first.

        Args:
            other: Another SchemaValidationResult to merge with this one

        Returns:
            New SchemaValidationResult with combined errors
        """
        return SchemaValidationResult(entries=self.entries + other.entries)

    def add_violation(self, violation: Violation) -> SchemaValidationResult:
        """Append a violation (fluent API)."""
        self.entries.append(violation)
        return self

    def add_error(self, error: str) -> SchemaValidationResult:
        """Append an error that is not tied to a field path (fluent API)."""
        self.entries.append(error)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{"isValid": ..., "errors": [...]}`` form."""
        return {"isValid": self.is_valid, "errors": self.errors}

    @classmethod
    def success(cls) -> SchemaValidationResult:
        return cls()

    @classmethod
    def failure(cls, *errors: str) -> SchemaValidationResult:
        """Create a failed result from plain error messages.

        Args:
            *errors: Error messages (at least one)

        Returns:
            Failed SchemaValidationResult
        """
        if not errors:
            raise ValueError("A failed result needs at least one error")
        return cls(entries=list(errors))

    @classmethod
    def from_violations(cls, violations: Iterable[Violation]) -> SchemaValidationResult:
        return cls(entries=list(violations))
