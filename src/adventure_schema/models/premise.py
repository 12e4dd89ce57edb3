"""Adventure premise and level range records."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import NumericRange, Required, StringLength, schema_field


@dataclass
class LevelRange:
    """Recommended character level range."""

    min: int = schema_field(
        NumericRange(min=1, max=20, message="Minimum level must be between 1 and 20"),
        default=1,
    )
    max: int = schema_field(
        NumericRange(min=1, max=20, message="Maximum level must be between 1 and 20"),
        default=5,
    )


@dataclass
class Premise:
    """A short pitch an adventure is generated from."""

    title: str | None = schema_field(
        StringLength(max=200, message="Title must not exceed 200 characters"),
        default=None,
    )
    hook: str | None = schema_field(
        Required(message="Hook is required"),
        StringLength(min=10, max=1000, message="Hook must be between 10 and 1000 characters"),
        default=None,
    )
    conflict: str | None = schema_field(
        StringLength(max=1000, message="Conflict must not exceed 1000 characters"),
        default=None,
    )
    location: str | None = schema_field(
        StringLength(max=200, message="Location must not exceed 200 characters"),
        default=None,
    )
    suggested_level_range: LevelRange | None = None
    themes: list[str] | None = schema_field(default_factory=list)
    key_npcs: list[str] | None = schema_field(default_factory=list, alias="keyNPCs")
    expected_outcomes: list[str] | None = schema_field(default_factory=list)
    notes: str | None = schema_field(
        StringLength(max=2000, message="Notes must not exceed 2000 characters"),
        default=None,
    )
