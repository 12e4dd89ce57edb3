"""Acts and the scenes within them."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import NumericRange, Required, StringLength, schema_field


@dataclass
class Scene:
    """A key moment within an act."""

    scene_number: int = schema_field(
        NumericRange(min=1, max=100, message="Scene number must be between 1 and 100"),
        default=1,
    )
    title: str | None = schema_field(
        StringLength(max=200, message="Title must not exceed 200 characters"),
        default=None,
    )
    description: str | None = schema_field(
        Required(message="Description is required"),
        StringLength(min=10, max=3000, message="Description must be between 10 and 3000 characters"),
        default=None,
    )
    location: str | None = schema_field(
        StringLength(max=200, message="Location must not exceed 200 characters"),
        default=None,
    )
    npcs: list[str] | None = schema_field(default_factory=list)
    choices: list[str] | None = schema_field(default_factory=list)


@dataclass
class Act:
    """A single act or chapter of an adventure."""

    act_number: int = schema_field(
        NumericRange(min=1, max=100, message="Act number must be between 1 and 100"),
        default=1,
    )
    title: str | None = schema_field(
        Required(message="Act title is required"),
        StringLength(min=1, max=200, message="Title must be between 1 and 200 characters"),
        default=None,
    )
    summary: str | None = schema_field(
        StringLength(max=1000, message="Summary must not exceed 1000 characters"),
        default=None,
    )
    description: str | None = schema_field(
        Required(message="Description is required"),
        StringLength(min=10, max=10000, message="Description must be between 10 and 10000 characters"),
        default=None,
    )
    objective: str | None = schema_field(
        StringLength(max=500, message="Objective must not exceed 500 characters"),
        default=None,
    )
    scenes: list[Scene] | None = schema_field(default_factory=list)
    challenges: list[str] | None = schema_field(default_factory=list)
    featured_npcs: list[str] | None = schema_field(default_factory=list, alias="featuredNPCs")
    locations: list[str] | None = schema_field(default_factory=list)
    encounters: list[str] | None = schema_field(default_factory=list)
    outcomes: list[str] | None = schema_field(default_factory=list)
    dm_notes: str | None = schema_field(
        StringLength(max=2000, message="DM notes must not exceed 2000 characters"),
        default=None,
    )
