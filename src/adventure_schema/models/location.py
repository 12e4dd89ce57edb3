"""Notable adventure locations."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import Required, StringLength, schema_field


@dataclass
class Location:
    location_id: str = ""
    name: str | None = schema_field(
        Required(message="Location name is required"),
        StringLength(min=1, max=200, message="Name must be between 1 and 200 characters"),
        default=None,
    )
    type: str | None = schema_field(
        StringLength(max=50, message="Type must not exceed 50 characters"),
        default=None,
    )
    description: str | None = schema_field(
        Required(message="Description is required"),
        StringLength(min=10, max=3000, message="Description must be between 10 and 3000 characters"),
        default=None,
    )
    atmosphere: str | None = schema_field(
        StringLength(max=1000, message="Atmosphere must not exceed 1000 characters"),
        default=None,
    )
    features: list[str] | None = schema_field(default_factory=list)
    inhabitants: list[str] | None = schema_field(default_factory=list)
    possible_encounters: list[str] | None = schema_field(default_factory=list)
    secrets: list[str] | None = schema_field(default_factory=list)
    treasures: list[str] | None = schema_field(default_factory=list)
    hazards: list[str] | None = schema_field(default_factory=list)
    connections: list[str] | None = schema_field(default_factory=list)
    map_reference: str | None = schema_field(
        StringLength(max=500, message="Map reference must not exceed 500 characters"),
        default=None,
    )
    notes: str | None = schema_field(
        StringLength(max=1000, message="Notes must not exceed 1000 characters"),
        default=None,
    )
