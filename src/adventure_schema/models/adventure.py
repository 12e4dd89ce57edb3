"""The complete adventure document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..validation import MinCount, Required, StringLength, schema_field
from .act import Act
from .encounter import Encounter
from .location import Location
from .metadata import AdventureMetadata, utcnow
from .npc import NPC
from .premise import LevelRange


@dataclass
class Adventure:
    """A complete tabletop adventure: hook, acts, cast, places and fallout."""

    adventure_id: str = ""
    title: str | None = schema_field(
        Required(message="Title is required"),
        StringLength(min=1, max=200, message="Title must be between 1 and 200 characters"),
        default=None,
    )
    summary: str | None = schema_field(
        StringLength(max=500, message="Summary must not exceed 500 characters"),
        default=None,
    )
    level_range: LevelRange | None = None
    hook: str | None = schema_field(
        Required(message="Adventure hook is required"),
        StringLength(min=10, max=2000, message="Hook must be between 10 and 2000 characters"),
        default=None,
    )
    background: str | None = schema_field(
        StringLength(max=5000, message="Background must not exceed 5000 characters"),
        default=None,
    )
    acts: list[Act] | None = schema_field(
        Required(message="Adventure must have at least one act"),
        MinCount(1, message="Adventure must have at least one act"),
        default_factory=list,
    )
    npcs: list[NPC] | None = schema_field(default_factory=list)
    locations: list[Location] | None = schema_field(default_factory=list)
    encounters: list[Encounter] | None = schema_field(default_factory=list)
    resolution: str | None = schema_field(
        StringLength(max=3000, message="Resolution must not exceed 3000 characters"),
        default=None,
    )
    consequences: list[str] | None = schema_field(default_factory=list)
    rewards: list[str] | None = schema_field(default_factory=list)
    campaign_id: str | None = None
    metadata: AdventureMetadata | None = None
    created_date: datetime = schema_field(default_factory=utcnow)
    last_modified: datetime = schema_field(default_factory=utcnow)
    version: str = "1.0"
