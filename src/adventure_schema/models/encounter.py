"""Encounters and the enemies in them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..validation import NumericRange, Required, StringLength, schema_field


class EncounterType(Enum):
    COMBAT = "Combat"
    SOCIAL = "Social"
    EXPLORATION = "Exploration"
    PUZZLE = "Puzzle"
    TRAP = "Trap"
    CHASE = "Chase"
    NEGOTIATION = "Negotiation"
    INVESTIGATION = "Investigation"
    STEALTH = "Stealth"
    MIXED = "Mixed"


@dataclass
class Enemy:
    name: str | None = schema_field(
        Required(message="Enemy name is required"),
        StringLength(min=1, max=100, message="Name must be between 1 and 100 characters"),
        default=None,
    )
    count: int = schema_field(
        NumericRange(min=1, max=100, message="Count must be between 1 and 100"),
        default=1,
    )
    challenge_rating: str | None = schema_field(
        StringLength(max=10, message="CR must not exceed 10 characters"),
        default=None,
    )
    description: str | None = schema_field(
        StringLength(max=500, message="Description must not exceed 500 characters"),
        default=None,
    )
    stat_block_reference: str | None = schema_field(
        StringLength(max=200, message="Stat block reference must not exceed 200 characters"),
        default=None,
    )


@dataclass
class Encounter:
    """A combat, social, exploration or other encounter."""

    encounter_id: str = ""
    name: str | None = schema_field(
        Required(message="Encounter name is required"),
        StringLength(min=1, max=200, message="Name must be between 1 and 200 characters"),
        default=None,
    )
    type: EncounterType = schema_field(
        Required(message="Encounter type is required"),
        default=EncounterType.COMBAT,
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
    difficulty: str | None = None
    enemies: list[Enemy] | None = schema_field(default_factory=list)
    npcs: list[str] | None = schema_field(default_factory=list)
    environment: list[str] | None = schema_field(default_factory=list)
    objectives: list[str] | None = schema_field(default_factory=list)
    outcomes: list[str] | None = schema_field(default_factory=list)
    rewards: list[str] | None = schema_field(default_factory=list)
    consequences: list[str] | None = schema_field(default_factory=list)
    dm_tips: str | None = schema_field(
        StringLength(max=2000, message="DM tips must not exceed 2000 characters"),
        default=None,
    )
    trigger: str | None = schema_field(
        StringLength(max=500, message="Trigger must not exceed 500 characters"),
        default=None,
    )
