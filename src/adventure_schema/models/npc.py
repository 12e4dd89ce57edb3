"""Non-player characters."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import NumericRange, Required, StringLength, schema_field


@dataclass
class CombatStats:
    armor_class: int | None = schema_field(
        NumericRange(min=1, max=30, message="AC must be between 1 and 30"),
        default=None,
    )
    hit_points: int | None = schema_field(
        NumericRange(min=1, max=1000, message="HP must be between 1 and 1000"),
        default=None,
    )
    speed: int | None = schema_field(
        NumericRange(min=0, max=200, message="Speed must be between 0 and 200"),
        default=None,
    )
    challenge_rating: str | None = schema_field(
        StringLength(max=10, message="CR must not exceed 10 characters"),
        default=None,
    )
    abilities: list[str] | None = schema_field(default_factory=list)


@dataclass
class NPC:
    """A non-player character featured in an adventure."""

    npc_id: str = ""
    name: str | None = schema_field(
        Required(message="NPC name is required"),
        StringLength(min=1, max=100, message="Name must be between 1 and 100 characters"),
        default=None,
    )
    role: str | None = schema_field(
        StringLength(max=100, message="Role must not exceed 100 characters"),
        default=None,
    )
    race: str | None = schema_field(
        StringLength(max=50, message="Race must not exceed 50 characters"),
        default=None,
    )
    character_class: str | None = schema_field(
        StringLength(max=50, message="Class must not exceed 50 characters"),
        default=None,
        alias="class",
    )
    description: str | None = schema_field(
        StringLength(max=1000, message="Description must not exceed 1000 characters"),
        default=None,
    )
    personality: str | None = schema_field(
        StringLength(max=1000, message="Personality must not exceed 1000 characters"),
        default=None,
    )
    motivations: list[str] | None = schema_field(default_factory=list)
    backstory: str | None = schema_field(
        StringLength(max=2000, message="Backstory must not exceed 2000 characters"),
        default=None,
    )
    relationship: str | None = schema_field(
        StringLength(max=50, message="Relationship must not exceed 50 characters"),
        default=None,
    )
    faction: str | None = schema_field(
        StringLength(max=200, message="Faction must not exceed 200 characters"),
        default=None,
    )
    dialogue_hooks: list[str] | None = schema_field(default_factory=list)
    knowledge: list[str] | None = schema_field(default_factory=list)
    quests: list[str] | None = schema_field(default_factory=list)
    combat_stats: CombatStats | None = None
    location: str | None = schema_field(
        StringLength(max=200, message="Location must not exceed 200 characters"),
        default=None,
    )
    notes: str | None = schema_field(
        StringLength(max=1000, message="Notes must not exceed 1000 characters"),
        default=None,
    )
