"""The player party and its characters."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import MinCount, NumericRange, Required, StringLength, schema_field


@dataclass
class CharacterPersonality:
    traits: list[str] | None = schema_field(default_factory=list)
    ideals: list[str] | None = schema_field(default_factory=list)
    bonds: list[str] | None = schema_field(default_factory=list)
    flaws: list[str] | None = schema_field(default_factory=list)


@dataclass
class Relationship:
    target: str | None = schema_field(
        Required(message="Target name is required"),
        StringLength(min=1, max=100, message="Name must be between 1 and 100 characters"),
        default=None,
    )
    type: str | None = schema_field(
        Required(message="Relationship type is required"),
        StringLength(max=50, message="Type must not exceed 50 characters"),
        default=None,
    )
    description: str | None = schema_field(
        StringLength(max=500, message="Description must not exceed 500 characters"),
        default=None,
    )


@dataclass
class PlayerCharacter:
    name: str | None = schema_field(
        Required(message="Character name is required"),
        StringLength(min=1, max=100, message="Name must be between 1 and 100 characters"),
        default=None,
    )
    race: str | None = schema_field(
        Required(message="Race is required"),
        StringLength(max=50, message="Race must not exceed 50 characters"),
        default=None,
    )
    character_class: str | None = schema_field(
        Required(message="Class is required"),
        StringLength(max=50, message="Class must not exceed 50 characters"),
        default=None,
        alias="class",
    )
    level: int = schema_field(
        NumericRange(min=1, max=20, message="Level must be between 1 and 20"),
        default=1,
    )
    backstory: str | None = schema_field(
        StringLength(max=5000, message="Backstory must not exceed 5000 characters"),
        default=None,
    )
    motivations: list[str] | None = schema_field(default_factory=list)
    personality: CharacterPersonality | None = None
    relationships: list[Relationship] | None = schema_field(default_factory=list)
    notable_items: list[str] | None = schema_field(default_factory=list)
    player_name: str | None = schema_field(
        StringLength(max=100, message="Player name must not exceed 100 characters"),
        default=None,
    )


@dataclass
class PartyData:
    """The adventuring party.

    Unknown fields in a decoded party are kept in ``metadata``.
    """

    party_name: str | None = schema_field(
        StringLength(max=200, message="Party name must not exceed 200 characters"),
        default=None,
    )
    characters: list[PlayerCharacter] | None = schema_field(
        Required(message="Party must have at least one character"),
        MinCount(1, message="Party must have at least one character"),
        default_factory=list,
    )
    average_level: int = schema_field(
        NumericRange(min=1, max=20, message="Average level must be between 1 and 20"),
        default=1,
    )
    party_background: str | None = schema_field(
        StringLength(max=2000, message="Party background must not exceed 2000 characters"),
        default=None,
    )
    shared_goals: list[str] | None = schema_field(default_factory=list)
    achievements: list[str] | None = schema_field(default_factory=list)
    metadata: dict[str, str] | None = schema_field(default_factory=dict, extension=True)
