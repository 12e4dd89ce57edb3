"""Adventure metadata and generation provenance."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ..validation import NumericRange, StringLength, schema_field
from .premise import LevelRange


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GenerationInfo:
    """How an adventure was generated."""

    prompt_id: str | None = schema_field(
        StringLength(max=200, message="Prompt ID must not exceed 200 characters"),
        default=None,
    )
    generator_version: str | None = schema_field(
        StringLength(max=100, message="Generator version must not exceed 100 characters"),
        default=None,
    )
    generated_at: datetime = schema_field(default_factory=utcnow)
    seed: str | None = None
    parameters: dict[str, str] | None = schema_field(default_factory=dict)


@dataclass
class AdventureMetadata:
    """Themes, counts and other descriptive data about an adventure.

    Unknown fields in a decoded metadata object are kept in ``custom_fields``.
    """

    themes: list[str] | None = schema_field(default_factory=list)
    tone: str | None = schema_field(
        StringLength(max=100, message="Tone must not exceed 100 characters"),
        default=None,
    )
    tags: list[str] | None = schema_field(default_factory=list)
    level_range: LevelRange | None = None
    estimated_play_time: float | None = schema_field(
        NumericRange(min=0.5, max=100, message="Play time must be between 0.5 and 100 hours"),
        default=None,
    )
    difficulty: str | None = None
    adventure_type: str | None = None
    setting: str | None = None
    act_count: int = schema_field(
        NumericRange(min=1, max=20, message="Act count must be between 1 and 20"),
        default=0,
    )
    npc_count: int = schema_field(
        NumericRange(min=0, max=1000, message="NPC count must be between 0 and 1000"),
        default=0,
    )
    encounter_count: int = schema_field(
        NumericRange(min=0, max=1000, message="Encounter count must be between 0 and 1000"),
        default=0,
    )
    location_count: int = schema_field(
        NumericRange(min=0, max=1000, message="Location count must be between 0 and 1000"),
        default=0,
    )
    content_warnings: list[str] | None = schema_field(default_factory=list)
    prerequisites: list[str] | None = schema_field(default_factory=list)
    generation_info: GenerationInfo | None = None
    custom_fields: dict[str, str] | None = schema_field(default_factory=dict, extension=True)
