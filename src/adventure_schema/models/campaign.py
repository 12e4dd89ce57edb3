"""Campaign setting, factions and arcs."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import Required, StringLength, schema_field


@dataclass
class Faction:
    name: str | None = schema_field(
        Required(message="Faction name is required"),
        StringLength(min=1, max=200, message="Faction name must be between 1 and 200 characters"),
        default=None,
    )
    description: str | None = schema_field(
        Required(message="Faction description is required"),
        StringLength(min=10, max=2000, message="Description must be between 10 and 2000 characters"),
        default=None,
    )
    relationship: str | None = None
    notable_members: list[str] | None = schema_field(default_factory=list)


@dataclass
class CampaignContext:
    """The campaign an adventure is written for.

    Unknown fields in a decoded campaign are kept in ``metadata``.
    """

    campaign_id: str = ""
    name: str | None = schema_field(
        Required(message="Campaign name is required"),
        StringLength(min=1, max=200, message="Campaign name must be between 1 and 200 characters"),
        default=None,
    )
    setting: str | None = schema_field(
        Required(message="Setting description is required"),
        StringLength(min=10, max=5000, message="Setting must be between 10 and 5000 characters"),
        default=None,
    )
    tone: str | None = schema_field(
        Required(message="Tone is required"),
        StringLength(max=500, message="Tone must not exceed 500 characters"),
        default=None,
    )
    factions: list[Faction] | None = schema_field(default_factory=list)
    major_arcs: list[str] | None = schema_field(default_factory=list)
    key_locations: list[str] | None = schema_field(default_factory=list)
    lore: str | None = None
    campaign_rules: list[str] | None = schema_field(default_factory=list)
    metadata: dict[str, str] | None = schema_field(default_factory=dict, extension=True)
