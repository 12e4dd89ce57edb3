"""Campaign progress between sessions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..validation import NumericRange, Required, StringLength, schema_field


@dataclass
class SessionSummary:
    session_number: int = schema_field(
        NumericRange(min=1, message="Session number must be positive"),
        default=0,
    )
    title: str | None = schema_field(
        StringLength(max=200, message="Title must not exceed 200 characters"),
        default=None,
    )
    summary: str | None = schema_field(
        Required(message="Summary is required"),
        StringLength(min=10, max=2000, message="Summary must be between 10 and 2000 characters"),
        default=None,
    )
    date: datetime | None = None


@dataclass
class PlotThread:
    name: str | None = schema_field(
        Required(message="Plot thread name is required"),
        StringLength(min=1, max=200, message="Name must be between 1 and 200 characters"),
        default=None,
    )
    description: str | None = schema_field(
        Required(message="Description is required"),
        StringLength(min=10, max=1000, message="Description must be between 10 and 1000 characters"),
        default=None,
    )
    status: str = "Active"
    priority: int = schema_field(
        NumericRange(min=1, max=5, message="Priority must be between 1 and 5"),
        default=3,
    )


@dataclass
class StoryProgress:
    """What has happened in a campaign so far.

    Unknown fields in a decoded progress record are kept in ``metadata``.
    """

    campaign_id: str | None = schema_field(
        Required(message="Campaign ID is required"),
        default=None,
    )
    session_number: int = schema_field(
        NumericRange(min=1, message="Session number must be positive"),
        default=1,
    )
    summary: str | None = schema_field(
        Required(message="Summary is required"),
        StringLength(min=10, max=10000, message="Summary must be between 10 and 10000 characters"),
        default=None,
    )
    previous_sessions: list[SessionSummary] | None = schema_field(default_factory=list)
    active_plot_threads: list[PlotThread] | None = schema_field(default_factory=list)
    known_npcs: list[str] | None = schema_field(default_factory=list, alias="knownNPCs")
    visited_locations: list[str] | None = schema_field(default_factory=list)
    key_events: list[str] | None = schema_field(default_factory=list)
    party_status: str | None = None
    last_updated: datetime | None = None
    metadata: dict[str, str] | None = schema_field(default_factory=dict, extension=True)
