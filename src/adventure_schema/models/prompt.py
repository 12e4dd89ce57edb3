"""Prompt templates used to generate adventure content."""

from __future__ import annotations

from dataclasses import dataclass

from ..validation import Required, StringLength, schema_field


@dataclass
class SystemPrompt:
    """A versioned prompt template with its writing guidelines.

    Unknown fields in a decoded prompt are kept in ``metadata``.
    """

    prompt_id: str = ""
    name: str | None = schema_field(
        Required(message="Prompt name is required"),
        StringLength(min=1, max=200, message="Prompt name must be between 1 and 200 characters"),
        default=None,
    )
    version: str = "1.0"
    template: str | None = schema_field(
        Required(message="Template is required"),
        StringLength(min=10, max=10000, message="Template must be between 10 and 10000 characters"),
        default=None,
    )
    description: str | None = schema_field(
        StringLength(max=1000, message="Description must not exceed 1000 characters"),
        default=None,
    )
    output_format: str = "Markdown"
    tone_guidelines: list[str] | None = schema_field(default_factory=list)
    structure_guidelines: list[str] | None = schema_field(default_factory=list)
    quality_constraints: list[str] | None = schema_field(default_factory=list)
    available_placeholders: list[str] | None = schema_field(default_factory=list)
    examples: list[str] | None = schema_field(default_factory=list)
    metadata: dict[str, str] | None = schema_field(default_factory=dict, extension=True)
