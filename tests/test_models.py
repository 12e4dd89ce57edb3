"""Tests for the adventure record types."""

import pytest

from adventure_schema.models import (
    NPC,
    Act,
    Adventure,
    AdventureMetadata,
    CampaignContext,
    EncounterType,
    LevelRange,
    PartyData,
    PlayerCharacter,
    Premise,
    StoryProgress,
    SystemPrompt,
)
from adventure_schema.validation import FieldKind, SchemaRegistry

TOP_LEVEL = [Adventure, CampaignContext, PartyData, StoryProgress, SystemPrompt, Premise]


class TestModelSchemas:
    """Every record type compiles with its whole type graph."""

    @pytest.mark.parametrize("record_type", TOP_LEVEL)
    def test_type_graph_compiles(self, record_type):
        registry = SchemaRegistry("models")
        assert registry.ensure(record_type).record_type is record_type

    @pytest.mark.parametrize(
        "record_type,extension",
        [
            (AdventureMetadata, "custom_fields"),
            (CampaignContext, "metadata"),
            (PartyData, "metadata"),
            (StoryProgress, "metadata"),
            (SystemPrompt, "metadata"),
            (Adventure, None),
        ],
    )
    def test_extension_fields(self, record_type, extension):
        fd = SchemaRegistry("models").get(record_type).extension_field
        assert (fd.name if fd else None) == extension

    @pytest.mark.parametrize(
        "record_type,name,wire_name",
        [
            (NPC, "character_class", "class"),
            (PlayerCharacter, "character_class", "class"),
            (Act, "featured_npcs", "featuredNPCs"),
            (Premise, "key_npcs", "keyNPCs"),
            (StoryProgress, "known_npcs", "knownNPCs"),
        ],
    )
    def test_aliases(self, record_type, name, wire_name):
        assert SchemaRegistry("models").get(record_type).field(name).wire_name == wire_name

    def test_level_range_fields_are_scalars(self):
        schema = SchemaRegistry("models").get(LevelRange)
        assert [fd.kind for fd in schema] == [FieldKind.REQUIRED_SCALAR] * 2


class TestModelDefaults:
    """Default construction."""

    def test_adventure_defaults(self):
        adventure = Adventure()
        assert adventure.acts == []
        assert adventure.version == "1.0"
        assert adventure.created_date.tzinfo is not None

    def test_lists_are_not_shared(self):
        first, second = Adventure(), Adventure()
        first.rewards.append("gold")
        assert second.rewards == []

    def test_level_range_defaults(self):
        assert LevelRange() == LevelRange(min=1, max=5)

    def test_encounter_type_values(self):
        assert EncounterType("Investigation") is EncounterType.INVESTIGATION
        assert len(EncounterType) == 10
