"""Shared fixtures: fully valid records of every top-level type."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from adventure_schema import SchemaValidator  # noqa: E402
from adventure_schema.models import (  # noqa: E402
    Act,
    Adventure,
    AdventureMetadata,
    CampaignContext,
    CharacterPersonality,
    CombatStats,
    Encounter,
    EncounterType,
    Enemy,
    Faction,
    GenerationInfo,
    LevelRange,
    Location,
    NPC,
    PartyData,
    PlayerCharacter,
    PlotThread,
    Premise,
    Relationship,
    Scene,
    SessionSummary,
    StoryProgress,
    SystemPrompt,
)

FIXED_TIME = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def validator():
    return SchemaValidator()


@pytest.fixture
def adventure():
    return Adventure(
        adventure_id="adv-001",
        title="The Sunken Crypt",
        summary="A drowned chapel hides a restless relic.",
        level_range=LevelRange(min=1, max=4),
        hook="A ferryman begs the party to silence the bells under the marsh.",
        background="Centuries ago the chapel of Saint Ives slid into the bog.",
        acts=[
            Act(
                act_number=1,
                title="Into the Marsh",
                description="The party wades through reed and fog toward the bells.",
                objective="Reach the chapel",
                scenes=[
                    Scene(
                        scene_number=1,
                        title="The Ferry",
                        description="Old Maren poles the raft across black water.",
                        npcs=["Old Maren"],
                        choices=["Pay the toll", "Swim"],
                    )
                ],
                featured_npcs=["Old Maren"],
                locations=["Drowned Chapel"],
                encounters=["Bog Ambush"],
            )
        ],
        npcs=[
            NPC(
                npc_id="npc-001",
                name="Old Maren",
                role="Ferryman",
                character_class="Commoner",
                motivations=["Peace for the drowned"],
                combat_stats=CombatStats(armor_class=10, hit_points=9, speed=30),
            )
        ],
        locations=[
            Location(
                location_id="loc-001",
                name="Drowned Chapel",
                type="Ruin",
                description="A half-submerged chapel whose bells still toll at dusk.",
                hazards=["Rotten floorboards"],
            )
        ],
        encounters=[
            Encounter(
                encounter_id="enc-001",
                name="Bog Ambush",
                type=EncounterType.COMBAT,
                description="Bog zombies rise from the silt around the raft.",
                enemies=[Enemy(name="Bog Zombie", count=3, challenge_rating="1/4")],
            )
        ],
        resolution="The bells fall silent and the marsh drains by spring.",
        consequences=["The ferryman's debt is paid"],
        rewards=["Silver bell", "50 gp"],
        campaign_id="camp-001",
        metadata=AdventureMetadata(
            themes=["Grief"],
            tone="Gothic",
            level_range=LevelRange(min=1, max=4),
            estimated_play_time=4.5,
            act_count=1,
            npc_count=1,
            encounter_count=1,
            location_count=1,
            generation_info=GenerationInfo(
                prompt_id="adventure-v1",
                generator_version="0.1.0",
                generated_at=FIXED_TIME,
                parameters={"temperature": "0.7"},
            ),
            custom_fields={"source": "fixture"},
        ),
        created_date=FIXED_TIME,
        last_modified=FIXED_TIME,
    )


@pytest.fixture
def campaign():
    return CampaignContext(
        campaign_id="camp-001",
        name="Bells of the Fen",
        setting="A drowned kingdom of marshes, ferries and half-sunk churches.",
        tone="Melancholy",
        factions=[
            Faction(
                name="The Ferrymen's Guild",
                description="Keepers of every crossing in the fen.",
                notable_members=["Old Maren"],
            )
        ],
        major_arcs=["The rising water"],
        metadata={"season": "autumn"},
    )


@pytest.fixture
def party():
    return PartyData(
        party_name="The Lantern Bearers",
        characters=[
            PlayerCharacter(
                name="Isolde",
                race="Human",
                character_class="Cleric",
                level=3,
                personality=CharacterPersonality(traits=["Stubborn"], flaws=["Proud"]),
                relationships=[Relationship(target="Old Maren", type="Debtor")],
            )
        ],
        average_level=3,
    )


@pytest.fixture
def story_progress():
    return StoryProgress(
        campaign_id="camp-001",
        session_number=2,
        summary="The party reached the chapel and rang the first bell.",
        previous_sessions=[
            SessionSummary(
                session_number=1,
                title="Arrival",
                summary="The party met Old Maren at the ferry.",
                date=FIXED_TIME,
            )
        ],
        active_plot_threads=[
            PlotThread(name="The bells", description="Who keeps ringing them at dusk?")
        ],
        known_npcs=["Old Maren"],
        last_updated=FIXED_TIME,
    )


@pytest.fixture
def system_prompt():
    return SystemPrompt(
        prompt_id="adventure-v1",
        name="Adventure generator",
        template="Write an adventure for {{party}} set in {{campaign}}.",
        available_placeholders=["party", "campaign"],
    )


@pytest.fixture
def premise():
    return Premise(
        title="Bells in the Fen",
        hook="Bells ring beneath the marsh every dusk.",
        suggested_level_range=LevelRange(min=1, max=3),
        key_npcs=["Old Maren"],
    )
