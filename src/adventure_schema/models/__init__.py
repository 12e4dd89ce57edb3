"""Record types of an adventure document and its inputs."""

from .act import Act, Scene
from .adventure import Adventure
from .campaign import CampaignContext, Faction
from .encounter import Encounter, EncounterType, Enemy
from .location import Location
from .metadata import AdventureMetadata, GenerationInfo
from .npc import NPC, CombatStats
from .party import CharacterPersonality, PartyData, PlayerCharacter, Relationship
from .premise import LevelRange, Premise
from .prompt import SystemPrompt
from .story import PlotThread, SessionSummary, StoryProgress

__all__ = [
    "Act",
    "Adventure",
    "AdventureMetadata",
    "CampaignContext",
    "CharacterPersonality",
    "CombatStats",
    "Encounter",
    "EncounterType",
    "Enemy",
    "Faction",
    "GenerationInfo",
    "LevelRange",
    "Location",
    "NPC",
    "PartyData",
    "PlayerCharacter",
    "PlotThread",
    "Premise",
    "Relationship",
    "Scene",
    "SessionSummary",
    "StoryProgress",
    "SystemPrompt",
]
