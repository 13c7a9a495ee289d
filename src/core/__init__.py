"""Butterfly City Core"""
__version__ = "0.1.0"

from src.core.event_log import EventLog, LoggedEvent
from src.core.event_types import EventTypes
from src.core.villager import (
    Consequence,
    ConsequenceType,
    Mood,
    Relationship,
    RelationshipType,
    Trait,
    Villager,
    VillagerNotFoundError,
    VillagerRegistry,
)
from src.core.nudge import NudgeError, NudgeKind, NudgeResult, NudgeSystem
from src.core.city import ButterflyCity, seed_demo_villagers

__all__ = [
    "EventLog",
    "LoggedEvent",
    "EventTypes",
    "Consequence",
    "ConsequenceType",
    "Mood",
    "Relationship",
    "RelationshipType",
    "Trait",
    "Villager",
    "VillagerNotFoundError",
    "VillagerRegistry",
    "NudgeError",
    "NudgeKind",
    "NudgeResult",
    "NudgeSystem",
    "ButterflyCity",
    "seed_demo_villagers",
]
