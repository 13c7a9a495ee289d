"""Villager Core package — public API"""

from src.core.villager.enums import (
    ConsequenceType,
    Mood,
    RelationshipType,
    Trait,
)
from src.core.villager.calculations import (
    AFFINITY_MAX,
    AFFINITY_MIN,
    clamp_affinity,
    classify_relationship,
)
from src.core.villager.models import (
    Consequence,
    Position,
    Relationship,
    Villager,
)
from src.core.villager.registry import (
    VillagerNotFoundError,
    VillagerRegistry,
)

__all__ = [
    "ConsequenceType",
    "Mood",
    "RelationshipType",
    "Trait",
    "AFFINITY_MAX",
    "AFFINITY_MIN",
    "clamp_affinity",
    "classify_relationship",
    "Consequence",
    "Position",
    "Relationship",
    "Villager",
    "VillagerNotFoundError",
    "VillagerRegistry",
]
