"""Affinity arithmetic and relationship classification

Pure functions, no model dependencies.
"""

from typing import Union

from src.core.villager.enums import RelationshipType

AFFINITY_MIN = -100
AFFINITY_MAX = 100

FRIEND_THRESHOLD = 60  # strictly above → friend
RIVAL_THRESHOLD = -40  # strictly below → rival


def clamp_affinity(value: float) -> float:
    """-100 ~ +100 clamp."""
    return max(AFFINITY_MIN, min(AFFINITY_MAX, value))


def classify_relationship(
    affinity: float, current: Union[RelationshipType, str]
) -> RelationshipType:
    """Relationship type implied by an affinity value.

    Romance is sticky against the friend branch only: a romance above the
    friend threshold stays romance, but dropping below the rival threshold
    still turns it into a rivalry.
    """
    if affinity > FRIEND_THRESHOLD:
        if current == RelationshipType.ROMANCE:
            return RelationshipType.ROMANCE
        return RelationshipType.FRIEND
    if affinity < RIVAL_THRESHOLD:
        return RelationshipType.RIVAL
    return RelationshipType.NEUTRAL
