"""Villager trait / mood / relationship enums

All are str enums: plain strings with the same value compare equal,
so callers may pass either form.
"""

from enum import Enum


class Trait(str, Enum):
    """Personality traits. The first trait of a villager is its "primary" one
    for presentation only; the rules never look at order."""

    FRIENDLY = "friendly"
    SHY = "shy"
    ARTISTIC = "artistic"
    ATHLETIC = "athletic"
    BOOKISH = "bookish"
    REBELLIOUS = "rebellious"
    ROMANTIC = "romantic"
    COMPETITIVE = "competitive"
    GOSSIP = "gossip"
    PEACEMAKER = "peacemaker"


class Mood(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    EXCITED = "excited"
    ANXIOUS = "anxious"
    NEUTRAL = "neutral"
    LOVE_STRUCK = "love-struck"
    JEALOUS = "jealous"


class RelationshipType(str, Enum):
    NEUTRAL = "neutral"
    FRIEND = "friend"
    ROMANCE = "romance"
    RIVAL = "rival"


class ConsequenceType(str, Enum):
    """Display category of a nudge outcome"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    ROMANCE = "romance"
    RIVALRY = "rivalry"
    CHAOS = "chaos"
