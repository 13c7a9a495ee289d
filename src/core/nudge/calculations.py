"""Nudge numeric rules

All values are part of the observable behaviour and must stay exact.
"""

from src.core.villager.enums import Trait
from src.core.villager.models import Villager

# introduce
FRIENDLY_BONUS = 15
SHY_PENALTY = -10
SHARED_TRAIT_BONUS = 10
HIT_IT_OFF_THRESHOLD = 20  # strictly above → positive
AWKWARD_THRESHOLD = -10  # strictly below → negative
ROMANTIC_SPARK_THRESHOLD = 30
ROMANTIC_SPARK_BOOST = 20

# gossip
GOSSIPER_MULTIPLIER = 1.5
GOSSIP_BOND = 10
GOSSIP_DAMAGE = -15
GOSSIP_RIVALRY_THRESHOLD = -40
PEACEMAKER_DISAPPROVAL = -20

# romance
ROMANCE_SUCCESS_THRESHOLD = 40
ROMANCE_SUCCESS_ADMIRER = 30
ROMANCE_SUCCESS_TARGET = 25
ROMANCE_DECLINED_ADMIRER = 10
ROMANCE_DECLINED_TARGET = -5
ROMANCE_BACKFIRE_ADMIRER = -10
ROMANCE_BACKFIRE_TARGET = -20

# competition
SORE_LOSER_PENALTY = -25
COMPETITION_RIVALRY_THRESHOLD = -40
GOOD_SPORT_BONUS = 10
PLAIN_LOSS_PENALTY = -5

# group event
GROUP_MEET_AFFINITY = 10
GROUP_REUNION_BONUS = 5
CROWD_SIZE_LIMIT = 3  # shy attendees are overwhelmed above this


def compute_initial_affinity(first: Villager, second: Villager) -> int:
    """Starting affinity when two villagers meet.

    +15 per friendly side, -10 per shy side, +10 per trait of `first` that
    `second` also has. Duplicates in `first.traits` count every time.
    """
    affinity = 0
    if first.has_trait(Trait.FRIENDLY):
        affinity += FRIENDLY_BONUS
    if second.has_trait(Trait.FRIENDLY):
        affinity += FRIENDLY_BONUS
    if first.has_trait(Trait.SHY):
        affinity += SHY_PENALTY
    if second.has_trait(Trait.SHY):
        affinity += SHY_PENALTY

    shared = [t for t in first.traits if second.has_trait(t)]
    affinity += len(shared) * SHARED_TRAIT_BONUS
    return affinity


def gossip_multiplier(gossiper: Villager) -> float:
    return GOSSIPER_MULTIPLIER if gossiper.has_trait(Trait.GOSSIP) else 1.0
