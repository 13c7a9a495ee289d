"""Event type constants for the city event log.

The log accepts any string; these are the types the simulation itself emits.
"""


class EventTypes:
    """Event type string constants"""

    # player intervention
    NUDGE = "nudge"

    # outcome of a nudge worth keeping in the story log
    CONSEQUENCE = "consequence"

    # city lifecycle (villager joins, etc.)
    GAME = "game"
