"""Nudge domain models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from src.core.villager.models import Consequence


class NudgeKind(str, Enum):
    """Player interventions"""

    INTRODUCE = "introduce"
    GOSSIP = "gossip"
    ROMANCE = "romance"
    COMPETITION = "competition"
    GROUP_EVENT = "group_event"


class NudgeError(ValueError):
    """Nudge invoked with an unknown kind or the wrong number of villagers."""


@dataclass
class NudgeResult:
    """Consequences of one nudge, in the order they happened."""

    consequences: List[Consequence] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"consequences": [c.to_dict() for c in self.consequences]}
