"""Nudge Core package — public API"""

from src.core.nudge.models import NudgeError, NudgeKind, NudgeResult
from src.core.nudge.calculations import compute_initial_affinity, gossip_multiplier
from src.core.nudge.system import NudgeSystem

__all__ = [
    "NudgeError",
    "NudgeKind",
    "NudgeResult",
    "compute_initial_affinity",
    "gossip_multiplier",
    "NudgeSystem",
]
