"""API request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field

from src.core.nudge.models import NudgeKind
from src.core.villager.enums import Mood


# === Request Schemas ===


class CreateVillagerRequest(BaseModel):
    """Villager creation request. Traits/mood are free strings."""

    name: str = Field(..., min_length=1, max_length=50, description="Display name")
    traits: list[str] = Field(default_factory=list, description="Trait tags")
    mood: str = Field(default=Mood.NEUTRAL.value, description="Initial mood")


class NudgeRequest(BaseModel):
    """Nudge request"""

    kind: NudgeKind = Field(
        ..., description="introduce, gossip, romance, competition, group_event"
    )
    villager_ids: list[str] = Field(..., min_length=1, description="Participants")
    event_kind: str = Field(default="party", description="group_event only")


# === Response Schemas ===


class PositionInfo(BaseModel):
    x: float
    y: float


class VillagerInfo(BaseModel):
    """Villager state"""

    id: str
    name: str
    traits: list[str] = []
    mood: str
    position: PositionInfo


class RelationshipInfo(BaseModel):
    """One entry of a villager's relationship summary"""

    name: str
    affinity: float
    type: str


class ConsequenceInfo(BaseModel):
    type: str
    description: str


class NudgeResponse(BaseModel):
    """Nudge outcome"""

    kind: str
    consequences: list[ConsequenceInfo] = []


class EventInfo(BaseModel):
    """Event log entry"""

    id: int
    timestamp: int
    type: str
    description: str
    metadata: dict[str, Any] = {}
