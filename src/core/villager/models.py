"""Villager domain models

Pure data classes with the per-villager relationship store.
Relationships are directed: A's record about B and B's record about A are
independent objects and may diverge. Nothing here keeps them in sync.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from src.core.villager.calculations import clamp_affinity, classify_relationship
from src.core.villager.enums import ConsequenceType, Mood, RelationshipType, Trait

TraitLike = Union[Trait, str]
MoodLike = Union[Mood, str]


@dataclass
class Relationship:
    """One villager's view of a peer."""

    peer_id: str
    peer_name: str  # copied at creation, not re-synced on rename
    affinity: float = 0  # -100 ~ +100
    type: RelationshipType = RelationshipType.NEUTRAL


@dataclass
class Position:
    """2D position. Owned by the presentation layer."""

    x: float = 0
    y: float = 0


@dataclass
class Consequence:
    """Ephemeral outcome of a nudge, for display only."""

    type: ConsequenceType
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "description": self.description}


def _new_villager_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(eq=False)
class Villager:
    """A simulated character. Compared by identity."""

    name: str
    traits: List[TraitLike] = field(default_factory=list)
    mood: MoodLike = Mood.NEUTRAL
    villager_id: str = field(default_factory=_new_villager_id)
    relationships: Dict[str, Relationship] = field(default_factory=dict)
    position: Position = field(default_factory=Position)

    # ── traits / mood ────────────────────────────────────────

    def has_trait(self, trait: TraitLike) -> bool:
        return trait in self.traits

    @property
    def primary_trait(self) -> Optional[TraitLike]:
        return self.traits[0] if self.traits else None

    def set_mood(self, mood: MoodLike) -> None:
        self.mood = mood

    def set_position(self, x: float, y: float) -> None:
        self.position = Position(x=x, y=y)

    # ── relationship store ───────────────────────────────────

    def set_relationship(
        self,
        peer: "Villager",
        affinity: float,
        rel_type: RelationshipType = RelationshipType.NEUTRAL,
    ) -> Relationship:
        """Insert or overwrite this villager's record about `peer`.

        Only one direction is written; call again on `peer` for the mirror.
        """
        rel = Relationship(
            peer_id=peer.villager_id,
            peer_name=peer.name,
            affinity=affinity,
            type=rel_type,
        )
        self.relationships[peer.villager_id] = rel
        return rel

    def get_relationship(self, peer: "Villager") -> Optional[Relationship]:
        return self.relationships.get(peer.villager_id)

    def modify_affinity(self, peer: "Villager", delta: float) -> None:
        """Shift affinity toward `peer`, clamp and reclassify.

        No-op when no relationship exists.
        """
        rel = self.relationships.get(peer.villager_id)
        if rel is None:
            return
        rel.affinity = clamp_affinity(rel.affinity + delta)
        rel.type = classify_relationship(rel.affinity, rel.type)

    def relationship_summary(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": rel.peer_name,
                "affinity": rel.affinity,
                "type": _value(rel.type),
            }
            for rel in self.relationships.values()
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.villager_id,
            "name": self.name,
            "traits": [_value(t) for t in self.traits],
            "mood": _value(self.mood),
            "position": {"x": self.position.x, "y": self.position.y},
        }

    def __str__(self) -> str:
        traits = ", ".join(_value(t) for t in self.traits)
        return f"{self.name} ({_value(self.mood)}) - Traits: {traits}"


def _value(tag: Union[str, Any]) -> str:
    """Enum member or plain string → plain string."""
    return tag.value if isinstance(tag, (Trait, Mood, RelationshipType)) else str(tag)
