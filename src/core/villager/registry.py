"""Villager registry

Owns every villager of a session. Villagers are never removed.
"""

from typing import Dict, Iterator, List, Optional, Sequence

from src.core.logging import get_logger
from src.core.villager.enums import Mood
from src.core.villager.models import MoodLike, TraitLike, Villager

logger = get_logger(__name__)


class VillagerNotFoundError(KeyError):
    """Unknown villager id."""

    def __init__(self, villager_id: str) -> None:
        super().__init__(villager_id)
        self.villager_id = villager_id

    def __str__(self) -> str:
        return f"Villager not found: {self.villager_id}"


class VillagerRegistry:
    """Id → Villager store, insertion ordered."""

    def __init__(self) -> None:
        self._villagers: Dict[str, Villager] = {}

    def create_villager(
        self,
        name: str,
        traits: Optional[Sequence[TraitLike]] = None,
        initial_mood: MoodLike = Mood.NEUTRAL,
    ) -> Villager:
        """Create and store a villager. Names need not be unique."""
        villager = Villager(name=name, traits=list(traits or []), mood=initial_mood)
        self._villagers[villager.villager_id] = villager
        logger.debug(f"Villager created: {name} ({villager.villager_id})")
        return villager

    def get(self, villager_id: str) -> Villager:
        villager = self._villagers.get(villager_id)
        if villager is None:
            raise VillagerNotFoundError(villager_id)
        return villager

    def get_by_name(self, name: str) -> Optional[Villager]:
        """First villager with this name, or None."""
        for villager in self._villagers.values():
            if villager.name == name:
                return villager
        return None

    def all(self) -> List[Villager]:
        return list(self._villagers.values())

    def __len__(self) -> int:
        return len(self._villagers)

    def __contains__(self, villager_id: object) -> bool:
        return villager_id in self._villagers

    def __iter__(self) -> Iterator[Villager]:
        return iter(list(self._villagers.values()))
