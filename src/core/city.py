"""ButterflyCity - simulation facade

Wires the villager registry, the event log and the nudge rules together and
is the single entry point for the presentation layer (HTTP routers, demos).

The rules assume one logical thread of control. The API serves requests from
a threadpool, so every call that reads or mutates villager state goes through
one re-entrant simulation lock.
"""

import random
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence

from src.core.event_log import DEFAULT_MAX_EVENTS, EventListener, EventLog, LoggedEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.nudge.models import NudgeKind, NudgeResult
from src.core.nudge.system import NudgeSystem
from src.core.villager.enums import Mood, Trait
from src.core.villager.models import MoodLike, TraitLike, Villager
from src.core.villager.registry import VillagerRegistry

logger = get_logger(__name__)

# presentation line-up
SPAWN_SPACING = 100
SPAWN_Y = 100


class ButterflyCity:
    """A town where tiny nudges ripple through relationships."""

    def __init__(
        self,
        event_log: Optional[EventLog] = None,
        rng: Optional[random.Random] = None,
        max_events: Optional[int] = None,
    ) -> None:
        if event_log is None:
            event_log = EventLog(max_events or DEFAULT_MAX_EVENTS)
        self._event_log = event_log
        self._registry = VillagerRegistry()
        self._nudges = NudgeSystem(event_log, rng)
        self._lock = threading.RLock()

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def nudge_system(self) -> NudgeSystem:
        return self._nudges

    @property
    def villagers(self) -> List[Villager]:
        with self._lock:
            return self._registry.all()

    # ── villagers ────────────────────────────────────────────

    def create_villager(
        self,
        name: str,
        traits: Optional[Sequence[TraitLike]] = None,
        mood: MoodLike = Mood.NEUTRAL,
    ) -> Villager:
        """Register a villager and line it up next to the others."""
        with self._lock:
            index = len(self._registry)
            villager = self._registry.create_villager(name, traits, mood)
            villager.set_position(index * SPAWN_SPACING, SPAWN_Y)
            self._event_log.log(
                EventTypes.GAME,
                f"{name} joins Butterfly City!",
                {"villager": name, "villager_id": villager.villager_id},
            )
            return villager

    def get_villager(self, villager_id: str) -> Villager:
        """Raises VillagerNotFoundError for unknown ids."""
        with self._lock:
            return self._registry.get(villager_id)

    def find_villager(self, name: str) -> Optional[Villager]:
        with self._lock:
            return self._registry.get_by_name(name)

    def relationship_summary(self, villager_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return self._registry.get(villager_id).relationship_summary()

    # ── nudges ───────────────────────────────────────────────

    def run_nudge(
        self,
        kind: NudgeKind,
        villager_ids: Sequence[str],
        event_kind: str = "party",
    ) -> NudgeResult:
        """Resolve a nudge for the given villager ids.

        All ids are resolved before any rule runs, so an unknown id leaves
        state untouched.
        """
        with self._lock:
            villagers = [self._registry.get(v_id) for v_id in villager_ids]
            result = self._nudges.run_nudge(kind, villagers, event_kind)
            logger.info(
                f"Nudge resolved: {NudgeKind(kind).value} "
                f"({', '.join(v.name for v in villagers)}) → "
                f"{len(result.consequences)} consequence(s)"
            )
            return result

    # ── event log ────────────────────────────────────────────

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        with self._lock:
            return self._event_log.subscribe(listener)

    def get_recent_events(self, count: int = 10) -> List[LoggedEvent]:
        with self._lock:
            return self._event_log.get_recent_events(count)

    def get_events_by_type(self, event_type: str) -> List[LoggedEvent]:
        with self._lock:
            return self._event_log.get_events_by_type(event_type)

    def get_all_events(self) -> List[LoggedEvent]:
        with self._lock:
            return self._event_log.get_all_events()


DEMO_CAST = [
    ("Alice", [Trait.FRIENDLY, Trait.ARTISTIC], Mood.HAPPY),
    ("Bob", [Trait.SHY, Trait.BOOKISH], Mood.NEUTRAL),
    ("Carol", [Trait.ROMANTIC, Trait.GOSSIP], Mood.EXCITED),
    ("Dave", [Trait.COMPETITIVE, Trait.ATHLETIC], Mood.NEUTRAL),
    ("Eve", [Trait.PEACEMAKER, Trait.FRIENDLY], Mood.HAPPY),
]


def seed_demo_villagers(city: ButterflyCity) -> List[Villager]:
    """Populate a city with the demo cast."""
    return [city.create_villager(name, traits, mood) for name, traits, mood in DEMO_CAST]
