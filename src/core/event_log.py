"""EventLog - bounded story log with synchronous listener fan-out

Every nudge and notable consequence is recorded here so that the player can
follow the cascade. Rules:
- only the most recent `max_events` entries are kept (oldest dropped first)
- listeners are called synchronously before `log()` returns
- a failing listener is contained; the entry is still recorded and the
  remaining listeners still receive it
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from src.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_EVENTS = 100


@dataclass
class LoggedEvent:
    """A single story log entry.

    Args:
        event_id: sequence number assigned by the log
        timestamp: wall clock time in milliseconds
        event_type: e.g. "nudge", "consequence", "game"
        description: human-readable line
        metadata: free-form data (names, ids)
    """

    event_id: int
    timestamp: int
    event_type: str
    description: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.event_id,
            "timestamp": self.timestamp,
            "type": self.event_type,
            "description": self.description,
            "metadata": dict(self.metadata),
        }


EventListener = Callable[[LoggedEvent], None]


class EventLog:
    """Append-only, bounded event log

    Usage:
        events = EventLog()
        unsubscribe = events.subscribe(lambda e: print(e.description))
        events.log("nudge", "You introduce Alice to Bob")
        unsubscribe()
    """

    def __init__(self, max_events: int = DEFAULT_MAX_EVENTS) -> None:
        if max_events < 1:
            raise ValueError(f"max_events must be positive, got {max_events}")
        self._max_events = max_events
        self._events: List[LoggedEvent] = []
        self._listeners: List[EventListener] = []
        self._next_id: int = 0

    @property
    def max_events(self) -> int:
        return self._max_events

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __len__(self) -> int:
        return len(self._events)

    def log(
        self,
        event_type: str,
        description: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> LoggedEvent:
        """Record an event, evict past the cap, then notify listeners."""
        event = LoggedEvent(
            event_id=self._next_id,
            timestamp=int(time.time() * 1000),
            event_type=event_type,
            description=description,
            metadata=dict(metadata) if metadata else {},
        )
        self._next_id += 1

        self._events.append(event)
        if len(self._events) > self._max_events:
            self._events.pop(0)

        # iterate over a copy so a listener may unsubscribe itself
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    f"EventLog listener error: {_listener_name(listener)} "
                    f"(event={event.event_type})"
                )

        logger.info(f"[{event_type.upper()}] {description}")
        return event

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        if listener not in self._listeners:
            self._listeners.append(listener)
            logger.debug(f"EventLog subscribe: {_listener_name(listener)}")
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        """Remove a listener. Unknown listeners only produce a warning."""
        try:
            self._listeners.remove(listener)
            logger.debug(f"EventLog unsubscribe: {_listener_name(listener)}")
        except ValueError:
            logger.warning(f"Listener not registered: {_listener_name(listener)}")

    # ── reads ─────────────────────────────────────────────────

    def get_recent_events(self, count: int = 10) -> List[LoggedEvent]:
        if count <= 0:
            return []
        return self._events[-count:]

    def get_events_by_type(self, event_type: str) -> List[LoggedEvent]:
        return [e for e in self._events if e.event_type == event_type]

    def get_all_events(self) -> List[LoggedEvent]:
        return list(self._events)

    def clear(self) -> None:
        """Drop all entries. Listeners stay registered."""
        self._events.clear()
        self._next_id = 0

    def format_recent_events(self, count: int = 10) -> str:
        """Numbered text block of the most recent events."""
        lines = ["=== Recent Events ==="]
        for index, event in enumerate(self.get_recent_events(count), start=1):
            lines.append(f"{index}. [{event.event_type}] {event.description}")
        lines.append("=====================")
        return "\n".join(lines)


def _listener_name(listener: EventListener) -> str:
    return getattr(listener, "__qualname__", repr(listener))
