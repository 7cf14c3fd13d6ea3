"""Bounded history of counter changes, newest first."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from threading import Lock

DEFAULT_CAPACITY = 5
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Action(str, Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"


def _now() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class Event:
    """One counter mutation: who did it, what they did and the resulting value."""

    name: str
    action: Action
    value: int
    # Stored for the JSON state endpoint; the HTML page does not show it.
    timestamp: str = field(default_factory=_now)


class EventLog:
    """Keeps the most recent events, newest first.

    ``record`` and ``snapshot`` share one lock, so readers never see a log
    longer than ``capacity`` or a half-applied insert.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"EventLog capacity must be positive, got {capacity}")
        self._capacity = capacity
        # appendleft on a full deque drops the rightmost (oldest) entry
        self._events: deque[Event] = deque(maxlen=capacity)
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, name: str, action: Action, value: int) -> Event:
        event = Event(name=name, action=Action(action), value=value)
        with self._lock:
            self._events.appendleft(event)
        return event

    def snapshot(self) -> list[Event]:
        """Return a copy of the log, most recent event first."""
        with self._lock:
            return list(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
