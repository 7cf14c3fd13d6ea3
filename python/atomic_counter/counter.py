"""The process-wide counter."""

from __future__ import annotations

from threading import Lock


class AtomicCounter:
    """Signed integer with atomic increment and decrement.

    The lock covers only the read-modify-write, so every call returns the
    value its own update produced and concurrent updates are never lost.
    """

    def __init__(self, initial: int = 0):
        self._value = initial
        self._lock = Lock()

    @property
    def value(self) -> int:
        return self._value

    def _add(self, delta: int) -> int:
        with self._lock:
            self._value += delta
            return self._value

    def increment(self) -> int:
        return self._add(1)

    def decrement(self) -> int:
        return self._add(-1)

    def __repr__(self) -> str:
        return f"<AtomicCounter(value={self._value})>"
