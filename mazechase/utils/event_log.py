"""Thread-safe bounded feed of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from mazechase.core.events import GameEvent


@dataclass(frozen=True, slots=True)
class FeedEntry:
    """A single line of the API event feed."""

    step: int
    category: str
    message: str
    delta: int = 0


class EventLog:
    """Ring buffer of recent events. Writers append; readers copy a slice.

    Guarded by a simple lock: the engine thread writes once per step and
    API handlers read.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[FeedEntry] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append_events(self, events: Iterable[GameEvent]) -> None:
        entries = [
            FeedEntry(step=e.step, category=e.kind.name.lower(), message=e.describe(), delta=e.delta)
            for e in events
        ]
        if not entries:
            return
        with self._lock:
            self._buffer.extend(entries)

    def since_step(self, step: int) -> list[FeedEntry]:
        """Return all entries with step >= *step*."""
        with self._lock:
            return [e for e in self._buffer if e.step >= step]

    def latest(self, count: int = 50) -> list[FeedEntry]:
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
