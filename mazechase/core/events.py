"""Typed events emitted by a simulation step, and the listener interface that consumes them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from mazechase.core.enums import EventKind


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single event produced during one ``update`` call."""

    kind: EventKind
    step: int
    delta: int = 0                # score delta for SCORE events
    entity_id: int | None = None  # pursuer involved, if any

    def describe(self) -> str:
        match self.kind:
            case EventKind.SCORE:
                return f"+{self.delta} points"
            case EventKind.LIFE_LOST:
                return f"player caught by pursuer #{self.entity_id}"
            case EventKind.LEVEL_CLEAR:
                return "level cleared"
            case EventKind.POWER_ON:
                return "power pellet eaten"
            case EventKind.CAPTURE:
                return f"pursuer #{self.entity_id} captured"
        return self.kind.name.lower()


class GameListener(Protocol):
    """Receives score, life and level events from a WorldState."""

    def on_score(self, delta: int) -> None: ...

    def on_life_lost(self) -> None: ...

    def on_level_clear(self) -> None: ...


def dispatch(events: Iterable[GameEvent], listener: GameListener) -> None:
    """Forward events to *listener* in emission order."""
    for event in events:
        match event.kind:
            case EventKind.SCORE:
                listener.on_score(event.delta)
            case EventKind.LIFE_LOST:
                listener.on_life_lost()
            case EventKind.LEVEL_CLEAR:
                listener.on_level_clear()
