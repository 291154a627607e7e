"""Replay serialization — records step-by-step events and positions for a headless run."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mazechase.core.events import GameEvent
    from mazechase.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates steps and flushes them to a JSON replay file.

    Only steps that produced events, or every *every* steps, are kept so a
    long run does not write one record per frame.
    """

    __slots__ = ("_path", "_seed", "_steps", "_every")

    def __init__(self, path: str | Path, seed: int, every: int = 30) -> None:
        self._path = Path(path)
        self._seed = seed
        self._every = max(1, every)
        self._steps: list[dict[str, Any]] = []

    @property
    def records(self) -> list[dict[str, Any]]:
        return self._steps

    def record_step(self, world: WorldState, events: list[GameEvent]) -> None:
        step = world.step_count
        if not events and step % self._every != 0:
            return
        self._steps.append(
            {
                "step": step,
                "phase": world.phase.name,
                "power_timer": round(world.power_timer, 4),
                "pellets": world.pellet_remaining,
                "events": [
                    {"kind": e.kind.name, "delta": e.delta, "entity": e.entity_id}
                    for e in events
                ],
                "entities": [
                    {"id": e.id, "kind": e.kind, "pos": [round(e.x, 3), round(e.y, 3)], "dir": e.direction.name}
                    for e in (world.player, *world.pursuers)
                ],
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "seed": self._seed,
            "total_records": len(self._steps),
            "steps": self._steps,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d records)", self._path, len(self._steps))
