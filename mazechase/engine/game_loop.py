"""GameLoop — fixed-timestep driver between wall-clock frames and ``WorldState.update``.

Variable frame deltas accumulate and are spent in whole steps of
``1 / fps`` seconds. The number of steps per frame is capped and the excess
is dropped, so a slow frame cannot snowball into ever longer catch-up.
Steps are skipped entirely while the session is paused or over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazechase.core.enums import GamePhase

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.events import GameEvent
    from mazechase.session import GameSession

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives a GameSession's world at a fixed step."""

    __slots__ = ("_session", "_step", "_max_steps", "_accumulator", "_last_events", "_steps_run")

    def __init__(self, config: GameConfig, session: GameSession) -> None:
        self._session = session
        self._step = config.step_seconds
        self._max_steps = max(1, config.max_steps_per_frame)
        self._accumulator = 0.0
        self._last_events: list[GameEvent] = []
        self._steps_run = 0

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def step_seconds(self) -> float:
        return self._step

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def steps_run(self) -> int:
        return self._steps_run

    @property
    def last_events(self) -> list[GameEvent]:
        """Events emitted by the most recent call to ``advance`` or ``tick_once``."""
        return self._last_events

    def tick_once(self, force: bool = False) -> list[GameEvent]:
        """Run one fixed step unless gated. *force* ignores the pause flag only."""
        self._last_events = []
        if not self._session.can_step and not (force and self._session.world.phase == GamePhase.RUNNING):
            return self._last_events
        self._last_events = self._session.world.update(self._step)
        self._steps_run += 1
        return self._last_events

    def advance(self, elapsed: float) -> int:
        """Feed *elapsed* wall-clock seconds; returns the number of steps actually run."""
        self._accumulator += max(0.0, elapsed)
        events: list[GameEvent] = []
        steps = 0
        while self._accumulator >= self._step and steps < self._max_steps:
            self._accumulator -= self._step
            if self._session.can_step:
                events.extend(self._session.world.update(self._step))
                self._steps_run += 1
                steps += 1
            else:
                # Gated time is not banked for later
                self._accumulator = 0.0
                break
        if self._accumulator >= self._step:
            logger.debug("Dropping %.3fs of backlog", self._accumulator)
            self._accumulator = 0.0
        self._last_events = events
        return steps

    def run(self, max_steps: int) -> int:
        """Run up to *max_steps* steps back to back (headless). Returns the count run."""
        ran = 0
        while ran < max_steps and self._session.can_step:
            self.tick_once()
            ran += 1
        return ran
