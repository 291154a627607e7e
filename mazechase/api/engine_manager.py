"""EngineManager — runs a GameSession's fixed-step loop on a background thread.

The API reads from an atomically swapped immutable Frame; the engine thread
is the only writer of the WorldState, and control commands from request
handlers take the same lock before touching the session.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazechase.core.layout import CLASSIC
from mazechase.engine.game_loop import GameLoop
from mazechase.session import GameSession
from mazechase.systems.rng import DeterministicRNG
from mazechase.utils.event_log import EventLog

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.layout import Layout
    from mazechase.core.snapshot import Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Frame:
    """A world snapshot plus the session counters shown next to it."""

    snapshot: Snapshot
    score: int
    lives: int
    level: int
    paused: bool
    game_over: bool


class EngineManager:
    """Manages the game lifecycle on a background thread.

    Provides thread-safe access to:
      - latest frame (atomic reference swap)
      - event log (lock-guarded ring buffer)
      - control commands (start / pause / resume / step / restart) and input
    """

    def __init__(self, config: GameConfig, layout: Layout = CLASSIC) -> None:
        self._config = config
        self.config = config
        self._layout = layout
        self._tick_rate: float = config.tick_rate

        self._session_lock = threading.Lock()
        self._session = GameSession(config, layout, rng=DeterministicRNG(config.seed))
        self._loop = GameLoop(config, self._session)

        self._frame_lock = threading.Lock()
        self._latest_frame: Frame | None = None
        self._event_log = EventLog()

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._stop_requested = threading.Event()

        self._publish()

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def paused(self) -> bool:
        return self._session.paused

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @tick_rate.setter
    def tick_rate(self, value: float) -> None:
        self._tick_rate = max(0.001, min(value, 1.0))

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def steps_run(self) -> int:
        return self._loop.steps_run

    # -- frame access --

    def get_frame(self) -> Frame | None:
        with self._frame_lock:
            return self._latest_frame

    def get_snapshot(self) -> Snapshot | None:
        frame = self.get_frame()
        return frame.snapshot if frame else None

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set():
            return
        self._stop_requested.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="engine-loop", daemon=True)
        self._thread.start()
        logger.info("EngineManager started (tick_rate=%.3fs)", self._tick_rate)

    def pause(self) -> None:
        with self._session_lock:
            self._session.paused = True
        self._publish()
        logger.info("EngineManager paused at step %d", self._current_step())

    def resume(self) -> None:
        with self._session_lock:
            if not self._session.game_over:
                self._session.paused = False
        self._publish()
        logger.info("EngineManager resumed at step %d", self._current_step())

    def step(self) -> int:
        """Execute exactly one step, even while paused. Returns the new step count."""
        with self._session_lock:
            events = self._loop.tick_once(force=True)
        self._event_log.append_events(events)
        self._publish()
        return self._current_step()

    def steer(self, direction: object) -> bool:
        with self._session_lock:
            return self._session.steer(direction)

    def restart(self) -> None:
        """Throw the current world away and start a new game."""
        with self._session_lock:
            self._session.restart()
        self._event_log.clear()
        self._publish()
        logger.info("EngineManager restarted.")

    def stop(self) -> None:
        self._stop_requested.set()
        self._running.clear()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        logger.info("EngineManager stopped.")

    # -- internals --

    def _run_loop(self) -> None:
        """Background thread main loop."""
        logger.info("Engine thread started.")
        last = time.perf_counter()

        while not self._stop_requested.is_set():
            now = time.perf_counter()
            elapsed = now - last
            last = now

            with self._session_lock:
                self._loop.advance(elapsed)
                events = list(self._loop.last_events)
            self._event_log.append_events(events)
            self._publish()

            time.sleep(self._tick_rate)

        self._running.clear()
        logger.info("Engine thread exited.")

    def _publish(self) -> None:
        """Swap in a new frame built from the current session."""
        with self._session_lock:
            s = self._session
            frame = Frame(
                snapshot=s.world.render(),
                score=s.score, lives=s.lives, level=s.level,
                paused=s.paused, game_over=s.game_over,
            )
        with self._frame_lock:
            self._latest_frame = frame

    def _current_step(self) -> int:
        return self._session.world.step_count
