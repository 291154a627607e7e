"""GameSession — owner of score, lives and level around a WorldState.

The world only reports events; this class decides what they mean: a lost
life may end the game, a cleared level starts the next one, and a restart
throws the whole WorldState away and builds a fresh one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazechase.core.enums import GamePhase
from mazechase.core.layout import CLASSIC
from mazechase.core.world_state import WorldState

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.layout import Layout
    from mazechase.systems.rng import RandomSource

logger = logging.getLogger(__name__)


class GameSession:
    """Implements the GameListener callbacks and gates stepping."""

    def __init__(
        self,
        config: GameConfig,
        layout: Layout = CLASSIC,
        rng: RandomSource | None = None,
    ) -> None:
        self._config = config
        self._layout = layout
        self._rng = rng
        self.score: int = 0
        self.lives: int = config.initial_lives
        self.level: int = 1
        self.paused: bool = False
        self.world: WorldState = self._new_world()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def game_over(self) -> bool:
        return self.world.phase == GamePhase.GAME_OVER

    @property
    def can_step(self) -> bool:
        return not self.paused and self.world.phase == GamePhase.RUNNING

    # -- GameListener --

    def on_score(self, delta: int) -> None:
        self.score += delta

    def on_life_lost(self) -> None:
        self.lives = max(0, self.lives - 1)
        logger.info("Life lost, %d remaining", self.lives)
        if self.lives == 0:
            self.world.end_game()
            logger.info("Game over: score=%d level=%d", self.score, self.level)

    def on_level_clear(self) -> None:
        self.level += 1
        self.world.begin_next_level()
        logger.info("Advanced to level %d (score=%d)", self.level, self.score)

    # -- controls --

    def steer(self, direction: object) -> bool:
        return self.world.input(direction)

    def toggle_pause(self) -> bool:
        if not self.game_over:
            self.paused = not self.paused
        return self.paused

    def restart(self) -> None:
        """Discard the world and every counter; start again at level 1."""
        self.score = 0
        self.lives = self._config.initial_lives
        self.level = 1
        self.paused = False
        self.world = self._new_world()
        logger.info("Session restarted")

    def _new_world(self) -> WorldState:
        return WorldState.from_layout(self._config, self._layout, rng=self._rng, listener=self)
