"""WorldState — the authoritative simulation state and its single fixed-step entry point.

Step cycle:
  1. Player motion (desired direction from ``input``).
  2. Pursuer motion, each steered by PursuerAI at decision points.
  3. Collision resolution (power decay, consumption, contact).
  4. Phase transition and listener dispatch, after all mutation is done.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from mazechase.ai.pursuer import PursuerAI
from mazechase.core.enums import Cell, Direction, EventKind, GamePhase
from mazechase.core.events import dispatch
from mazechase.core.grid import GridView
from mazechase.core.models import PLAYER_ID, Entity
from mazechase.core.snapshot import Snapshot
from mazechase.engine.collision import CollisionResolver
from mazechase.engine.motion import EntityMotion
from mazechase.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.events import GameEvent, GameListener
    from mazechase.core.grid import MazeGrid
    from mazechase.core.layout import Layout, PursuerSpawn
    from mazechase.core.models import SpawnPoint
    from mazechase.render.surface import RenderSurface
    from mazechase.systems.rng import RandomSource

logger = logging.getLogger(__name__)


class WorldState:
    """The single source of truth for one game, from construction until restart."""

    __slots__ = (
        "_config", "_grid", "_view", "_player", "_pursuers", "_pellet_remaining",
        "_power_timer", "_step", "_phase", "_motion", "_ai", "_resolver", "listener",
    )

    def __init__(
        self,
        config: GameConfig,
        grid: MazeGrid,
        player_spawn: SpawnPoint,
        pursuer_spawns: Sequence[PursuerSpawn],
        rng: RandomSource | None = None,
        listener: GameListener | None = None,
    ) -> None:
        self._config = config
        # Owned copy; callers never share the live cells
        self._grid: MazeGrid = grid.copy()
        self._view = GridView(self._grid)
        self._pellet_remaining: int = self._grid.count(Cell.PELLET)
        self._power_timer: float = 0.0
        self._step: int = 0
        self._phase: GamePhase = GamePhase.RUNNING

        self._player = Entity(
            id=PLAYER_ID, kind="player", x=player_spawn.x, y=player_spawn.y,
            direction=player_spawn.direction, desired=player_spawn.direction,
            speed=config.player_speed, spawn=player_spawn, name="player",
        )
        self._pursuers: tuple[Entity, ...] = tuple(
            Entity(
                id=i, kind="pursuer", x=ps.spawn.x, y=ps.spawn.y,
                direction=ps.spawn.direction, desired=ps.spawn.direction,
                speed=config.pursuer_speed * ps.speed_factor,
                spawn=ps.spawn, home=ps.home, name=ps.name, color=ps.color,
            )
            for i, ps in enumerate(pursuer_spawns, start=1)
        )

        self._motion = EntityMotion(config.decision_epsilon, config.velocity_scale)
        self._ai = PursuerAI(config, rng if rng is not None else DeterministicRNG(config.seed))
        self._resolver = CollisionResolver(config)
        self.listener = listener

    @classmethod
    def from_layout(
        cls,
        config: GameConfig,
        layout: Layout,
        rng: RandomSource | None = None,
        listener: GameListener | None = None,
    ) -> WorldState:
        return cls(config, layout.build_grid(), layout.player, layout.pursuers, rng=rng, listener=listener)

    # -- read access --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def grid(self) -> GridView:
        return self._view

    @property
    def player(self) -> Entity:
        return self._player

    @property
    def pursuers(self) -> tuple[Entity, ...]:
        return self._pursuers

    @property
    def pellet_remaining(self) -> int:
        return self._pellet_remaining

    @property
    def power_timer(self) -> float:
        return self._power_timer

    @property
    def frightened(self) -> bool:
        return self._power_timer > 0

    @property
    def step_count(self) -> int:
        return self._step

    @property
    def phase(self) -> GamePhase:
        return self._phase

    # -- exposed operations --

    def update(self, dt: float) -> list[GameEvent]:
        """Advance exactly one fixed step and return the events it produced."""
        if self._phase != GamePhase.RUNNING:
            return []

        self._step += 1
        frightened = self.frightened

        self._motion.step(self._player, self._grid, dt, self._player.speed)
        for pursuer in self._pursuers:
            self._move_pursuer(pursuer, dt, frightened)

        events = self._resolver.resolve(self, dt)

        if any(e.kind == EventKind.LEVEL_CLEAR for e in events):
            self._phase = GamePhase.LEVEL_COMPLETE

        if events:
            logger.debug("Step %d: %s", self._step, ", ".join(e.describe() for e in events))
        if self.listener is not None and events:
            dispatch(events, self.listener)
        return events

    def input(self, direction: object) -> bool:
        """Set the player's desired direction. Returns False (and changes nothing) for invalid values."""
        parsed = Direction.parse(direction)
        if parsed is None:
            logger.debug("Ignored input %r", direction)
            return False
        self._player.desired = parsed
        return True

    def render(self, surface: RenderSurface | None = None) -> Snapshot:
        """Pure read of the current state, optionally drawn onto *surface*."""
        snapshot = Snapshot.from_world(self)
        if surface is not None:
            surface.draw(snapshot)
        return snapshot

    def begin_next_level(self) -> int:
        """LevelComplete → Running: refill consumed cells. Returns the number of cells refilled."""
        if self._phase != GamePhase.LEVEL_COMPLETE:
            return 0
        refilled = self._grid.apply_level_reset()
        self._pellet_remaining = self._grid.count(Cell.PELLET)
        self._power_timer = 0.0
        self._phase = GamePhase.RUNNING
        logger.info("Level reset: %d cells refilled, %d pellets", refilled, self._pellet_remaining)
        return refilled

    def end_game(self) -> None:
        if self._phase != GamePhase.GAME_OVER:
            self._phase = GamePhase.GAME_OVER
            logger.info("Game over at step %d", self._step)

    # -- mutation used by CollisionResolver --

    def consume_cell(self, col: int, row: int) -> Cell:
        """Empty a pellet or power pellet cell, keeping the pellet counter in sync."""
        cell = self._grid.cell_at(col, row)
        if cell in (Cell.PELLET, Cell.POWER_PELLET):
            self._grid.set_cell(col, row, Cell.EMPTY)
            if cell == Cell.PELLET:
                self._pellet_remaining -= 1
        return cell

    def set_power(self, seconds: float) -> None:
        self._power_timer = max(0.0, seconds)

    def decay_power(self, dt: float) -> None:
        self._power_timer = max(0.0, self._power_timer - dt)

    def reset_positions(self) -> None:
        """Return the player and every pursuer to their spawn."""
        self._player.reset_to(self._player.spawn)
        for pursuer in self._pursuers:
            pursuer.reset_to(pursuer.spawn)

    # -- internals --

    def _move_pursuer(self, pursuer: Entity, dt: float, frightened: bool) -> None:
        speed = self._ai.speed_for(pursuer, frightened)
        if self._motion.at_decision_point(pursuer):
            choice = self._ai.choose(pursuer, self._player, self._grid, frightened, self._step)
            if choice is None:
                # Isolated tile: stall in place
                return
            pursuer.desired = choice
        else:
            pursuer.desired = pursuer.direction
        self._motion.step(pursuer, self._grid, dt, speed, pursuer.desired)
