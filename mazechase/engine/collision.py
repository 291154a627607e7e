"""CollisionResolver — consumption, power timer, and player/pursuer contact.

Runs once per step after all motion. Resolution order:
  1. Power decay (clamped at zero).
  2. Pellet or power pellet under the player.
  3. Player/pursuer proximity, in pursuer order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mazechase.core.enums import Cell, EventKind
from mazechase.core.events import GameEvent

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.world_state import WorldState

logger = logging.getLogger(__name__)


class CollisionResolver:
    """Detects consumption and contact events and applies their state effects."""

    __slots__ = ("_config",)

    def __init__(self, config: GameConfig) -> None:
        self._config = config

    def resolve(self, world: WorldState, dt: float) -> list[GameEvent]:
        events: list[GameEvent] = []
        world.decay_power(dt)
        self._consume(world, events)
        self._contacts(world, events)
        return events

    # -- internals --

    def _consume(self, world: WorldState, events: list[GameEvent]) -> None:
        player = world.player
        cell = world.grid.cell_at(player.x, player.y)
        col, row = player.tile
        step = world.step_count

        if cell == Cell.PELLET:
            world.consume_cell(col, row)
            events.append(GameEvent(EventKind.SCORE, step, delta=self._config.pellet_score))
            if world.pellet_remaining == 0:
                events.append(GameEvent(EventKind.LEVEL_CLEAR, step))
                logger.info("Step %d: level cleared", step)

        elif cell == Cell.POWER_PELLET:
            world.consume_cell(col, row)
            world.set_power(self._config.power_duration)
            events.append(GameEvent(EventKind.POWER_ON, step))
            events.append(GameEvent(EventKind.SCORE, step, delta=self._config.power_score))
            logger.debug("Step %d: power on for %.2fs", step, self._config.power_duration)

    def _contacts(self, world: WorldState, events: list[GameEvent]) -> None:
        player = world.player
        radius = self._config.capture_radius
        step = world.step_count

        for pursuer in world.pursuers:
            if player.distance_to(pursuer) >= radius:
                continue

            if world.frightened:
                events.append(GameEvent(EventKind.CAPTURE, step, entity_id=pursuer.id))
                events.append(GameEvent(EventKind.SCORE, step, delta=self._config.capture_score,
                                        entity_id=pursuer.id))
                pursuer.reset_to(pursuer.home or pursuer.spawn)
                logger.debug("Step %d: pursuer #%d (%s) captured", step, pursuer.id, pursuer.name)
            else:
                events.append(GameEvent(EventKind.LIFE_LOST, step, entity_id=pursuer.id))
                world.reset_positions()
                logger.info("Step %d: player caught by pursuer #%d (%s)", step, pursuer.id, pursuer.name)
                # Everyone is back at spawn; no further contact this step
                break
