"""EntityMotion — continuous-position movement shared by the player and the pursuers.

Per step:
  1. Find the current tile center.
  2. At a decision point (within epsilon of the center on both axes),
     commit the desired direction if the tile that way is passable.
  3. Integrate velocity.
  4. If the destination tile is a wall, cancel the move and snap to the
     tile center.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazechase.core.grid import wrap

if TYPE_CHECKING:
    from mazechase.core.enums import Direction
    from mazechase.core.grid import MazeGrid
    from mazechase.core.models import Entity


@dataclass(frozen=True, slots=True)
class MotionResult:
    at_decision_point: bool
    turned: bool
    moved: bool


def tile_center(x: float, y: float) -> tuple[float, float]:
    return math.floor(x) + 0.5, math.floor(y) + 0.5


def at_decision_point(entity: Entity, epsilon: float) -> bool:
    cx, cy = tile_center(entity.x, entity.y)
    return abs(entity.x - cx) < epsilon and abs(entity.y - cy) < epsilon


class EntityMotion:
    """Applies the tile-center turning and wall snap-back rules."""

    __slots__ = ("_epsilon", "_velocity_scale")

    def __init__(self, epsilon: float = 0.12, velocity_scale: float = 6.0) -> None:
        self._epsilon = epsilon
        self._velocity_scale = velocity_scale

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def at_decision_point(self, entity: Entity) -> bool:
        return at_decision_point(entity, self._epsilon)

    def try_turn(self, entity: Entity, grid: MazeGrid, desired: Direction) -> bool:
        """Commit *desired* when the neighbouring tile that way is open. Caller checks the decision point."""
        col, row = entity.tile
        dx, dy = desired.vector
        if desired != entity.direction and grid.is_passable(col + dx, row + dy):
            entity.direction = desired
            return True
        return False

    def step(
        self,
        entity: Entity,
        grid: MazeGrid,
        dt: float,
        speed: float,
        desired: Direction | None = None,
    ) -> MotionResult:
        """Advance *entity* by one step. *desired* defaults to ``entity.desired``."""
        if desired is None:
            desired = entity.desired

        col, row = entity.tile
        decision = self.at_decision_point(entity)
        turned = self.try_turn(entity, grid, desired) if decision else False

        dx, dy = entity.direction.vector
        distance = speed * dt * self._velocity_scale
        nx = entity.x + dx * distance
        ny = entity.y + dy * distance

        if grid.is_passable(nx, ny):
            entity.x = wrap(nx, grid.cols)
            entity.y = wrap(ny, grid.rows)
            return MotionResult(decision, turned, True)

        entity.x = col + 0.5
        entity.y = row + 0.5
        return MotionResult(decision, turned, False)
