"""PursuerAI — direction choice for pursuers at decision points.

Two modes, switched by the shared power timer:
  - Normal: greedy chase, picking the open neighbour whose tile center is
    closest to the player.
  - Frightened: uniform random walk.

Reversing is excluded unless the pursuer is in a dead end. Stateless apart
from its configuration and the injected random source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazechase.core.enums import Direction, Domain

if TYPE_CHECKING:
    from mazechase.config import GameConfig
    from mazechase.core.grid import MazeGrid
    from mazechase.core.models import Entity
    from mazechase.systems.rng import RandomSource

_ENUMERATION = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


class PursuerAI:
    """Chooses the next direction for a pursuer."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self._config = config
        self._rng = rng

    def speed_for(self, pursuer: Entity, frightened: bool) -> float:
        if frightened:
            return pursuer.speed * self._config.frightened_speed_multiplier
        return pursuer.speed

    @staticmethod
    def open_directions(pursuer: Entity, grid: MazeGrid) -> list[Direction]:
        col, row = pursuer.tile
        result: list[Direction] = []
        for d in _ENUMERATION:
            dx, dy = d.vector
            if grid.is_passable(col + dx, row + dy):
                result.append(d)
        return result

    def choose(
        self,
        pursuer: Entity,
        player: Entity,
        grid: MazeGrid,
        frightened: bool,
        tick: int,
    ) -> Direction | None:
        """Return the direction to take, or None when no neighbour is open."""
        open_dirs = self.open_directions(pursuer, grid)
        if not open_dirs:
            return None

        reverse = pursuer.direction.opposite
        candidates = [d for d in open_dirs if d != reverse]

        if not candidates:
            # Dead end: turning back is the only way out
            idx = self._rng.next_int(Domain.AI_DEAD_END, pursuer.id, tick, 0, len(open_dirs) - 1)
            return open_dirs[idx]

        if frightened:
            idx = self._rng.next_int(Domain.AI_DECISION, pursuer.id, tick, 0, len(candidates) - 1)
            return candidates[idx]

        return self._closest_to(pursuer, player, candidates)

    @staticmethod
    def _closest_to(pursuer: Entity, player: Entity, candidates: list[Direction]) -> Direction:
        col, row = pursuer.tile
        best = candidates[0]
        best_dist = float("inf")
        for d in candidates:
            dx, dy = d.vector
            tx = col + dx + 0.5
            ty = row + dy + 0.5
            dist = (tx - player.x) ** 2 + (ty - player.y) ** 2
            if dist < best_dist:
                best = d
                best_dist = dist
        return best
