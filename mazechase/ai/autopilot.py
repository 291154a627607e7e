"""Autopilot — steers the player for headless runs.

Breadth-first search over the wrapped grid to the nearest pellet or power
pellet, avoiding tiles next to a non-frightened pursuer.

Usage:
    pilot = Autopilot()
    world.input(pilot.steer(world))
"""

from __future__ import annotations

import math
from collections import deque
from typing import TYPE_CHECKING

from mazechase.core.enums import Cell, Direction
from mazechase.core.grid import wrap

if TYPE_CHECKING:
    from mazechase.core.world_state import WorldState

_GOALS = (Cell.PELLET, Cell.POWER_PELLET)


class Autopilot:
    """Picks a desired direction for the player each step."""

    __slots__ = ("_max_nodes",)

    def __init__(self, max_nodes: int = 2000) -> None:
        self._max_nodes = max_nodes

    def steer(self, world: WorldState) -> Direction:
        grid = world.grid
        player = world.player
        start = player.tile

        danger: set[tuple[int, int]] = set()
        if not world.frightened:
            for p in world.pursuers:
                pc, pr = math.floor(p.x), math.floor(p.y)
                danger.add((pc, pr))
                danger.update(grid.neighbours(pc, pr))

        # (tile, first direction taken from start)
        queue: deque[tuple[tuple[int, int], Direction]] = deque()
        seen = {start}
        for d in Direction:
            dx, dy = d.vector
            nxt = (wrap(start[0] + dx, grid.cols), wrap(start[1] + dy, grid.rows))
            if grid.is_passable(*nxt) and nxt not in danger:
                seen.add(nxt)
                queue.append((nxt, d))

        explored = 0
        while queue and explored < self._max_nodes:
            (col, row), first = queue.popleft()
            explored += 1
            if grid.cell_at(col, row) in _GOALS:
                return first
            for d in Direction:
                dx, dy = d.vector
                nxt = (wrap(col + dx, grid.cols), wrap(row + dy, grid.rows))
                if nxt not in seen and grid.is_passable(*nxt) and nxt not in danger:
                    seen.add(nxt)
                    queue.append((nxt, first))

        return player.desired
