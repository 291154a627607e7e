"""MazeArena helpers — tiny hand-built worlds for engine tests.

Usage:
    world, listener = make_world(CORRIDOR, player=SpawnPoint(1.95, 1.5, Direction.RIGHT))
    events = world.update(STEP)
    assert listener.scores == [10]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from mazechase.config import GameConfig
from mazechase.core.enums import Direction, Domain
from mazechase.core.grid import MazeGrid
from mazechase.core.layout import PursuerSpawn, parse_rows
from mazechase.core.models import SpawnPoint
from mazechase.core.world_state import WorldState

STEP = 1.0 / 60

# 9 wide, open tiles at columns 1..7 of row 1
CORRIDOR = (
    "#########",
    "#       #",
    "#########",
)

# Open plus-shape centred on (2, 2)
CROSS = (
    "#####",
    "## ##",
    "#   #",
    "## ##",
    "#####",
)


@dataclass
class RecordingListener:
    """GameListener that remembers every callback."""

    scores: list[int] = field(default_factory=list)
    lives_lost: int = 0
    level_clears: int = 0

    def on_score(self, delta: int) -> None:
        self.scores.append(delta)

    def on_life_lost(self) -> None:
        self.lives_lost += 1

    def on_level_clear(self) -> None:
        self.level_clears += 1


class StubRNG:
    """Random source that always picks the lowest or highest index and records calls."""

    def __init__(self, pick_high: bool = False) -> None:
        self.pick_high = pick_high
        self.calls: list[tuple[Domain, int, int, int, int]] = []

    def next_int(self, domain: Domain, entity_id: int, tick: int, low: int, high: int) -> int:
        self.calls.append((domain, entity_id, tick, low, high))
        return high if self.pick_high else low


def grid_of(rows: Sequence[str]) -> MazeGrid:
    return MazeGrid(parse_rows(rows))


def pursuer(x: float, y: float, direction: Direction = Direction.LEFT,
            home: SpawnPoint | None = None, name: str = "blinky") -> PursuerSpawn:
    return PursuerSpawn(name, "#ff0000", SpawnPoint(x, y, direction), 1.0, home)


def make_world(
    rows: Sequence[str],
    player: SpawnPoint,
    pursuers: Sequence[PursuerSpawn] = (),
    config: GameConfig | None = None,
    rng=None,
) -> tuple[WorldState, RecordingListener]:
    listener = RecordingListener()
    world = WorldState(
        config or GameConfig(), grid_of(rows), player, pursuers,
        rng=rng if rng is not None else StubRNG(), listener=listener,
    )
    return world, listener
