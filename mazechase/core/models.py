"""Core data models: Entity and spawn points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from mazechase.core.enums import Direction

PLAYER_ID = 0


@dataclass(frozen=True, slots=True)
class SpawnPoint:
    """Immutable starting coordinate and heading (tile units, usually a tile center)."""

    x: float
    y: float
    direction: Direction = Direction.LEFT


@dataclass(slots=True)
class Entity:
    """A moving actor: the player or one of the pursuers."""

    id: int
    kind: str
    x: float
    y: float
    direction: Direction = Direction.LEFT
    desired: Direction = Direction.LEFT
    speed: float = 1.0
    spawn: SpawnPoint = field(default_factory=lambda: SpawnPoint(0.5, 0.5))
    home: SpawnPoint | None = None
    name: str = ""
    color: str = ""

    @property
    def is_player(self) -> bool:
        return self.kind == "player"

    @property
    def tile(self) -> tuple[int, int]:
        return math.floor(self.x), math.floor(self.y)

    def distance_to(self, other: Entity) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def reset_to(self, point: SpawnPoint) -> None:
        """Reposition in place and face the point's heading."""
        self.x = point.x
        self.y = point.y
        self.direction = point.direction
        self.desired = point.direction

    def copy(self) -> Entity:
        return Entity(
            id=self.id, kind=self.kind, x=self.x, y=self.y,
            direction=self.direction, desired=self.desired, speed=self.speed,
            spawn=self.spawn, home=self.home, name=self.name, color=self.color,
        )
