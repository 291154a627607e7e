"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Cell(IntEnum):
    """Tile states on the maze grid."""

    WALL = 0
    EMPTY = 1
    PELLET = 2
    POWER_PELLET = 3


@unique
class Direction(IntEnum):
    """Cardinal movement directions, in the order pursuers enumerate them."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @property
    def vector(self) -> tuple[int, int]:
        return DIRECTION_VECTORS[self]

    @property
    def opposite(self) -> Direction:
        return OPPOSITE[self]

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Return the Direction named by *value*, or None.

        Accepts a Direction, a direction name ("left", "UP") or a key name
        ("ArrowLeft", "arrowleft", "a", "W"). Anything else yields None.
        """
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            return None
        return KEY_TO_DIRECTION.get(value.strip().lower())


# y grows downwards, matching row order in the grid
DIRECTION_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

OPPOSITE: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

KEY_TO_DIRECTION: dict[str, Direction] = {
    "left": Direction.LEFT, "arrowleft": Direction.LEFT, "a": Direction.LEFT,
    "right": Direction.RIGHT, "arrowright": Direction.RIGHT, "d": Direction.RIGHT,
    "up": Direction.UP, "arrowup": Direction.UP, "w": Direction.UP,
    "down": Direction.DOWN, "arrowdown": Direction.DOWN, "s": Direction.DOWN,
}


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    AI_DECISION = 0
    AI_DEAD_END = 1
    AUTOPILOT = 2


@unique
class GamePhase(IntEnum):
    """Lifecycle phases of a WorldState."""

    RUNNING = 0
    LEVEL_COMPLETE = 1   # Transient: waiting for the owner to start the next level
    GAME_OVER = 2        # Terminal until the owner builds a new WorldState


@unique
class EventKind(IntEnum):
    """Kinds of events emitted by a simulation step."""

    SCORE = 0
    LIFE_LOST = 1
    LEVEL_CLEAR = 2
    POWER_ON = 3
    CAPTURE = 4
