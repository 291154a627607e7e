"""Maze layouts: text parsing, spawn data, and the precondition check.

The engine does not validate the grid it is given. Callers load layouts
through this module, which rejects ragged or unreachable mazes before a
WorldState is built.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

from mazechase.core.enums import Cell, Direction
from mazechase.core.grid import MazeGrid
from mazechase.core.models import SpawnPoint

logger = logging.getLogger(__name__)

CHAR_TO_CELL: dict[str, Cell] = {
    "#": Cell.WALL,
    ".": Cell.PELLET,
    "o": Cell.POWER_PELLET,
    " ": Cell.EMPTY,
    "-": Cell.EMPTY,
}

CELL_TO_CHAR: dict[Cell, str] = {
    Cell.WALL: "#",
    Cell.PELLET: ".",
    Cell.POWER_PELLET: "o",
    Cell.EMPTY: " ",
}


class LayoutError(ValueError):
    """Raised when a layout violates the maze preconditions."""


@dataclass(frozen=True, slots=True)
class PursuerSpawn:
    """Starting data for one pursuer. Name and color are presentation metadata."""

    name: str
    color: str
    spawn: SpawnPoint
    speed_factor: float = 1.0
    home: SpawnPoint | None = None


@dataclass(frozen=True, slots=True)
class Layout:
    """A maze template plus the starting coordinates of every entity."""

    rows: tuple[str, ...]
    player: SpawnPoint
    pursuers: tuple[PursuerSpawn, ...]

    @property
    def cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def template(self) -> list[list[Cell]]:
        return parse_rows(self.rows)

    def build_grid(self) -> MazeGrid:
        grid = MazeGrid(self.template())
        validate(grid, self.spawn_points())
        return grid

    def spawn_points(self) -> list[SpawnPoint]:
        points = [self.player]
        for p in self.pursuers:
            points.append(p.spawn)
            if p.home is not None:
                points.append(p.home)
        return points


def parse_rows(rows: Sequence[str]) -> list[list[Cell]]:
    """Convert text rows into a rectangular Cell template."""
    if not rows:
        raise LayoutError("Layout has no rows.")
    width = len(rows[0])
    if width == 0:
        raise LayoutError("Layout rows are empty.")
    template: list[list[Cell]] = []
    for r, line in enumerate(rows):
        if len(line) != width:
            raise LayoutError(f"Row {r} has {len(line)} columns, expected {width}.")
        row: list[Cell] = []
        for c, ch in enumerate(line):
            cell = CHAR_TO_CELL.get(ch)
            if cell is None:
                raise LayoutError(f"Unknown character {ch!r} at column {c}, row {r}.")
            row.append(cell)
        template.append(row)
    return template


def format_rows(cells: Iterable[Iterable[Cell]]) -> list[str]:
    return ["".join(CELL_TO_CHAR[c] for c in row) for row in cells]


def reachable_tiles(grid: MazeGrid, start: tuple[int, int]) -> set[tuple[int, int]]:
    """Breadth-first flood of passable tiles from *start*, following wraparound."""
    seen = {start}
    queue = deque([start])
    while queue:
        col, row = queue.popleft()
        for n in grid.neighbours(col, row):
            if n not in seen and grid.is_passable(*n):
                seen.add(n)
                queue.append(n)
    return seen


def validate(grid: MazeGrid, spawn_points: Sequence[SpawnPoint] = ()) -> None:
    """Raise LayoutError unless spawns are passable and all open tiles form one region."""
    for point in spawn_points:
        if not (0 <= point.x < grid.cols and 0 <= point.y < grid.rows):
            raise LayoutError(f"Spawn ({point.x}, {point.y}) lies outside the grid.")
        if not grid.is_passable(point.x, point.y):
            raise LayoutError(f"Spawn ({point.x}, {point.y}) is inside a wall.")

    open_tiles = [
        (c, r)
        for r, row in enumerate(grid.iter_rows())
        for c, cell in enumerate(row)
        if cell != Cell.WALL
    ]
    if not open_tiles:
        raise LayoutError("Layout has no open tiles.")

    start = open_tiles[0]
    if spawn_points:
        start = (math.floor(spawn_points[0].x), math.floor(spawn_points[0].y))
    reached = reachable_tiles(grid, start)
    isolated = len(open_tiles) - len(reached)
    if isolated:
        raise LayoutError(f"{isolated} open tiles are unreachable from ({start[0]}, {start[1]}).")
    logger.debug("Layout validated: %dx%d, %d open tiles", grid.cols, grid.rows, len(open_tiles))


# -- built-in layouts --

_CLASSIC_ROWS = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "######.##### ## #####.######",
    "######.##          ##.######",
    "######.## ###--### ##.######",
    "######.## #      # ##.######",
    "      .   #      #   .      ",
    "######.## #      # ##.######",
    "######.## ######## ##.######",
    "######.##          ##.######",
    "######.## ######## ##.######",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

_GATE = SpawnPoint(13.5, 11.5, Direction.LEFT)

CLASSIC = Layout(
    rows=_CLASSIC_ROWS,
    player=SpawnPoint(13.5, 23.5, Direction.LEFT),
    pursuers=(
        PursuerSpawn("blinky", "#ff0000", SpawnPoint(13.5, 11.5, Direction.LEFT), 1.0, _GATE),
        PursuerSpawn("pinky", "#ffb8ff", SpawnPoint(14.5, 11.5, Direction.RIGHT), 0.95, _GATE),
        PursuerSpawn("inky", "#00ffff", SpawnPoint(12.5, 11.5, Direction.LEFT), 0.95, _GATE),
        PursuerSpawn("clyde", "#ffb852", SpawnPoint(15.5, 11.5, Direction.RIGHT), 0.9, _GATE),
    ),
)

LAYOUTS: dict[str, Layout] = {"classic": CLASSIC}
