"""Maze grid with torus wraparound."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from mazechase.core.enums import Cell

_CONSUMABLE = (Cell.PELLET, Cell.POWER_PELLET)


def wrap(v: float, size: int) -> float:
    """Wrap *v* onto ``[0, size)`` so opposite edges are contiguous."""
    if 0 <= v < size:
        return v
    r = v % size
    # float modulo of a tiny negative value can round up to size itself
    return r if r < size else r - size


class MazeGrid:
    """2D cell grid backed by a flat list, addressed with independent wraparound on both axes.

    Keeps the template it was built from so consumed cells can be refilled
    by :meth:`apply_level_reset`. Only ``set_cell`` and ``apply_level_reset``
    mutate the cells.
    """

    __slots__ = ("cols", "rows", "_cells", "_template")

    def __init__(self, template: Sequence[Sequence[Cell]]) -> None:
        self.rows = len(template)
        self.cols = len(template[0]) if self.rows else 0
        self._template: tuple[Cell, ...] = tuple(Cell(c) for row in template for c in row)
        self._cells: list[Cell] = list(self._template)

    # -- access --

    def _idx(self, col: int, row: int) -> int:
        return row * self.cols + col

    def cell_at(self, x: float, y: float) -> Cell:
        """Cell containing the continuous point (x, y)."""
        col = wrap(math.floor(x), self.cols)
        row = wrap(math.floor(y), self.rows)
        return self._cells[self._idx(col, row)]

    def is_passable(self, x: float, y: float) -> bool:
        return self.cell_at(x, y) != Cell.WALL

    def set_cell(self, col: int, row: int, cell: Cell) -> None:
        col = wrap(col, self.cols)
        row = wrap(row, self.rows)
        self._cells[self._idx(col, row)] = cell

    def count(self, cell: Cell) -> int:
        return self._cells.count(cell)

    def iter_rows(self) -> Iterable[tuple[Cell, ...]]:
        for r in range(self.rows):
            start = r * self.cols
            yield tuple(self._cells[start:start + self.cols])

    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only copy of the current cells, row-major."""
        return tuple(self.iter_rows())

    def neighbours(self, col: int, row: int) -> list[tuple[int, int]]:
        """The four wrapped orthogonal neighbours of a tile."""
        return [
            (wrap(col - 1, self.cols), row),
            (wrap(col + 1, self.cols), row),
            (col, wrap(row - 1, self.rows)),
            (col, wrap(row + 1, self.rows)),
        ]

    # -- level reset --

    def apply_level_reset(self) -> int:
        """Refill every consumed cell from the template. Returns the number refilled."""
        refilled = 0
        for i, original in enumerate(self._template):
            if original in _CONSUMABLE and self._cells[i] != original:
                self._cells[i] = original
                refilled += 1
        return refilled

    # -- copy --

    def copy(self) -> MazeGrid:
        new = MazeGrid.__new__(MazeGrid)
        new.cols = self.cols
        new.rows = self.rows
        new._template = self._template
        new._cells = list(self._cells)
        return new


class GridView:
    """Read-only facade over a MazeGrid owned by someone else."""

    __slots__ = ("_grid",)

    def __init__(self, grid: MazeGrid) -> None:
        self._grid = grid

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def rows(self) -> int:
        return self._grid.rows

    def cell_at(self, x: float, y: float) -> Cell:
        return self._grid.cell_at(x, y)

    def is_passable(self, x: float, y: float) -> bool:
        return self._grid.is_passable(x, y)

    def count(self, cell: Cell) -> int:
        return self._grid.count(cell)

    def iter_rows(self) -> Iterable[tuple[Cell, ...]]:
        return self._grid.iter_rows()

    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        return self._grid.cells()

    def neighbours(self, col: int, row: int) -> list[tuple[int, int]]:
        return self._grid.neighbours(col, row)
