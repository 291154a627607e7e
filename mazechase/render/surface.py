"""Render surfaces: anything with ``draw(snapshot)``. The text surface backs the CLI."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol

from mazechase.core.enums import Direction
from mazechase.core.layout import CELL_TO_CHAR

if TYPE_CHECKING:
    from mazechase.core.snapshot import Snapshot

_PLAYER_GLYPHS = {
    Direction.LEFT: ">",
    Direction.RIGHT: "<",
    Direction.UP: "v",
    Direction.DOWN: "^",
}


class RenderSurface(Protocol):
    def draw(self, snapshot: Snapshot) -> None: ...


class TextSurface:
    """Draws a snapshot as ASCII lines: walls ``#``, pellets ``.``, power ``o``,
    pursuers by initial (lower-case while frightened), player as a mouth glyph."""

    __slots__ = ("lines",)

    def __init__(self) -> None:
        self.lines: list[str] = []

    def draw(self, snapshot: Snapshot) -> None:
        canvas = [[CELL_TO_CHAR[c] for c in row] for row in snapshot.cells]
        for p in snapshot.pursuers:
            glyph = (p.name[:1] or "g")
            glyph = glyph.lower() if p.frightened else glyph.upper()
            canvas[math.floor(p.y)][math.floor(p.x)] = glyph
        player = snapshot.player
        canvas[math.floor(player.y)][math.floor(player.x)] = _PLAYER_GLYPHS[player.direction]
        self.lines = ["".join(row) for row in canvas]

    def text(self) -> str:
        return "\n".join(self.lines)
