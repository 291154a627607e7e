"""Immutable snapshot of the world state for presentation and the API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazechase.core.enums import Cell, Direction, GamePhase

if TYPE_CHECKING:
    from mazechase.core.models import Entity
    from mazechase.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class EntityView:
    """Read-only copy of an entity's drawable state."""

    id: int
    kind: str
    name: str
    color: str
    x: float
    y: float
    direction: Direction
    frightened: bool = False

    @classmethod
    def of(cls, entity: Entity, frightened: bool = False) -> EntityView:
        return cls(
            id=entity.id, kind=entity.kind, name=entity.name, color=entity.color,
            x=entity.x, y=entity.y, direction=entity.direction, frightened=frightened,
        )


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world, safe to hand to other threads.

    Cells are copied into nested tuples so a presentation layer never
    aliases the live grid.
    """

    step: int
    phase: GamePhase
    cols: int
    rows: int
    cells: tuple[tuple[Cell, ...], ...]
    player: EntityView
    pursuers: tuple[EntityView, ...]
    power_timer: float
    pellet_remaining: int

    @property
    def frightened(self) -> bool:
        return self.power_timer > 0

    @classmethod
    def from_world(cls, world: WorldState) -> Snapshot:
        frightened = world.frightened
        return cls(
            step=world.step_count,
            phase=world.phase,
            cols=world.grid.cols,
            rows=world.grid.rows,
            cells=world.grid.cells(),
            player=EntityView.of(world.player),
            pursuers=tuple(EntityView.of(p, frightened) for p in world.pursuers),
            power_timer=world.power_timer,
            pellet_remaining=world.pellet_remaining,
        )

    def cell(self, col: int, row: int) -> Cell:
        return self.cells[row][col]
