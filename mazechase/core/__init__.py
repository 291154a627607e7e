"""Core data model: cells, directions, entities, the maze grid and layouts.

``WorldState`` lives in :mod:`mazechase.core.world_state` and is imported
from there directly.
"""

from mazechase.core.enums import Cell, Direction, Domain, EventKind, GamePhase
from mazechase.core.events import GameEvent, GameListener
from mazechase.core.grid import GridView, MazeGrid, wrap
from mazechase.core.layout import CLASSIC, Layout, LayoutError, PursuerSpawn
from mazechase.core.models import Entity, SpawnPoint
from mazechase.core.snapshot import EntityView, Snapshot

__all__ = [
    "CLASSIC",
    "Cell",
    "Direction",
    "Domain",
    "Entity",
    "EntityView",
    "EventKind",
    "GameEvent",
    "GameListener",
    "GamePhase",
    "GridView",
    "Layout",
    "LayoutError",
    "MazeGrid",
    "PursuerSpawn",
    "Snapshot",
    "SpawnPoint",
    "wrap",
]
