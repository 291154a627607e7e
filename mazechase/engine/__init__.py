"""Engine layer: entity motion, collision resolution, fixed-step driver."""

from mazechase.engine.collision import CollisionResolver
from mazechase.engine.game_loop import GameLoop
from mazechase.engine.motion import EntityMotion

__all__ = ["CollisionResolver", "EntityMotion", "GameLoop"]
