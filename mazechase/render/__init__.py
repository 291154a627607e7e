"""Render surfaces consumed by ``WorldState.render``."""

from mazechase.render.surface import RenderSurface, TextSurface

__all__ = ["RenderSurface", "TextSurface"]
