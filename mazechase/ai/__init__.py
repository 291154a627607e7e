"""AI layer: pursuer direction choice and the headless autopilot."""

from mazechase.ai.autopilot import Autopilot
from mazechase.ai.pursuer import PursuerAI

__all__ = ["Autopilot", "PursuerAI"]
