"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # World
    seed: int = 42

    # Speeds (tiles per second at velocity_scale == 1.0)
    player_speed: float = 1.1
    pursuer_speed: float = 0.9
    frightened_speed_multiplier: float = 0.7
    velocity_scale: float = 6.0            # Converts configured speed units into per-step displacement

    # Power pellet
    power_duration: float = 6.0            # Seconds of Frightened mode after a power pellet

    # Scoring
    pellet_score: int = 10
    power_score: int = 50
    capture_score: int = 200

    # Geometry
    decision_epsilon: float = 0.12         # Distance from tile center that counts as a decision point
    capture_radius: float = 0.6            # Player/pursuer contact distance

    # Timing
    fps: int = 60
    max_steps_per_frame: int = 5           # Accumulator cap, prevents spiral-of-death on slow frames
    tick_rate: float = 1.0 / 60            # Seconds between steps for the background host thread

    # Session
    initial_lives: int = 3

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

    @property
    def step_seconds(self) -> float:
        return 1.0 / self.fps
