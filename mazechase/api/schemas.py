"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entity ---

class EntitySchema(BaseModel):
    id: int
    kind: str
    name: str = ""
    color: str = ""
    x: float
    y: float
    direction: str
    frightened: bool = False

    class Config:
        frozen = True


# --- Map ---

class MapResponse(BaseModel):
    cols: int
    rows: int
    step: int = 0
    grid: list[int] = Field(description="RLE of Cell values, row-major: [value, count, value, count, ...] (0=Wall,1=Empty,2=Pellet,3=Power)")


# --- Game state ---

class EventSchema(BaseModel):
    step: int
    category: str
    message: str
    delta: int = 0


class GameStateResponse(BaseModel):
    step: int
    phase: str
    score: int
    lives: int
    level: int
    paused: bool
    game_over: bool
    frightened: bool
    power_timer: float
    pellet_remaining: int
    player: EntitySchema
    pursuers: list[EntitySchema]
    events: list[EventSchema] = Field(default_factory=list)


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    step: int = 0


class InputResponse(BaseModel):
    accepted: bool
    direction: str


# --- Config ---

class GameConfigResponse(BaseModel):
    seed: int
    player_speed: float
    pursuer_speed: float
    frightened_speed_multiplier: float
    power_duration: float
    pellet_score: int
    power_score: int
    capture_score: int
    fps: int
    initial_lives: int
    tick_rate: float


# --- Stats ---

class SessionStats(BaseModel):
    step: int
    steps_run: int
    running: bool
    paused: bool
    game_over: bool
