"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mazechase.api.dependencies import get_engine_manager
from mazechase.api.engine_manager import EngineManager
from mazechase.api.schemas import GameConfigResponse

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        seed=cfg.seed,
        player_speed=cfg.player_speed,
        pursuer_speed=cfg.pursuer_speed,
        frightened_speed_multiplier=cfg.frightened_speed_multiplier,
        power_duration=cfg.power_duration,
        pellet_score=cfg.pellet_score,
        power_score=cfg.power_score,
        capture_score=cfg.capture_score,
        fps=cfg.fps,
        initial_lives=cfg.initial_lives,
        tick_rate=manager.tick_rate,
    )
