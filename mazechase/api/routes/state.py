"""GET /api/v1/state — dynamic entity, score and event data (polled by the UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mazechase.api.dependencies import get_engine_manager
from mazechase.api.engine_manager import EngineManager
from mazechase.api.schemas import EntitySchema, EventSchema, GameStateResponse, SessionStats
from mazechase.core.snapshot import EntityView

router = APIRouter()


def _serialize_entity(e: EntityView) -> EntitySchema:
    return EntitySchema(
        id=e.id, kind=e.kind, name=e.name, color=e.color,
        x=e.x, y=e.y, direction=e.direction.name.lower(), frightened=e.frightened,
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_step: int = Query(0, ge=0, description="Only return events since this step"),
    manager: EngineManager = Depends(get_engine_manager),
) -> GameStateResponse:
    frame = manager.get_frame()
    if frame is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")
    snap = frame.snapshot

    events = [
        EventSchema(step=ev.step, category=ev.category, message=ev.message, delta=ev.delta)
        for ev in manager.event_log.since_step(since_step)
    ]

    return GameStateResponse(
        step=snap.step,
        phase=snap.phase.name,
        score=frame.score,
        lives=frame.lives,
        level=frame.level,
        paused=frame.paused,
        game_over=frame.game_over,
        frightened=snap.frightened,
        power_timer=snap.power_timer,
        pellet_remaining=snap.pellet_remaining,
        player=_serialize_entity(snap.player),
        pursuers=[_serialize_entity(p) for p in snap.pursuers],
        events=events,
    )


@router.get("/stats", response_model=SessionStats)
def get_stats(
    manager: EngineManager = Depends(get_engine_manager),
) -> SessionStats:
    frame = manager.get_frame()
    return SessionStats(
        step=frame.snapshot.step if frame else 0,
        steps_run=manager.steps_run,
        running=manager.running,
        paused=manager.paused,
        game_over=frame.game_over if frame else False,
    )
