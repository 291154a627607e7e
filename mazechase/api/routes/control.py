"""POST /api/v1/control/{action} and /input/{direction} — lifecycle controls and steering."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Query

from mazechase.api.dependencies import get_engine_manager
from mazechase.api.engine_manager import EngineManager
from mazechase.api.schemas import ControlResponse, InputResponse
from mazechase.core.enums import Direction

router = APIRouter()


class ControlAction(str, Enum):
    start = "start"
    pause = "pause"
    resume = "resume"
    step = "step"
    restart = "restart"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    snapshot = manager.get_snapshot()
    step = snapshot.step if snapshot else 0

    match action:
        case ControlAction.start:
            if manager.running:
                return ControlResponse(status="noop", message="Already running.", step=step)
            manager.start()
            return ControlResponse(status="ok", message="Game loop started.", step=step)

        case ControlAction.pause:
            manager.pause()
            return ControlResponse(status="ok", message="Game paused.", step=step)

        case ControlAction.resume:
            frame = manager.get_frame()
            if frame is not None and frame.game_over:
                return ControlResponse(status="error", message="Game over; restart instead.", step=step)
            manager.resume()
            return ControlResponse(status="ok", message="Game resumed.", step=step)

        case ControlAction.step:
            new_step = manager.step()
            return ControlResponse(status="ok", message="Single step executed.", step=new_step)

        case ControlAction.restart:
            manager.restart()
            return ControlResponse(status="ok", message="Game restarted.", step=0)


@router.post("/input/{direction}", response_model=InputResponse)
def steer(
    direction: str,
    manager: EngineManager = Depends(get_engine_manager),
) -> InputResponse:
    parsed = Direction.parse(direction)
    if parsed is None:
        raise HTTPException(status_code=400, detail=f"Unknown direction {direction!r}.")
    manager.steer(parsed)
    return InputResponse(accepted=True, direction=parsed.name.lower())


@router.post("/speed", response_model=ControlResponse)
def set_speed(
    sps: float = Query(60.0, gt=0.5, le=1000.0, description="Host loop iterations per second"),
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    manager.tick_rate = 1.0 / sps
    snapshot = manager.get_snapshot()
    step = snapshot.step if snapshot else 0
    return ControlResponse(status="ok", message=f"Loop rate set to {sps:.1f}/s.", step=step)
