"""GET /api/v1/map — current maze cells, run-length encoded."""

from __future__ import annotations

from typing import Iterable

from fastapi import APIRouter, Depends, HTTPException

from mazechase.api.dependencies import get_engine_manager
from mazechase.api.engine_manager import EngineManager
from mazechase.api.schemas import MapResponse

router = APIRouter()


def rle_encode(values: Iterable[int]) -> list[int]:
    """[value, count, value, count, ...] over a flat sequence."""
    rle: list[int] = []
    cur_val: int | None = None
    cur_count = 0
    for v in values:
        if v == cur_val:
            cur_count += 1
            continue
        if cur_val is not None:
            rle.append(cur_val)
            rle.append(cur_count)
        cur_val = v
        cur_count = 1
    if cur_val is not None:
        rle.append(cur_val)
        rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Game not initialized yet.")

    flat = (int(c) for row in snapshot.cells for c in row)
    return MapResponse(cols=snapshot.cols, rows=snapshot.rows, step=snapshot.step, grid=rle_encode(flat))
