"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mazechase.api.dependencies import set_engine_manager
from mazechase.api.engine_manager import EngineManager
from mazechase.api.routes import api_router
from mazechase.config import GameConfig
from mazechase.core.layout import CLASSIC, Layout
from mazechase.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: GameConfig | None = None,
    layout: Layout = CLASSIC,
    autostart: bool = True,
) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config, layout)
        set_engine_manager(manager)
        app.state.engine_manager = manager
        if autostart:
            manager.start()
        logger.info("API server started, game loop %s.", "running" if autostart else "idle")
        yield
        manager.stop()
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Maze Chase Engine",
        description=(
            "Maze-chase simulation host API.\n\n"
            "## API Groups\n\n"
            "- **State** — Live game state: entities, score, lives, level, events\n"
            "- **Map** — Current maze cells (RLE)\n"
            "- **Control** — Game lifecycle: start, pause, resume, step, restart; player input\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Live game state polled by the client: entities, score, lives, level, events."},
            {"name": "Map", "description": "Maze cells. Pellets disappear as they are eaten, so poll after scoring events."},
            {"name": "Control", "description": "Game lifecycle controls and player steering."},
            {"name": "Config", "description": "Read-only game configuration parameters."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
