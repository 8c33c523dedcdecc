# -*- coding: utf-8 -*-
"""
LifeTrack API

Habits, goals, health, timer, nutrition, workout, screen time and todo tracking
with derived statistics (streaks, daily nutrition progress, weekly reports,
workout volume, screen time against limits).
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .export.api import router as export_router
from .goals.api import router as goals_router
from .habits.api import router as habits_router
from .health.api import router as health_router
from .nutrition.api import router as nutrition_router
from .screen_time.api import router as screen_time_router
from .storage import MemoryStorage, Storage
from .timer.api import router as timer_router
from .todos.api import router as todos_router
from .workouts.api import router as workouts_router
from .workouts.catalog import seed_exercises

logger = logging.getLogger(__name__)


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the application around ``storage`` (a fresh ``MemoryStorage`` by default)."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="LifeTrack",
        description="Personal habit, health, nutrition and workout tracking",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.storage = storage if storage is not None else MemoryStorage()
    if settings.seed_exercises:
        seed_exercises(app.state.storage)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/api/health", tags=["Service"])
    def health_check() -> dict:
        return {"status": "ok"}

    app.include_router(habits_router)
    app.include_router(goals_router)
    app.include_router(health_router)
    app.include_router(timer_router)
    app.include_router(nutrition_router)
    app.include_router(workouts_router)
    app.include_router(screen_time_router)
    app.include_router(todos_router)
    app.include_router(export_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    uvicorn.run("lifetrack.api:app", host=settings.host, port=settings.port, reload=False)
