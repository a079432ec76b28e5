# -*- coding: utf-8 -*-
"""
Uplift fitness & nutrition tracking API

Accounts and profiles, workout programs and session logs, meal logging against a
food catalogue, nutrition goals with daily macro comparison, and body progress.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .app_db import Database
from .auth.api import router as auth_router
from .config import Settings, settings as default_settings
from .diet.api import food_router, meal_router
from .errors import install_error_handlers
from .exercise.api import router as exercise_router
from .nutrition.api import goals_router, router as nutrition_router
from .profile.api import router as profile_router
from .progress.api import measurements_router, photos_router
from .workouts.api import router as workouts_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Uplift",
        description="Fitness & nutrition tracking: workouts, meals, goals and progress",
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

    db = Database(settings.db_path, pool_size=settings.db_pool_size, timeout=settings.db_timeout)
    # Open eagerly so the app works even when lifespan events are not triggered (e.g. some test clients).
    db.open()
    app.state.settings = settings
    app.state.db = db

    @app.on_event("shutdown")
    def _shutdown_close_db() -> None:
        db.close()

    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(exercise_router)
    app.include_router(workouts_router)
    app.include_router(food_router)
    app.include_router(meal_router)
    app.include_router(goals_router)
    app.include_router(nutrition_router)
    app.include_router(measurements_router)
    app.include_router(photos_router)

    @app.get("/api/health")
    def health_check():
        return {"ok": True}

    return app


app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("uplift.api:app", host=default_settings.host, port=default_settings.port, reload=False)
