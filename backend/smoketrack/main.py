"""Smoke Tracker API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SmokeTrackError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import smoketrack.infrastructure.database as database
from smoketrack.api.error_handlers import register_error_handlers
from smoketrack.api.routes import (
    health, interval_settings, leaderboard, smoking_records, statistics,
    supplies, violations,
)
from smoketrack.api.routes.health import SERVICE_VERSION
from smoketrack.config import get_settings
from smoketrack.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Smoke Tracker API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Smoke Tracker API shutting down")


app = FastAPI(
    title="Smoke Tracker API", version=SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(interval_settings.router)
app.include_router(supplies.router)
app.include_router(smoking_records.router)
app.include_router(violations.router)
app.include_router(statistics.router)
app.include_router(leaderboard.router)

register_error_handlers(app)
