"""Health Checks - liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process can serve a request
    - GET /api/v1/health/ready answers 503 until a SELECT 1 succeeds
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

import smoketrack.infrastructure.database as database
from smoketrack.config import Settings, get_settings

SERVICE_NAME = "smoketrack-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "civil_utc_offset_hours": settings.civil_utc_offset_hours,
    }


@router.get("/ready")
async def readiness():
    """503 with a reason while the database is unreachable or not initialized."""
    manager = database.db_manager
    if manager is None:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "database_not_initialized"},
        )
    if not await manager.health_check():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
