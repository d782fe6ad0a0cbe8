"""Interval Settings Routes - read/update the lock configuration and query lock status.

Invariants:
    - lock-status is evaluated fresh on every call (no cache)
    - remaining_minutes is an integer rounded up
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import get_clock, get_current_user_id
from smoketrack.core.clock import Clock
from smoketrack.core.domain_types import UserId
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.event import SuccessResponse
from smoketrack.schemas.interval import (
    IntervalSettingsResponse, IntervalSettingsUpdate, LockStatusResponse,
)
from smoketrack.services.interval_settings import (
    load_interval_config, update_interval_config,
)
from smoketrack.services.lock_status import get_lock_status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/interval-settings", tags=["interval-lock"])


@router.get("", response_model=IntervalSettingsResponse)
async def read_interval_settings(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Current interval lock settings."""
    config = await load_interval_config(db, user_id)
    return IntervalSettingsResponse.from_config(config)


@router.put("", response_model=SuccessResponse)
async def write_interval_settings(
    body: IntervalSettingsUpdate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Enable/disable the lock and set its interval (5-1440 minutes)."""
    await update_interval_config(db, user_id, body.enabled, body.minutes)
    return SuccessResponse()


@router.get("/lock-status", response_model=LockStatusResponse)
async def read_lock_status(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    status = await get_lock_status(db, user_id, clock.now())
    return LockStatusResponse.from_status(status)
