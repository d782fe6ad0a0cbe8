"""Statistics Routes - consumption totals and distributions in civil time."""

from datetime import tzinfo

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import (
    get_civil_zone, get_clock, get_current_user_id,
)
from smoketrack.config import get_settings
from smoketrack.core.clock import Clock
from smoketrack.core.domain_types import UserId
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.statistics import StatisticsResponse
from smoketrack.services.statistics import build_statistics

router = APIRouter(prefix="/api/v1/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
async def read_statistics(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    tz: tzinfo = Depends(get_civil_zone),
):
    stats = await build_statistics(
        db, user_id, clock.now(), tz,
        trend_days=get_settings().statistics_trend_days,
    )
    return StatisticsResponse.model_validate(stats)
