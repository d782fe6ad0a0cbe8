"""Leaderboard Routes - users ranked by consumption in a civil period."""

from datetime import tzinfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import (
    get_civil_zone, get_clock, get_current_user_id,
)
from smoketrack.config import Settings, get_settings
from smoketrack.core.clock import Clock
from smoketrack.core.domain_types import UserId
from smoketrack.core.leaderboard import LeaderboardPeriod
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.leaderboard import LeaderboardResponse
from smoketrack.services.leaderboard import build_leaderboard

router = APIRouter(prefix="/api/v1/leaderboard", tags=["leaderboard"])


@router.get("", response_model=LeaderboardResponse)
async def read_leaderboard(
    period: LeaderboardPeriod = Query(LeaderboardPeriod.WEEK),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    tz: tzinfo = Depends(get_civil_zone),
    settings: Settings = Depends(get_settings),
):
    board = await build_leaderboard(
        db, user_id, period, clock.now(), tz, limit=settings.leaderboard_limit,
    )
    return LeaderboardResponse.from_board(board)
