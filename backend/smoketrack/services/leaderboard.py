"""Leaderboard Service - per-user totals since the civil period start.

Invariants:
    - Only users with at least one event in the window are ranked
    - The caller always gets their own totals; rank is None when they fall
      outside the top `limit`
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.civil_time import CIVIL_TZ
from smoketrack.core.leaderboard import (
    LeaderboardPeriod, RankedEntry, UserTotals, period_start, rank_totals,
)
from smoketrack.models.event import Event


DEFAULT_LIMIT: int = 100


@dataclass(frozen=True)
class Leaderboard:
    period: LeaderboardPeriod
    since: datetime | None
    entries: list[RankedEntry]
    me: RankedEntry | UserTotals


async def build_leaderboard(
    db: AsyncSession,
    user_id: UUID,
    period: LeaderboardPeriod,
    now: datetime,
    tz: tzinfo = CIVIL_TZ,
    limit: int = DEFAULT_LIMIT,
) -> Leaderboard:
    since = period_start(period, now, tz)
    count = func.count(Event.id)
    cost = func.coalesce(func.sum(Event.unit_cost), 0)
    query = select(Event.user_id, count, cost).group_by(Event.user_id)
    if since is not None:
        query = query.where(Event.occurred_at >= since)

    result = await db.execute(query)
    totals = [
        UserTotals(uid, n, Decimal(str(total))) for uid, n, total in result.all()
    ]
    entries = rank_totals(totals)[:limit]

    me = next((e for e in entries if e.user_id == user_id), None)
    if me is None:
        me = next(
            (t for t in totals if t.user_id == user_id),
            UserTotals(user_id, 0, Decimal("0")),
        )
    return Leaderboard(period=period, since=since, entries=entries, me=me)
