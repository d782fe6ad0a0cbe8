"""Statistics Service - period totals, trend, hourly histogram and health summary.

Invariants:
    - All windows come from civil_time boundaries (fixed civil zone, not host time)
    - Each period is compared against the full previous civil period
    - One read per call: every event of the user, oldest first
    - total_days counts civil days since the first event, at least 1
"""

from datetime import datetime, timedelta, tzinfo
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.civil_time import (
    CIVIL_TZ, civil_days_between, days_ago, ensure_utc, start_of_civil_day,
    start_of_civil_month, start_of_civil_week,
)
from smoketrack.core.consumption_stats import (
    ConsumptionPoint, average_daily, daily_trend, health_score,
    hourly_distribution, percent_change, period_totals,
)
from smoketrack.models.event import Event


def _period(
    points: list[ConsumptionPoint],
    current: tuple[datetime, datetime],
    previous: tuple[datetime, datetime],
) -> dict:
    count, cost = period_totals(points, *current)
    prev_count, _ = period_totals(points, *previous)
    return {
        "count": count,
        "cost": cost,
        "change": percent_change(count, prev_count),
    }


def _health(points: list[ConsumptionPoint], now: datetime, tz: tzinfo) -> tuple[float, dict]:
    if not points:
        return 0.0, {
            "total_count": 0,
            "total_days": 0,
            "money_spent": Decimal("0"),
            "health_score": health_score(None),
        }
    total_days = max(1, civil_days_between(points[0].occurred_at, now, tz))
    avg = average_daily(len(points), total_days)
    return avg, {
        "total_count": len(points),
        "total_days": total_days,
        "money_spent": sum((Decimal(p.cost) for p in points), Decimal("0")),
        "health_score": health_score(avg),
    }


async def build_statistics(
    db: AsyncSession,
    user_id: UUID,
    now: datetime,
    tz: tzinfo = CIVIL_TZ,
    trend_days: int = 30,
) -> dict:
    """Statistics page payload for one user at `now`."""
    day_start = start_of_civil_day(now, tz)
    day_end = day_start + timedelta(days=1)
    week_start = start_of_civil_week(now, tz)
    month_start = start_of_civil_month(now, tz)
    prev_month_start = start_of_civil_month(month_start - timedelta(days=1), tz)
    next_month_start = start_of_civil_month(month_start + timedelta(days=32), tz)
    trend_start = days_ago(trend_days - 1, now, tz)

    result = await db.execute(
        select(Event.occurred_at, Event.unit_cost)
        .where(Event.user_id == user_id)
        .order_by(Event.occurred_at),
    )
    points = [ConsumptionPoint(ensure_utc(at), cost) for at, cost in result.all()]
    avg_daily, health = _health(points, now, tz)

    return {
        "today": _period(
            points,
            (day_start, day_end),
            (day_start - timedelta(days=1), day_start),
        ),
        "week": _period(
            points,
            (week_start, week_start + timedelta(days=7)),
            (week_start - timedelta(days=7), week_start),
        ),
        "month": _period(
            points,
            (month_start, next_month_start),
            (prev_month_start, month_start),
        ),
        "avg_daily": avg_daily,
        "daily_trend": daily_trend(
            [p for p in points if trend_start <= p.occurred_at < day_end], tz,
        ),
        "hourly_distribution": hourly_distribution(points, tz),
        "health": health,
    }
