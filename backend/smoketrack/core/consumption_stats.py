"""Consumption Stats - pure aggregation of logged events into statistics views.

Invariants:
    - Inputs are (occurred_at, cost) pairs; no IO, no DB
    - Every grouping (day key, hour) goes through civil_time
    - Period windows are half-open: start <= occurred_at < end
"""

import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Iterable

from smoketrack.core.civil_time import CIVIL_TZ, civil_date_key, civil_hour, ensure_utc


HOUR_BUCKET_SIZE: int = 2


@dataclass(frozen=True)
class ConsumptionPoint:
    occurred_at: datetime
    cost: Decimal


def period_totals(
    points: Iterable[ConsumptionPoint], start: datetime, end: datetime,
) -> tuple[int, Decimal]:
    """Count and cost of points in [start, end)."""
    start, end = ensure_utc(start), ensure_utc(end)
    count = 0
    cost = Decimal("0")
    for p in points:
        at = ensure_utc(p.occurred_at)
        if start <= at < end:
            count += 1
            cost += Decimal(p.cost)
    return count, cost


def percent_change(current: int, previous: int) -> int:
    """Rounded percentage change; 100 when growing from zero."""
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) / previous * 100)


def daily_trend(
    points: Iterable[ConsumptionPoint], tz: tzinfo = CIVIL_TZ,
) -> list[dict]:
    """Per civil day count and cost, ascending by date."""
    days: dict[str, dict] = {}
    for p in points:
        key = civil_date_key(p.occurred_at, tz)
        day = days.setdefault(key, {"date": key, "count": 0, "cost": Decimal("0")})
        day["count"] += 1
        day["cost"] += Decimal(p.cost)
    return [days[k] for k in sorted(days)]


def hourly_distribution(
    points: Iterable[ConsumptionPoint], tz: tzinfo = CIVIL_TZ,
) -> list[dict]:
    """Counts in 12 two-hour civil buckets ("0-2" ... "22-24")."""
    buckets = Counter(
        civil_hour(p.occurred_at, tz) // HOUR_BUCKET_SIZE for p in points
    )
    return [
        {
            "hour": f"{i * HOUR_BUCKET_SIZE}-{(i + 1) * HOUR_BUCKET_SIZE}",
            "count": buckets.get(i, 0),
        }
        for i in range(24 // HOUR_BUCKET_SIZE)
    ]


def average_daily(total_count: int, total_days: int) -> float:
    """Events per day over the tracked span, one decimal place."""
    return round(total_count / max(1, total_days), 1)


def health_score(avg_daily: float | None) -> int:
    """0-100 score falling with the daily average; 100 with no history.

    Piecewise linear: 80 at zero, 70 at 5/day, 55 at 10/day, 35 at 20/day,
    then one point per extra unit down to a floor of 10.
    """
    if avg_daily is None:
        return 100
    if avg_daily <= 5:
        score = 80 - avg_daily * 2
    elif avg_daily <= 10:
        score = 70 - (avg_daily - 5) * 3
    elif avg_daily <= 20:
        score = 55 - (avg_daily - 10) * 2
    else:
        score = max(10, 35 - (avg_daily - 20))
    return math.floor(score + 0.5)
