"""Leaderboard - pure period windows and ranking of per-user totals.

Invariants:
    - day/week/month windows open at the civil start (week = Monday 00:00 civil)
    - "all" has no lower bound
    - Ranking orders by count, then cost, both descending; users with equal
      count and cost share a rank and the next rank skips (1, 1, 3)
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal
from enum import Enum
from uuid import UUID

from smoketrack.core.civil_time import (
    CIVIL_TZ, start_of_civil_day, start_of_civil_month, start_of_civil_week,
)


class LeaderboardPeriod(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


@dataclass(frozen=True)
class UserTotals:
    user_id: UUID
    count: int
    cost: Decimal


@dataclass(frozen=True)
class RankedEntry:
    rank: int
    user_id: UUID
    count: int
    cost: Decimal


def period_start(
    period: LeaderboardPeriod, now: datetime, tz: tzinfo = CIVIL_TZ,
) -> datetime | None:
    """UTC instant the period opens at; None for all time."""
    if period is LeaderboardPeriod.DAY:
        return start_of_civil_day(now, tz)
    if period is LeaderboardPeriod.WEEK:
        return start_of_civil_week(now, tz)
    if period is LeaderboardPeriod.MONTH:
        return start_of_civil_month(now, tz)
    return None


def rank_totals(totals: list[UserTotals]) -> list[RankedEntry]:
    ordered = sorted(totals, key=lambda t: (-t.count, -t.cost, str(t.user_id)))
    ranked: list[RankedEntry] = []
    for position, t in enumerate(ordered, start=1):
        prev = ranked[-1] if ranked else None
        if prev and (prev.count, prev.cost) == (t.count, t.cost):
            rank = prev.rank
        else:
            rank = position
        ranked.append(RankedEntry(rank, t.user_id, t.count, t.cost))
    return ranked
