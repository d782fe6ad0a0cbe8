"""Leaderboard Schemas - ranked rows and the caller's own standing."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from smoketrack.core.leaderboard import RankedEntry, UserTotals
from smoketrack.services.leaderboard import Leaderboard


def _money(value: Decimal) -> float:
    return float(round(value, 2))


class LeaderboardEntryResponse(BaseModel):
    rank: int | None
    user_id: UUID
    smoke_count: int
    total_cost: float

    @classmethod
    def from_entry(
        cls, entry: RankedEntry | UserTotals,
    ) -> "LeaderboardEntryResponse":
        return cls(
            rank=getattr(entry, "rank", None),
            user_id=entry.user_id,
            smoke_count=entry.count,
            total_cost=_money(entry.cost),
        )


class LeaderboardResponse(BaseModel):
    period: str
    since: datetime | None
    data: list[LeaderboardEntryResponse]
    my_ranking: LeaderboardEntryResponse

    @classmethod
    def from_board(cls, board: Leaderboard) -> "LeaderboardResponse":
        return cls(
            period=board.period.value,
            since=board.since,
            data=[LeaderboardEntryResponse.from_entry(e) for e in board.entries],
            my_ranking=LeaderboardEntryResponse.from_entry(board.me),
        )
