"""Leaderboard - grouping by user from the civil period start.

The fixed clock sits at 2024-01-01T00:00Z, Monday 08:00 in UTC+8, so the
civil week opened at 2023-12-31T16:00Z.
"""

import uuid
from datetime import datetime, timedelta, timezone

from smoketrack.core.leaderboard import LeaderboardPeriod
from smoketrack.services.leaderboard import build_leaderboard


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
WEEK_START = datetime(2023, 12, 31, 16, 0, tzinfo=timezone.utc)


async def test_week_opens_monday_civil_midnight(
    test_db, user_id, make_supply, make_event,
):
    supply = await make_supply()
    await make_event(supply, WEEK_START)
    await make_event(supply, WEEK_START - timedelta(minutes=1))

    board = await build_leaderboard(test_db, user_id, LeaderboardPeriod.WEEK, T0)

    assert board.since == WEEK_START
    assert len(board.entries) == 1
    assert board.entries[0].count == 1
    assert board.me.rank == 1


async def test_all_time_counts_everything(test_db, user_id, make_supply, make_event):
    supply = await make_supply()
    await make_event(supply, WEEK_START)
    await make_event(supply, WEEK_START - timedelta(days=90))

    board = await build_leaderboard(test_db, user_id, LeaderboardPeriod.ALL, T0)

    assert board.since is None
    assert board.me.count == 2


async def test_caller_outside_limit_gets_totals_without_rank(
    test_db, user_id, make_supply, make_event,
):
    other = uuid.uuid4()
    theirs = await make_supply(owner=other)
    mine = await make_supply()
    for minutes in (1, 2, 3):
        await make_event(theirs, WEEK_START + timedelta(minutes=minutes), owner=other)
    await make_event(mine, WEEK_START + timedelta(minutes=5))

    board = await build_leaderboard(
        test_db, user_id, LeaderboardPeriod.WEEK, T0, limit=1,
    )

    assert [e.user_id for e in board.entries] == [other]
    assert getattr(board.me, "rank", None) is None
    assert board.me.count == 1


async def test_caller_without_events(test_db, user_id):
    board = await build_leaderboard(test_db, user_id, LeaderboardPeriod.DAY, T0)

    assert board.entries == []
    assert board.me.count == 0


async def test_leaderboard_route(client, auth_headers, user_id, make_supply, make_event):
    supply = await make_supply()
    await make_event(supply, WEEK_START)

    resp = await client.get(
        "/api/v1/leaderboard", params={"period": "week"}, headers=auth_headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["period"] == "week"
    assert body["my_ranking"] == {
        "rank": 1, "user_id": str(user_id), "smoke_count": 1, "total_cost": 1.25,
    }
    assert datetime.fromisoformat(body["since"].replace("Z", "+00:00")) == WEEK_START


async def test_leaderboard_rejects_unknown_period(client, auth_headers):
    resp = await client.get(
        "/api/v1/leaderboard", params={"period": "year"}, headers=auth_headers,
    )
    assert resp.status_code == 400
