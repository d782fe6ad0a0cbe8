"""Statistics - civil-day boundaries, period change, trend and hourly buckets.

The fixed clock sits at 2024-01-01T00:00Z, which is Monday 08:00 in UTC+8.
An event at 23:00Z the previous evening is 07:00 civil on the same Monday;
one at 15:00Z is 23:00 civil on Sunday, so it belongs to last week and
last month.
"""

import uuid
from datetime import datetime, timedelta, timezone

from smoketrack.services.statistics import build_statistics


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def _seed(make_supply, make_event):
    supply = await make_supply()
    await make_event(supply, T0)
    await make_event(supply, T0 - timedelta(hours=1))
    await make_event(supply, T0 - timedelta(hours=9))
    await make_event(supply, T0 - timedelta(days=60))
    return supply


async def test_periods_use_civil_boundaries(
    test_db, user_id, make_supply, make_event,
):
    await _seed(make_supply, make_event)

    stats = await build_statistics(test_db, user_id, T0)

    assert stats["today"]["count"] == 2
    assert float(stats["today"]["cost"]) == 2.5
    assert stats["today"]["change"] == 100
    assert stats["week"]["count"] == 2
    assert stats["month"]["count"] == 2
    assert stats["month"]["change"] == 100


async def test_daily_trend_keys_are_civil_dates(
    test_db, user_id, make_supply, make_event,
):
    await _seed(make_supply, make_event)

    stats = await build_statistics(test_db, user_id, T0)

    assert [(d["date"], d["count"]) for d in stats["daily_trend"]] == [
        ("2023-12-31", 1),
        ("2024-01-01", 2),
    ]


async def test_hourly_distribution_covers_all_events(
    test_db, user_id, make_supply, make_event,
):
    await _seed(make_supply, make_event)

    stats = await build_statistics(test_db, user_id, T0)
    buckets = {b["hour"]: b["count"] for b in stats["hourly_distribution"]}

    assert len(buckets) == 12
    assert buckets["6-8"] == 1
    assert buckets["8-10"] == 2
    assert buckets["22-24"] == 1
    assert sum(buckets.values()) == 4


async def test_other_users_events_excluded(
    test_db, user_id, make_supply, make_event,
):
    other = uuid.uuid4()
    supply = await make_supply(owner=other)
    await make_event(supply, T0, owner=other)

    stats = await build_statistics(test_db, user_id, T0)

    assert stats["today"] == {"count": 0, "cost": 0, "change": 0}
    assert stats["daily_trend"] == []


async def test_statistics_route(client, auth_headers, make_supply, make_event):
    await _seed(make_supply, make_event)

    resp = await client.get("/api/v1/statistics", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["today"] == {"cost": 2.5, "count": 2, "change": 100}
    assert body["avg_daily"] == 0.1
    assert body["health"]["money_spent"] == 5.0
    assert len(body["hourly_distribution"]) == 12


async def test_health_summary_spans_civil_days(
    test_db, user_id, make_supply, make_event,
):
    await _seed(make_supply, make_event)

    stats = await build_statistics(test_db, user_id, T0)

    assert stats["health"]["total_count"] == 4
    assert stats["health"]["total_days"] == 60
    assert float(stats["health"]["money_spent"]) == 5.0
    assert stats["avg_daily"] == 0.1
    assert stats["health"]["health_score"] == 80


async def test_health_summary_without_history(test_db, user_id):
    stats = await build_statistics(test_db, user_id, T0)

    assert stats["avg_daily"] == 0.0
    assert stats["health"]["health_score"] == 100
    assert stats["health"]["total_days"] == 0


async def test_same_day_history_counts_one_day(
    test_db, user_id, make_supply, make_event,
):
    supply = await make_supply()
    for minutes in range(6):
        await make_event(supply, T0 - timedelta(minutes=minutes))

    stats = await build_statistics(test_db, user_id, T0)

    assert stats["health"]["total_days"] == 1
    assert stats["avg_daily"] == 6.0
    assert stats["health"]["health_score"] == 67
