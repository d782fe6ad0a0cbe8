"""Supply routes - create, list, read, edit and delete, scoped to the caller.

Tests cover:
    - a created supply starts full and can be committed against
    - invalid counts or price are rejected before any write
    - another user's supply is not found on every operation
    - deleting a supply keeps its events and the interval lock
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from smoketrack.models.event import Event
from smoketrack.models.supply import Supply


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)

NEW_PACK = {"name": "Blue", "brand": "Acme", "total_units": 20, "unit_price": "25.00"}


async def test_create_supply_starts_full(client, auth_headers, user_id, fetch):
    resp = await client.post("/api/v1/supplies", json=NEW_PACK, headers=auth_headers)

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["remaining_units"] == 20
    assert data["total_units"] == 20
    assert data["unit_price"] == 25.0
    assert data["brand"] == "Acme"

    stored = await fetch(Supply, uuid.UUID(data["id"]))
    assert stored.user_id == user_id
    assert stored.name == "Blue"


async def test_created_supply_is_committable(client, auth_headers, fetch):
    created = await client.post(
        "/api/v1/supplies",
        json={"name": "Red", "total_count": 10, "price": 12.5},
        headers=auth_headers,
    )
    supply_id = created.json()["data"]["id"]

    resp = await client.post(
        "/api/v1/smoking-records", json={"supply_id": supply_id}, headers=auth_headers,
    )

    assert resp.status_code == 201
    assert resp.json()["data"]["unit_cost"] == 1.25
    assert (await fetch(Supply, uuid.UUID(supply_id))).remaining_units == 9


@pytest.mark.parametrize("field,value", [
    ("total_units", 0),
    ("total_units", -5),
    ("unit_price", "0"),
    ("unit_price", "-1"),
])
async def test_create_rejects_invalid_values(
    client, auth_headers, test_session_factory, field, value,
):
    resp = await client.post(
        "/api/v1/supplies", json={**NEW_PACK, field: value}, headers=auth_headers,
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_SUPPLY"
    async with test_session_factory() as s:
        assert (await s.execute(select(Supply))).scalars().all() == []


async def test_create_requires_name(client, auth_headers):
    body = {k: v for k, v in NEW_PACK.items() if k != "name"}
    resp = await client.post("/api/v1/supplies", json=body, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_only_callers_supplies(client, auth_headers, make_supply):
    mine = await make_supply(remaining=0)
    await make_supply(owner=uuid.uuid4())

    resp = await client.get("/api/v1/supplies", headers=auth_headers)
    assert [s["id"] for s in resp.json()["data"]] == [str(mine.id)]

    in_stock = await client.get(
        "/api/v1/supplies", params={"in_stock": "true"}, headers=auth_headers,
    )
    assert in_stock.json()["data"] == []


async def test_read_supply(client, auth_headers, make_supply):
    supply = await make_supply(total=20, remaining=7)

    resp = await client.get(f"/api/v1/supplies/{supply.id}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["remaining_units"] == 7


async def test_patch_updates_only_sent_fields(client, auth_headers, make_supply, fetch):
    supply = await make_supply(total=20, remaining=15)

    resp = await client.patch(
        f"/api/v1/supplies/{supply.id}",
        json={"brand": None, "total_units": 10}, headers=auth_headers,
    )

    assert resp.status_code == 200
    stored = await fetch(Supply, supply.id)
    assert stored.brand is None
    assert stored.name == "Test pack"
    assert (stored.total_units, stored.remaining_units) == (10, 10)


async def test_patch_rejects_remaining_above_total(
    client, auth_headers, make_supply, fetch,
):
    supply = await make_supply(total=20, remaining=15)

    resp = await client.patch(
        f"/api/v1/supplies/{supply.id}",
        json={"remaining_count": 21}, headers=auth_headers,
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_SUPPLY"
    assert (await fetch(Supply, supply.id)).remaining_units == 15


async def test_patch_rejects_null_name(client, auth_headers, make_supply):
    supply = await make_supply()
    resp = await client.patch(
        f"/api/v1/supplies/{supply.id}", json={"name": None}, headers=auth_headers,
    )
    assert resp.status_code == 400


@pytest.mark.parametrize("method,body", [
    ("get", None),
    ("patch", {"name": "Mine now"}),
    ("delete", None),
])
async def test_other_users_supply_not_found(
    client, auth_headers, make_supply, fetch, method, body,
):
    supply = await make_supply(owner=uuid.uuid4())
    kwargs = {"headers": auth_headers}
    if body is not None:
        kwargs["json"] = body

    resp = await getattr(client, method)(f"/api/v1/supplies/{supply.id}", **kwargs)

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
    stored = await fetch(Supply, supply.id)
    assert stored is not None
    assert stored.name == "Test pack"


async def test_delete_keeps_events_and_lock(
    client, auth_headers, clock, make_supply, set_interval, make_event,
    test_session_factory, fetch,
):
    await set_interval(True, 30)
    supply = await make_supply()
    event = await make_event(supply, T0)
    clock.advance(minutes=10)

    resp = await client.delete(f"/api/v1/supplies/{supply.id}", headers=auth_headers)

    assert resp.status_code == 200
    assert await fetch(Supply, supply.id) is None
    async with test_session_factory() as s:
        kept = (await s.execute(select(Event))).scalars().all()
    assert [e.id for e in kept] == [event.id]
    assert kept[0].supply_id is None

    lock = await client.get(
        "/api/v1/interval-settings/lock-status", headers=auth_headers,
    )
    assert lock.json()["is_locked"] is True
    assert lock.json()["remaining_minutes"] == 20


async def test_delete_event_of_deleted_supply(
    client, auth_headers, make_supply, make_event,
):
    supply = await make_supply()
    event = await make_event(supply, T0 - timedelta(hours=1))
    await client.delete(f"/api/v1/supplies/{supply.id}", headers=auth_headers)

    resp = await client.delete(
        f"/api/v1/smoking-records/{event.id}", headers=auth_headers,
    )

    assert resp.status_code == 200
