"""Request schemas - aliases, UTC normalization and strict booleans."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from smoketrack.schemas.event import EventCommitRequest
from smoketrack.schemas.interval import IntervalSettingsUpdate


def test_commit_request_accepts_aliases():
    supply_id = uuid.uuid4()
    req = EventCommitRequest.model_validate(
        {"packId": str(supply_id), "smokedAt": "2024-01-01T08:00:00+08:00"},
    )

    assert req.supply_id == supply_id
    assert req.occurred_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert req.occurred_at.utcoffset() == timedelta(0)
    assert req.force is False


def test_naive_occurred_at_read_as_utc():
    req = EventCommitRequest.model_validate(
        {"supply_id": str(uuid.uuid4()), "occurred_at": "2024-01-01T00:00:00"},
    )
    assert req.occurred_at.tzinfo is not None
    assert req.occurred_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_occurred_at_optional():
    req = EventCommitRequest.model_validate({"supply_id": str(uuid.uuid4())})
    assert req.occurred_at is None


def test_supply_id_must_be_uuid():
    with pytest.raises(ValidationError):
        EventCommitRequest.model_validate({"supply_id": "pack-1"})


@pytest.mark.parametrize("value", ["yes", 1, "true"])
def test_interval_enabled_is_strict(value):
    with pytest.raises(ValidationError):
        IntervalSettingsUpdate.model_validate({"enabled": value, "minutes": 30})


def test_interval_minutes_optional():
    body = IntervalSettingsUpdate.model_validate({"enabled": False})
    assert body.minutes is None


@pytest.mark.parametrize("value", ["yes", "true", 1])
def test_force_is_strict(value):
    with pytest.raises(ValidationError):
        EventCommitRequest.model_validate(
            {"supply_id": str(uuid.uuid4()), "force": value},
        )
