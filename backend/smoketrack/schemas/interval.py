"""Interval Schemas - settings payloads and the lock-status response.

Invariants:
    - IntervalSettingsUpdate.enabled must be a real boolean (no "yes"/1 coercion)
    - Range checks live in IntervalConfig.validated, not here
    - LockStatusResponse.remaining_minutes is always an integer
"""

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool

from smoketrack.core.civil_time import ensure_utc
from smoketrack.core.domain_types import IntervalConfig, LockStatus


class IntervalSettingsUpdate(BaseModel):
    """PUT body for interval settings."""
    enabled: StrictBool
    minutes: int | None = Field(None)


class IntervalSettingsResponse(BaseModel):
    enabled: bool
    minutes: int | None

    @classmethod
    def from_config(cls, config: IntervalConfig) -> "IntervalSettingsResponse":
        return cls(enabled=config.enabled, minutes=config.interval_minutes)


class LockStatusResponse(BaseModel):
    """Lock status in the public field names."""
    is_locked: bool
    last_smoke_time: datetime | None
    unlock_time: datetime | None
    remaining_minutes: int

    @classmethod
    def from_status(cls, status: LockStatus) -> "LockStatusResponse":
        return cls(
            is_locked=status.is_locked,
            last_smoke_time=(
                ensure_utc(status.last_event_at) if status.last_event_at else None
            ),
            unlock_time=ensure_utc(status.unlock_at) if status.unlock_at else None,
            remaining_minutes=status.remaining_minutes,
        )
