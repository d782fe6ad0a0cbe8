"""Event Schemas - commit request and event responses.

Invariants:
    - supply_id is a UUID; `packId` / `smokedAt` accepted as aliases
    - occurred_at without an offset is read as UTC
    - Returned instants are UTC-aware
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field, StrictBool, field_validator

from smoketrack.core.civil_time import ensure_utc
from smoketrack.models.event import Event


class EventCommitRequest(BaseModel):
    """POST body for a new consumption event."""
    supply_id: UUID = Field(validation_alias=AliasChoices("supply_id", "packId"))
    occurred_at: datetime | None = Field(
        None, validation_alias=AliasChoices("occurred_at", "smokedAt"),
    )
    force: StrictBool = False

    @field_validator("occurred_at")
    @classmethod
    def normalize_occurred_at(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None


class EventResponse(BaseModel):
    id: UUID
    user_id: UUID
    supply_id: UUID | None
    occurred_at: datetime
    unit_cost: float
    is_violation: bool
    violation_kind: str | None
    created_at: datetime

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            user_id=event.user_id,
            supply_id=event.supply_id,
            occurred_at=ensure_utc(event.occurred_at),
            unit_cost=float(event.unit_cost),
            is_violation=event.is_violation,
            violation_kind=event.violation_kind,
            created_at=ensure_utc(event.created_at),
        )


class EventCommitResponse(BaseModel):
    success: bool = True
    data: EventResponse
    is_violation: bool


class SuccessResponse(BaseModel):
    success: bool = True
