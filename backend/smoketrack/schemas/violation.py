"""Violation Schemas - ledger records and summary."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from smoketrack.core.civil_time import ensure_utc
from smoketrack.models.violation_log import ViolationLog
from smoketrack.services.violation_ledger import ViolationSummary


class ViolationRecordResponse(BaseModel):
    id: UUID
    user_id: UUID
    event_id: UUID | None
    kind: str
    expected_unlock_at: datetime
    actual_at: datetime
    interval_minutes: int
    created_at: datetime

    @classmethod
    def from_record(cls, record: ViolationLog) -> "ViolationRecordResponse":
        return cls(
            id=record.id,
            user_id=record.user_id,
            event_id=record.event_id,
            kind=record.kind,
            expected_unlock_at=ensure_utc(record.expected_unlock_at),
            actual_at=ensure_utc(record.actual_at),
            interval_minutes=record.interval_minutes,
            created_at=ensure_utc(record.created_at),
        )


class ViolationSummaryResponse(BaseModel):
    total_count: int
    last_violation_time: datetime | None

    @classmethod
    def from_summary(cls, summary: ViolationSummary) -> "ViolationSummaryResponse":
        last = summary.last_violation_at
        return cls(
            total_count=summary.total_count,
            last_violation_time=ensure_utc(last) if last else None,
        )


class ViolationListResponse(BaseModel):
    data: list[ViolationRecordResponse]
    summary: ViolationSummaryResponse
