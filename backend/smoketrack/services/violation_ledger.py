"""Violation Ledger - append-only store of forced-unlock records.

Invariants:
    - append_violation only inserts; no update or delete path exists
    - list_violations is newest first and bounded by limit
    - summarize_violations counts every record, independent of any list limit
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.domain_types import ViolationKind
from smoketrack.models.violation_log import ViolationLog


DEFAULT_LIMIT: int = 50


@dataclass(frozen=True)
class ViolationSummary:
    total_count: int
    last_violation_at: datetime | None


def append_violation(
    db: AsyncSession,
    *,
    user_id: UUID,
    event_id: UUID | None,
    expected_unlock_at: datetime,
    actual_at: datetime,
    interval_minutes: int,
    created_at: datetime,
) -> ViolationLog:
    """Stage a violation record on the caller's transaction (caller commits)."""
    record = ViolationLog(
        user_id=user_id,
        event_id=event_id,
        kind=ViolationKind.FORCED_UNLOCK.value,
        expected_unlock_at=expected_unlock_at,
        actual_at=actual_at,
        interval_minutes=interval_minutes,
        created_at=created_at,
    )
    db.add(record)
    return record


async def list_violations(
    db: AsyncSession, user_id: UUID, limit: int = DEFAULT_LIMIT,
) -> list[ViolationLog]:
    result = await db.execute(
        select(ViolationLog)
        .where(ViolationLog.user_id == user_id)
        .order_by(ViolationLog.created_at.desc(), ViolationLog.id.desc())
        .limit(limit),
    )
    return list(result.scalars().all())


async def summarize_violations(db: AsyncSession, user_id: UUID) -> ViolationSummary:
    result = await db.execute(
        select(func.count(ViolationLog.id), func.max(ViolationLog.created_at))
        .where(ViolationLog.user_id == user_id),
    )
    total, last = result.one()
    return ViolationSummary(total_count=total or 0, last_violation_at=last)
