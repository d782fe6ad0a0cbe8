"""Lock Status Service - fresh lock evaluation for one user, read from the store.

Invariants:
    - Nothing is cached: every call reads config and the latest event
    - The latest event is only read when the lock is enabled
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.domain_types import IntervalConfig, LockStatus
from smoketrack.core.lock_status import UNLOCKED, evaluate_lock
from smoketrack.models.event import Event
from smoketrack.services.interval_settings import load_interval_config


async def latest_event_at(db: AsyncSession, user_id: UUID) -> datetime | None:
    result = await db.execute(
        select(Event.occurred_at)
        .where(Event.user_id == user_id)
        .order_by(Event.occurred_at.desc())
        .limit(1),
    )
    return result.scalar_one_or_none()


async def evaluate_for_user(
    db: AsyncSession, user_id: UUID, config: IntervalConfig, now: datetime,
) -> LockStatus:
    """Evaluate the lock against an already-loaded config snapshot."""
    if not config.active:
        return UNLOCKED
    return evaluate_lock(config, await latest_event_at(db, user_id), now)


async def get_lock_status(
    db: AsyncSession, user_id: UUID, now: datetime,
) -> LockStatus:
    config = await load_interval_config(db, user_id)
    return await evaluate_for_user(db, user_id, config, now)
