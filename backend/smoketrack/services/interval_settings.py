"""Interval Settings - load and update the per-user interval lock configuration.

Invariants:
    - A user without a profile row has the lock disabled
    - Updates go through IntervalConfig.validated (range [5, 1440] when enabled)
    - The system never disables the lock on its own
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.domain_types import IntervalConfig
from smoketrack.models.profile import Profile

logger = logging.getLogger(__name__)


async def load_interval_config(db: AsyncSession, user_id: UUID) -> IntervalConfig:
    """Current config for the user; disabled when no profile exists."""
    result = await db.execute(
        select(Profile.interval_enabled, Profile.interval_minutes)
        .where(Profile.id == user_id),
    )
    row = result.one_or_none()
    if row is None:
        return IntervalConfig()
    return IntervalConfig(enabled=row.interval_enabled, interval_minutes=row.interval_minutes)


async def update_interval_config(
    db: AsyncSession, user_id: UUID, enabled: bool, minutes: int | None,
) -> IntervalConfig:
    """Validate and persist new settings, creating the profile if needed."""
    config = IntervalConfig.validated(enabled, minutes)

    profile = await db.get(Profile, user_id)
    if profile is None:
        profile = Profile(id=user_id)
        db.add(profile)
    profile.interval_enabled = config.enabled
    profile.interval_minutes = config.interval_minutes
    await db.commit()

    logger.info(
        f"Interval settings updated: enabled={config.enabled} "
        f"minutes={config.interval_minutes}",
        extra={"user_id": user_id, "interval_minutes": config.interval_minutes},
    )
    return config
