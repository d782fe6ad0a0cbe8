"""Lock Status Evaluation - derives the cooldown state from config and last event.

Invariants:
    - evaluate_lock is PURE: no IO, no clock reads, no caching
    - `now` is a true UTC instant; elapsed time is never computed in civil time
    - remaining_minutes rounds up: a locked user never sees 0 minutes remaining
    - now >= unlock_at means unlocked (the boundary instant is free)
"""

import math
from datetime import datetime, timedelta

from smoketrack.core.civil_time import ensure_utc
from smoketrack.core.domain_types import IntervalConfig, LockStatus


UNLOCKED = LockStatus(is_locked=False)


def compute_unlock_at(last_event_at: datetime, interval_minutes: int) -> datetime:
    return ensure_utc(last_event_at) + timedelta(minutes=interval_minutes)


def remaining_minutes_until(unlock_at: datetime, now: datetime) -> int:
    """Whole minutes until unlock, rounded up; 0 once reached."""
    seconds = (ensure_utc(unlock_at) - ensure_utc(now)).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / 60)


def evaluate_lock(
    config: IntervalConfig, last_event_at: datetime | None, now: datetime,
) -> LockStatus:
    """Compute the lock state at `now`."""
    if not config.active or last_event_at is None:
        return UNLOCKED

    last = ensure_utc(last_event_at)
    unlock_at = compute_unlock_at(last, config.interval_minutes)
    if ensure_utc(now) >= unlock_at:
        return LockStatus(
            is_locked=False, last_event_at=last, unlock_at=unlock_at,
            remaining_minutes=0,
        )

    return LockStatus(
        is_locked=True,
        last_event_at=last,
        unlock_at=unlock_at,
        remaining_minutes=remaining_minutes_until(unlock_at, now),
    )
