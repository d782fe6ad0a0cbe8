"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, SupplyId, EventId wrap UUIDs
    - IntervalConfig with enabled=True always carries minutes in [5, 1440]
    - LockStatus is derived, never persisted

Design Decisions:
    - NewType for identities: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Frozen dataclasses for value objects passed between core and shell
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType
from uuid import UUID

from smoketrack.core.errors import InvalidIntervalError


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
SupplyId = NewType("SupplyId", UUID)
EventId = NewType("EventId", UUID)


# ─── Constants ───────────────────────────────────────────────────

MIN_INTERVAL_MINUTES: int = 5
MAX_INTERVAL_MINUTES: int = 1440


# ─── Enums ───────────────────────────────────────────────────────

class ViolationKind(str, Enum):
    """Kinds of recorded lock violations."""
    FORCED_UNLOCK = "forced_unlock"


class CommitOutcome(str, Enum):
    """Result of the commit decision for a single request."""
    ACCEPT = "accept"
    ACCEPT_AS_VIOLATION = "accept_as_violation"
    REJECT_LOCKED = "reject_locked"
    REJECT_EXHAUSTED = "reject_exhausted"
    REJECT_NOT_FOUND = "reject_not_found"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class IntervalConfig:
    """Per-user interval lock configuration."""
    enabled: bool = False
    interval_minutes: int | None = None

    @classmethod
    def validated(cls, enabled: bool, interval_minutes: int | None) -> "IntervalConfig":
        """Build a config from user input; minutes are dropped when disabled."""
        if not enabled:
            return cls(enabled=False, interval_minutes=None)
        if interval_minutes is None:
            raise InvalidIntervalError(
                "interval minutes are required when the lock is enabled",
            )
        if not MIN_INTERVAL_MINUTES <= interval_minutes <= MAX_INTERVAL_MINUTES:
            raise InvalidIntervalError(
                f"interval minutes must be between {MIN_INTERVAL_MINUTES} "
                f"and {MAX_INTERVAL_MINUTES}",
            )
        return cls(enabled=True, interval_minutes=interval_minutes)

    @property
    def active(self) -> bool:
        return self.enabled and bool(self.interval_minutes)


@dataclass(frozen=True)
class LockStatus:
    """Current cooldown state for one user."""
    is_locked: bool
    last_event_at: datetime | None = None
    unlock_at: datetime | None = None
    remaining_minutes: int = 0


@dataclass(frozen=True)
class SupplySnapshot:
    """Read-only view of a supply at decision time."""
    total_units: int
    remaining_units: int
