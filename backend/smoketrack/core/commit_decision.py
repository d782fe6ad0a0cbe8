"""Commit Decision - decides accept / reject / accept-as-violation for one event.

Invariants:
    - decide_commit is PURE: returns a descriptor, performs no writes
    - is_violation is exactly (locked AND force)
    - Every reject outcome is decided before the shell writes anything
    - An exhausted supply is reported as exhausted in every lock state

Design Decisions:
    - Shell (services/event_commit.py) maps reject outcomes to typed errors
    - unit cost kept as Decimal, quantized to 4 places (matches the events.unit_cost column)
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from smoketrack.core.civil_time import ensure_utc
from smoketrack.core.domain_types import (
    CommitOutcome, LockStatus, SupplySnapshot, ViolationKind,
)


UNIT_COST_QUANTUM = Decimal("0.0001")


@dataclass(frozen=True)
class CommitDecision:
    """Outcome plus the lock snapshot it was decided against."""
    outcome: CommitOutcome
    lock: LockStatus

    @property
    def accepted(self) -> bool:
        return self.outcome in (
            CommitOutcome.ACCEPT, CommitOutcome.ACCEPT_AS_VIOLATION,
        )

    @property
    def is_violation(self) -> bool:
        return self.outcome is CommitOutcome.ACCEPT_AS_VIOLATION

    @property
    def violation_kind(self) -> ViolationKind | None:
        return ViolationKind.FORCED_UNLOCK if self.is_violation else None


def decide_commit(
    lock: LockStatus, force: bool, supply: SupplySnapshot | None,
) -> CommitDecision:
    """Decide what happens to a commit request. Pure, no writes."""
    if supply is not None and supply.remaining_units <= 0:
        return CommitDecision(CommitOutcome.REJECT_EXHAUSTED, lock)
    if lock.is_locked and not force:
        return CommitDecision(CommitOutcome.REJECT_LOCKED, lock)
    if supply is None:
        return CommitDecision(CommitOutcome.REJECT_NOT_FOUND, lock)
    if lock.is_locked:
        return CommitDecision(CommitOutcome.ACCEPT_AS_VIOLATION, lock)
    return CommitDecision(CommitOutcome.ACCEPT, lock)


def compute_unit_cost(unit_price: Decimal, total_units: int) -> Decimal:
    """Price of a single unit of the supply."""
    if total_units <= 0:
        return Decimal("0")
    return (Decimal(unit_price) / Decimal(total_units)).quantize(
        UNIT_COST_QUANTUM, rounding=ROUND_HALF_UP,
    )


def resolve_occurred_at(requested: datetime | None, now: datetime) -> datetime:
    """Caller-supplied instant in UTC, else now."""
    return ensure_utc(requested) if requested is not None else ensure_utc(now)
