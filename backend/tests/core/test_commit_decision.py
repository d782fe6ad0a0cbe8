"""Commit Decision - tests for the pure accept/reject/violation decision.

Tests cover:
    - unlocked commits are accepted without violation
    - locked commits without force are rejected
    - locked commits with force are accepted as violations
    - exhausted supplies are rejected in every lock state
    - missing supplies are rejected
    - unit cost and occurred_at resolution
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from smoketrack.core.commit_decision import (
    compute_unit_cost,
    decide_commit,
    resolve_occurred_at,
)
from smoketrack.core.domain_types import (
    CommitOutcome,
    LockStatus,
    SupplySnapshot,
    ViolationKind,
)


NOW = datetime(2024, 1, 1, 0, 20, tzinfo=timezone.utc)
LOCKED = LockStatus(
    is_locked=True,
    last_event_at=NOW - timedelta(minutes=20),
    unlock_at=NOW + timedelta(minutes=10),
    remaining_minutes=10,
)
UNLOCKED = LockStatus(is_locked=False)
FULL = SupplySnapshot(total_units=20, remaining_units=20)
EMPTY = SupplySnapshot(total_units=20, remaining_units=0)


def test_unlocked_commit_is_accepted():
    decision = decide_commit(UNLOCKED, False, FULL)
    assert decision.outcome is CommitOutcome.ACCEPT
    assert decision.accepted
    assert not decision.is_violation
    assert decision.violation_kind is None


def test_unlocked_forced_commit_is_not_a_violation():
    decision = decide_commit(UNLOCKED, True, FULL)
    assert decision.outcome is CommitOutcome.ACCEPT
    assert not decision.is_violation


def test_locked_commit_without_force_is_rejected():
    decision = decide_commit(LOCKED, False, FULL)
    assert decision.outcome is CommitOutcome.REJECT_LOCKED
    assert not decision.accepted
    assert decision.lock is LOCKED


def test_locked_commit_with_force_is_violation():
    decision = decide_commit(LOCKED, True, FULL)
    assert decision.outcome is CommitOutcome.ACCEPT_AS_VIOLATION
    assert decision.accepted
    assert decision.is_violation
    assert decision.violation_kind is ViolationKind.FORCED_UNLOCK


@pytest.mark.parametrize("lock", [UNLOCKED, LOCKED])
@pytest.mark.parametrize("force", [False, True])
def test_exhausted_supply_rejected_in_any_lock_state(lock, force):
    decision = decide_commit(lock, force, EMPTY)
    assert decision.outcome is CommitOutcome.REJECT_EXHAUSTED


def test_missing_supply_rejected_when_unlocked():
    assert decide_commit(UNLOCKED, False, None).outcome is CommitOutcome.REJECT_NOT_FOUND


def test_missing_supply_reports_lock_first():
    assert decide_commit(LOCKED, False, None).outcome is CommitOutcome.REJECT_LOCKED


def test_unit_cost_divides_price_by_units():
    assert compute_unit_cost(Decimal("25.00"), 20) == Decimal("1.2500")


def test_unit_cost_rounds_to_four_places():
    assert compute_unit_cost(Decimal("10.00"), 3) == Decimal("3.3333")


def test_unit_cost_zero_units_is_zero():
    assert compute_unit_cost(Decimal("10.00"), 0) == Decimal("0")


def test_resolve_occurred_at_defaults_to_now():
    assert resolve_occurred_at(None, NOW) == NOW


def test_resolve_occurred_at_keeps_caller_value_in_utc():
    plus_eight = timezone(timedelta(hours=8))
    requested = datetime(2024, 1, 1, 8, tzinfo=plus_eight)
    resolved = resolve_occurred_at(requested, NOW)
    assert resolved == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert resolved.tzinfo is timezone.utc
