"""Event Commit Engine - accepts, rejects, or records-as-violation a new consumption event.

Invariants:
    - Every rejection (locked, not found, exhausted) happens before any write
    - Event and its ViolationLog commit in the same transaction
    - The supply decrement runs after that commit and is best effort: its failure
      is logged and the committed event is still returned as success
    - The lock is evaluated against one config snapshot; the violation record
      stores that snapshot's interval_minutes and unlock_at

Design Decisions:
    - Decision is delegated to core/commit_decision.py (pure); this class only
      loads inputs, maps reject outcomes to typed errors, and applies writes
    - Clock injected so the state machine is deterministic under test
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.clock import Clock
from smoketrack.core.commit_decision import (
    CommitDecision, compute_unit_cost, decide_commit, resolve_occurred_at,
)
from smoketrack.core.domain_types import CommitOutcome, SupplySnapshot
from smoketrack.core.errors import (
    ErrorContext, LockedError, ResourceNotFoundError, SupplyExhaustedError,
)
from smoketrack.models.event import Event
from smoketrack.models.supply import Supply
from smoketrack.services.interval_settings import load_interval_config
from smoketrack.services.inventory import decrement_supply_best_effort
from smoketrack.services.lock_status import evaluate_for_user
from smoketrack.services.violation_ledger import append_violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitResult:
    event: Event
    is_violation: bool
    inventory_adjusted: bool


class EventCommitEngine:
    """Commit pipeline for one request, bound to a DB session and a clock."""

    def __init__(self, db: AsyncSession, clock: Clock):
        self.db = db
        self.clock = clock

    async def commit(
        self,
        user_id: UUID,
        supply_id: UUID,
        occurred_at: datetime | None = None,
        force: bool = False,
    ) -> CommitResult:
        now = self.clock.now()
        config = await load_interval_config(self.db, user_id)
        lock = await evaluate_for_user(self.db, user_id, config, now)
        supply = await self._get_supply(user_id, supply_id)

        decision = decide_commit(lock, force, self._snapshot(supply))
        self._raise_if_rejected(decision, user_id, supply_id)

        event = Event(
            user_id=user_id,
            supply_id=supply.id,
            occurred_at=resolve_occurred_at(occurred_at, now),
            unit_cost=compute_unit_cost(supply.unit_price, supply.total_units),
            is_violation=decision.is_violation,
            violation_kind=(
                decision.violation_kind.value if decision.violation_kind else None
            ),
            created_at=now,
        )
        self.db.add(event)
        await self.db.flush()

        if decision.is_violation:
            append_violation(
                self.db,
                user_id=user_id,
                event_id=event.id,
                expected_unlock_at=lock.unlock_at,
                actual_at=event.occurred_at,
                interval_minutes=config.interval_minutes,
                created_at=now,
            )
        await self.db.commit()

        if decision.is_violation:
            logger.info(
                "Forced unlock recorded as violation",
                extra={
                    "user_id": user_id, "event_id": event.id,
                    "remaining_minutes": lock.remaining_minutes,
                },
            )

        adjusted = await decrement_supply_best_effort(self.db, supply.id)
        return CommitResult(
            event=event,
            is_violation=decision.is_violation,
            inventory_adjusted=adjusted,
        )

    async def _get_supply(self, user_id: UUID, supply_id: UUID) -> Supply | None:
        result = await self.db.execute(
            select(Supply)
            .where(Supply.id == supply_id)
            .where(Supply.user_id == user_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _snapshot(supply: Supply | None) -> SupplySnapshot | None:
        if supply is None:
            return None
        return SupplySnapshot(
            total_units=supply.total_units,
            remaining_units=supply.remaining_units,
        )

    @staticmethod
    def _raise_if_rejected(
        decision: CommitDecision, user_id: UUID, supply_id: UUID,
    ) -> None:
        context = ErrorContext(user_id=str(user_id), supply_id=str(supply_id))
        if decision.outcome is CommitOutcome.REJECT_LOCKED:
            logger.info(
                "Commit rejected: interval lock active",
                extra={
                    "user_id": user_id,
                    "remaining_minutes": decision.lock.remaining_minutes,
                },
            )
            raise LockedError(
                decision.lock.unlock_at, decision.lock.remaining_minutes, context,
            )
        if decision.outcome is CommitOutcome.REJECT_NOT_FOUND:
            raise ResourceNotFoundError("Supply", str(supply_id), context)
        if decision.outcome is CommitOutcome.REJECT_EXHAUSTED:
            raise SupplyExhaustedError(str(supply_id), context)
