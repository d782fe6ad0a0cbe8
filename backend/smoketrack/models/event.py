"""Event ORM - one logged consumption instance.

Invariants:
    - occurred_at is stored in UTC
    - is_violation implies violation_kind == "forced_unlock"
    - supply_id references (does not own) a Supply of the same user; it becomes
      NULL when that supply is deleted, so history and the lock survive

Design Decisions:
    - (user_id, occurred_at) index: the latest-event lookup runs on every lock check
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from smoketrack.db.base import Base


class Event(Base):
    """Consumption event (a smoking record)."""
    __tablename__ = "events"
    __table_args__ = (
        Index("ix_events_user_occurred_at", "user_id", "occurred_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    supply_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("supplies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    unit_cost: Mapped[Decimal] = mapped_column(
        Numeric(12, 4), nullable=False,
    )
    is_violation: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    violation_kind: Mapped[str | None] = mapped_column(
        String(30), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
