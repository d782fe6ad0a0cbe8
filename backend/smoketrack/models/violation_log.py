"""ViolationLog ORM - immutable audit entry for a forced unlock.

Invariants:
    - Written once per forced commit during an active lock, never updated
    - event_id survives as NULL if the event is later deleted (ON DELETE SET NULL)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from smoketrack.db.base import Base


class ViolationLog(Base):
    """Violation record."""
    __tablename__ = "violation_logs"
    __table_args__ = (
        Index("ix_violation_logs_user_created_at", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    event_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("events.id", ondelete="SET NULL"),
        nullable=True,
    )
    kind: Mapped[str] = mapped_column(
        String(30), nullable=False, default="forced_unlock",
    )
    expected_unlock_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    actual_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    interval_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
