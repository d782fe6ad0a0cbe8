"""Profile ORM - per-user interval lock configuration.

Invariants:
    - id is the caller's user id (issued by the external auth layer)
    - interval_minutes is NULL whenever interval_enabled is false
    - Only an explicit settings update mutates these columns
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from smoketrack.db.base import Base


class Profile(Base):
    """User profile row carrying the interval lock settings."""
    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(
            "NOT interval_enabled OR interval_minutes BETWEEN 5 AND 1440",
            name="ck_profiles_interval_range",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    interval_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    interval_minutes: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
