"""Supply ORM - an inventory lot (a pack) with a depleting remaining count.

Invariants:
    - 0 <= remaining_units <= total_units (CHECK constraint)
    - remaining_units moves by one only through services/inventory.py; manual
      corrections go through services/supplies.py and core/supply_rules.py
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from smoketrack.db.base import Base


class Supply(Base):
    """Inventory lot owned by one user."""
    __tablename__ = "supplies"
    __table_args__ = (
        CheckConstraint(
            "remaining_units >= 0 AND remaining_units <= total_units",
            name="ck_supplies_remaining_in_range",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    brand: Mapped[str | None] = mapped_column(String(100), nullable=True)
    total_units: Mapped[int] = mapped_column(Integer, nullable=False)
    remaining_units: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
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
