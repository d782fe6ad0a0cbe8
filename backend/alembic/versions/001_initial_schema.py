"""Initial schema - profiles, supplies, events, violation_logs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("interval_enabled", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("interval_minutes", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "NOT interval_enabled OR interval_minutes BETWEEN 5 AND 1440",
            name="ck_profiles_interval_range",
        ),
    )

    op.create_table(
        "supplies",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("name", sa.String(100), nullable=False, server_default=""),
        sa.Column("brand", sa.String(100), nullable=True),
        sa.Column("total_units", sa.Integer, nullable=False),
        sa.Column("remaining_units", sa.Integer, nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(
            "remaining_units >= 0 AND remaining_units <= total_units",
            name="ck_supplies_remaining_in_range",
        ),
    )

    op.create_table(
        "events",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False),
        sa.Column("supply_id", UUID(as_uuid=True), sa.ForeignKey("supplies.id", ondelete="SET NULL"), nullable=True, index=True),
        sa.Column("occurred_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("unit_cost", sa.Numeric(12, 4), nullable=False),
        sa.Column("is_violation", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("violation_kind", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_events_user_occurred_at", "events", ["user_id", "occurred_at"])

    op.create_table(
        "violation_logs",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False),
        sa.Column(
            "event_id", UUID(as_uuid=True),
            sa.ForeignKey("events.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("kind", sa.String(30), nullable=False, server_default="forced_unlock"),
        sa.Column("expected_unlock_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("actual_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("interval_minutes", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_violation_logs_user_created_at", "violation_logs", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_violation_logs_user_created_at", table_name="violation_logs")
    op.drop_table("violation_logs")
    op.drop_index("ix_events_user_occurred_at", table_name="events")
    op.drop_table("events")
    op.drop_table("supplies")
    op.drop_table("profiles")
