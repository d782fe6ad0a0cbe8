"""Inventory Consistency - keeps supply counts in step with accepted and deleted events.

Invariants:
    - This module is the only writer of supplies.remaining_units (no DB trigger)
    - Decrement is conditional (remaining_units > 0), increment is capped
      (remaining_units < total_units): the counter never leaves [0, total_units]
    - Best-effort variants never raise: failures are logged and reported as False

Design Decisions:
    - Single-statement UPDATE with a guard instead of read-modify-write, so two
      racing commits cannot both spend the last unit
    - Adjustments commit on their own, after the event write has committed
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.models.supply import Supply

logger = logging.getLogger(__name__)


async def decrement_supply(db: AsyncSession, supply_id: UUID) -> bool:
    """Spend one unit. False when nothing was left to spend."""
    result = await db.execute(
        update(Supply)
        .where(Supply.id == supply_id, Supply.remaining_units > 0)
        .values(
            remaining_units=Supply.remaining_units - 1,
            updated_at=datetime.now(timezone.utc),
        )
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return result.rowcount == 1


async def restore_supply(db: AsyncSession, supply_id: UUID) -> bool:
    """Give one unit back. False when the supply is already full or gone."""
    result = await db.execute(
        update(Supply)
        .where(
            Supply.id == supply_id,
            Supply.remaining_units < Supply.total_units,
        )
        .values(
            remaining_units=Supply.remaining_units + 1,
            updated_at=datetime.now(timezone.utc),
        )
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return result.rowcount == 1


async def decrement_supply_best_effort(db: AsyncSession, supply_id: UUID) -> bool:
    """Decrement after an event commit; log instead of failing the request."""
    try:
        applied = await decrement_supply(db, supply_id)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Supply decrement failed after event commit: {e}",
            extra={"supply_id": supply_id}, exc_info=True,
        )
        return False
    if not applied:
        logger.warning(
            "Supply decrement skipped: no remaining units",
            extra={"supply_id": supply_id},
        )
    return applied


async def restore_supply_best_effort(db: AsyncSession, supply_id: UUID) -> bool:
    """Increment after an event deletion; log instead of failing the request."""
    try:
        applied = await restore_supply(db, supply_id)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Supply restore failed after event deletion: {e}",
            extra={"supply_id": supply_id}, exc_info=True,
        )
        return False
    if not applied:
        logger.warning(
            "Supply restore skipped: supply full or missing",
            extra={"supply_id": supply_id},
        )
    return applied
