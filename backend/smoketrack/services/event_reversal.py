"""Event Reversal - deletes a user's event and gives its unit back to the supply.

Invariants:
    - Events owned by another user are reported as not found
    - The delete commits first; the supply restore is a best-effort follow-up
    - Violation records are left untouched (their event_id becomes NULL)
    - Events whose supply was deleted are removed without any restore
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.errors import ErrorContext, ResourceNotFoundError
from smoketrack.models.event import Event
from smoketrack.services.inventory import restore_supply_best_effort

logger = logging.getLogger(__name__)


async def delete_event(db: AsyncSession, user_id: UUID, event_id: UUID) -> bool:
    """Delete the event; returns whether the supply count was restored."""
    result = await db.execute(
        select(Event)
        .where(Event.id == event_id)
        .where(Event.user_id == user_id),
    )
    event = result.scalar_one_or_none()
    if event is None:
        raise ResourceNotFoundError(
            "Event", str(event_id),
            ErrorContext(user_id=str(user_id), event_id=str(event_id)),
        )

    supply_id = event.supply_id
    await db.delete(event)
    await db.commit()
    logger.info("Event deleted", extra={"user_id": user_id, "event_id": event_id})

    if supply_id is None:
        return False
    return await restore_supply_best_effort(db, supply_id)
