"""Smoking Record Routes - commit a consumption event, or delete one.

Invariants:
    - POST maps rejections to typed errors: 403 locked, 404 missing supply, 400 exhausted
    - A forced commit during a lock returns 201 with is_violation=true
    - DELETE restores one unit to the linked supply (best effort)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import get_clock, get_current_user_id
from smoketrack.core.clock import Clock
from smoketrack.core.domain_types import UserId
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.event import (
    EventCommitRequest, EventCommitResponse, EventResponse, SuccessResponse,
)
from smoketrack.services.event_commit import EventCommitEngine
from smoketrack.services.event_reversal import delete_event

router = APIRouter(prefix="/api/v1/smoking-records", tags=["smoking-records"])


@router.post(
    "", response_model=EventCommitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def commit_event(
    body: EventCommitRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    """Log one consumption event, honoring the interval lock."""
    result = await EventCommitEngine(db, clock).commit(
        user_id, body.supply_id, body.occurred_at, body.force,
    )
    return EventCommitResponse(
        data=EventResponse.from_event(result.event),
        is_violation=result.is_violation,
    )


@router.delete("/{event_id}", response_model=SuccessResponse)
async def remove_event(
    event_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_event(db, user_id, event_id)
    return SuccessResponse()
