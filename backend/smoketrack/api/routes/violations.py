"""Violation Routes - paginated violation history plus summary.

Invariants:
    - data is newest first, at most `limit` records
    - summary.total_count counts all records, not just the returned page
    - limit bounds come from settings at request time
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import get_current_user_id, get_violation_limit
from smoketrack.core.domain_types import UserId
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.violation import (
    ViolationListResponse, ViolationRecordResponse, ViolationSummaryResponse,
)
from smoketrack.services.violation_ledger import (
    list_violations, summarize_violations,
)

router = APIRouter(prefix="/api/v1/violations", tags=["violations"])


@router.get("", response_model=ViolationListResponse)
async def read_violations(
    limit: int = Depends(get_violation_limit),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    records = await list_violations(db, user_id, limit)
    summary = await summarize_violations(db, user_id)
    return ViolationListResponse(
        data=[ViolationRecordResponse.from_record(r) for r in records],
        summary=ViolationSummaryResponse.from_summary(summary),
    )
