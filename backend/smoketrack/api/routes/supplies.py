"""Supply Routes - CRUD over the caller's inventory lots.

Invariants:
    - Another user's supply answers 404, same as a missing one
    - Invalid counts or price answer 400 (INVALID_SUPPLY) before any write
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.api.dependencies import get_current_user_id
from smoketrack.core.domain_types import UserId
from smoketrack.infrastructure.database import get_db
from smoketrack.schemas.event import SuccessResponse
from smoketrack.schemas.supply import (
    SupplyCreate, SupplyEnvelope, SupplyListResponse, SupplyResponse, SupplyUpdate,
)
from smoketrack.services import supplies

router = APIRouter(prefix="/api/v1/supplies", tags=["supplies"])


@router.get("", response_model=SupplyListResponse)
async def read_supplies(
    in_stock: bool = Query(False),
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Caller's supplies, newest first; `in_stock=true` hides empty ones."""
    rows = await supplies.list_supplies(db, user_id, in_stock_only=in_stock)
    return SupplyListResponse(data=[SupplyResponse.from_supply(s) for s in rows])


@router.post(
    "", response_model=SupplyEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_supply(
    body: SupplyCreate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    supply = await supplies.create_supply(
        db, user_id,
        name=body.name, brand=body.brand,
        total_units=body.total_units, unit_price=body.unit_price,
    )
    return SupplyEnvelope(data=SupplyResponse.from_supply(supply))


@router.get("/{supply_id}", response_model=SupplyEnvelope)
async def read_supply(
    supply_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    supply = await supplies.get_supply(db, user_id, supply_id)
    return SupplyEnvelope(data=SupplyResponse.from_supply(supply))


@router.patch("/{supply_id}", response_model=SupplyEnvelope)
async def edit_supply(
    supply_id: UUID,
    body: SupplyUpdate,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    supply = await supplies.update_supply(db, user_id, supply_id, **body.changes())
    return SupplyEnvelope(data=SupplyResponse.from_supply(supply))


@router.delete("/{supply_id}", response_model=SuccessResponse)
async def remove_supply(
    supply_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await supplies.delete_supply(db, user_id, supply_id)
    return SuccessResponse()
