"""Supplies - create, list, edit and delete a user's inventory lots.

Invariants:
    - Every read and write is scoped by user_id; another user's supply is not found
    - Counts and price pass through core/supply_rules.py before any write
    - Deleting a supply keeps its events (supply_id becomes NULL), so the
      interval lock and statistics are unaffected
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from smoketrack.core.domain_types import SupplySnapshot
from smoketrack.core.errors import ErrorContext, ResourceNotFoundError
from smoketrack.core.supply_rules import check_price, edited_counts, new_supply_counts
from smoketrack.models.event import Event
from smoketrack.models.supply import Supply

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "brand", "total_units", "remaining_units", "unit_price")


async def list_supplies(
    db: AsyncSession, user_id: UUID, in_stock_only: bool = False,
) -> list[Supply]:
    query = select(Supply).where(Supply.user_id == user_id)
    if in_stock_only:
        query = query.where(Supply.remaining_units > 0)
    result = await db.execute(
        query.order_by(Supply.created_at.desc(), Supply.id),
    )
    return list(result.scalars().all())


async def get_supply(db: AsyncSession, user_id: UUID, supply_id: UUID) -> Supply:
    result = await db.execute(
        select(Supply)
        .where(Supply.id == supply_id)
        .where(Supply.user_id == user_id)
        .execution_options(populate_existing=True),
    )
    supply = result.scalar_one_or_none()
    if supply is None:
        raise ResourceNotFoundError(
            "Supply", str(supply_id),
            ErrorContext(user_id=str(user_id), supply_id=str(supply_id)),
        )
    return supply


async def create_supply(
    db: AsyncSession,
    user_id: UUID,
    *,
    name: str,
    total_units: int,
    unit_price: Decimal,
    brand: str | None = None,
) -> Supply:
    counts = new_supply_counts(total_units)
    supply = Supply(
        user_id=user_id,
        name=name,
        brand=brand,
        total_units=counts.total_units,
        remaining_units=counts.remaining_units,
        unit_price=check_price(unit_price),
    )
    db.add(supply)
    await db.commit()
    logger.info(
        f"Supply created: {counts.total_units} units",
        extra={"user_id": user_id, "supply_id": supply.id},
    )
    return supply


async def update_supply(
    db: AsyncSession, user_id: UUID, supply_id: UUID, **changes,
) -> Supply:
    """Apply a partial edit; only keys present in `changes` are touched."""
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Not editable: {sorted(unknown)}")

    supply = await get_supply(db, user_id, supply_id)
    counts = edited_counts(
        SupplySnapshot(supply.total_units, supply.remaining_units),
        total_units=changes.get("total_units"),
        remaining_units=changes.get("remaining_units"),
    )
    if "unit_price" in changes:
        supply.unit_price = check_price(changes["unit_price"])
    if "name" in changes:
        supply.name = changes["name"]
    if "brand" in changes:
        supply.brand = changes["brand"]
    supply.total_units = counts.total_units
    supply.remaining_units = counts.remaining_units
    await db.commit()

    logger.info(
        f"Supply updated: {sorted(changes)}",
        extra={"user_id": user_id, "supply_id": supply_id},
    )
    return supply


async def delete_supply(db: AsyncSession, user_id: UUID, supply_id: UUID) -> None:
    supply = await get_supply(db, user_id, supply_id)
    await db.execute(
        update(Event)
        .where(Event.supply_id == supply_id)
        .values(supply_id=None)
        .execution_options(synchronize_session=False),
    )
    await db.delete(supply)
    await db.commit()
    logger.info(
        "Supply deleted", extra={"user_id": user_id, "supply_id": supply_id},
    )
