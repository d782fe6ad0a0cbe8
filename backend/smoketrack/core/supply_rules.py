"""Supply Rules - pure validation for creating and editing a supply.

Invariants:
    - A new supply starts full: remaining_units == total_units
    - total_units > 0 and unit_price > 0 on every write
    - An edit never leaves remaining_units outside [0, total_units]
"""

from decimal import Decimal

from smoketrack.core.domain_types import SupplySnapshot
from smoketrack.core.errors import InvalidSupplyError


def check_price(unit_price: Decimal) -> Decimal:
    if unit_price <= 0:
        raise InvalidSupplyError("price must be greater than 0")
    return unit_price


def new_supply_counts(total_units: int) -> SupplySnapshot:
    """Counts for a freshly bought supply."""
    if total_units <= 0:
        raise InvalidSupplyError("total units must be greater than 0")
    return SupplySnapshot(total_units=total_units, remaining_units=total_units)


def edited_counts(
    current: SupplySnapshot,
    total_units: int | None = None,
    remaining_units: int | None = None,
) -> SupplySnapshot:
    """Apply a partial edit of the counts.

    Shrinking total_units without a new remaining_units clamps remaining to
    the new total; an explicit remaining_units above the total is rejected.
    """
    total = current.total_units if total_units is None else total_units
    if total <= 0:
        raise InvalidSupplyError("total units must be greater than 0")
    if remaining_units is None:
        remaining = min(current.remaining_units, total)
    else:
        remaining = remaining_units
    if not 0 <= remaining <= total:
        raise InvalidSupplyError(
            f"remaining units must be between 0 and {total}",
        )
    return SupplySnapshot(total_units=total, remaining_units=remaining)
