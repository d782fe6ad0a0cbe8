"""Supply Schemas - create/edit payloads and the supply response.

Invariants:
    - `total_count`, `remaining_count`, `price` accepted as aliases
    - Range rules live in core/supply_rules.py, not here
    - SupplyUpdate distinguishes "not sent" from "sent" via model_fields_set
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field, field_validator

from smoketrack.core.civil_time import ensure_utc
from smoketrack.models.supply import Supply


class SupplyCreate(BaseModel):
    """POST body for a new supply."""
    name: str = Field(min_length=1, max_length=100)
    brand: str | None = Field(None, max_length=100)
    total_units: int = Field(
        validation_alias=AliasChoices("total_units", "total_count"),
    )
    unit_price: Decimal = Field(
        validation_alias=AliasChoices("unit_price", "price"),
    )


class SupplyUpdate(BaseModel):
    """PATCH body; every field optional."""
    name: str | None = Field(None, min_length=1, max_length=100)
    brand: str | None = Field(None, max_length=100)
    total_units: int | None = Field(
        None, validation_alias=AliasChoices("total_units", "total_count"),
    )
    remaining_units: int | None = Field(
        None, validation_alias=AliasChoices("remaining_units", "remaining_count"),
    )
    unit_price: Decimal | None = Field(
        None, validation_alias=AliasChoices("unit_price", "price"),
    )

    @field_validator("name", "total_units", "remaining_units", "unit_price")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    def changes(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class SupplyResponse(BaseModel):
    id: UUID
    name: str
    brand: str | None
    total_units: int
    remaining_units: int
    unit_price: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_supply(cls, supply: Supply) -> "SupplyResponse":
        return cls(
            id=supply.id,
            name=supply.name,
            brand=supply.brand,
            total_units=supply.total_units,
            remaining_units=supply.remaining_units,
            unit_price=float(supply.unit_price),
            created_at=ensure_utc(supply.created_at),
            updated_at=ensure_utc(supply.updated_at),
        )


class SupplyEnvelope(BaseModel):
    success: bool = True
    data: SupplyResponse


class SupplyListResponse(BaseModel):
    data: list[SupplyResponse]
