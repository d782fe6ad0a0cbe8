"""Statistics Schemas - period totals, daily trend, hourly buckets and health summary.

Invariants:
    - Costs leave the API as floats (stored and summed as Decimal)
"""

from decimal import Decimal

from pydantic import BaseModel, field_validator


class _CostModel(BaseModel):
    cost: float

    @field_validator("cost", mode="before")
    @classmethod
    def decimal_to_float(cls, v):
        return float(v) if isinstance(v, Decimal) else v


class PeriodStats(_CostModel):
    count: int
    change: int


class DailyPoint(_CostModel):
    date: str
    count: int


class HourBucket(BaseModel):
    hour: str
    count: int


class HealthSummary(BaseModel):
    total_count: int
    total_days: int
    money_spent: float
    health_score: int

    @field_validator("money_spent", mode="before")
    @classmethod
    def decimal_to_float(cls, v):
        return float(v) if isinstance(v, Decimal) else v


class StatisticsResponse(BaseModel):
    today: PeriodStats
    week: PeriodStats
    month: PeriodStats
    avg_daily: float
    daily_trend: list[DailyPoint]
    hourly_distribution: list[HourBucket]
    health: HealthSummary
