"""Calculation result schemas."""
from decimal import Decimal

from pydantic import BaseModel

from release_planner.models.warning import PlanWarning


class CostBreakdown(BaseModel):
    """Release cost in USD.

    by_month has every month of the release range, by_resource every known
    resource, both seeded with 0. total == sum(by_month) == sum(by_resource).
    """

    release_id: str
    total: Decimal
    by_month: dict[str, Decimal]
    by_resource: dict[str, Decimal]
    skipped: list[PlanWarning] = []


class ReleaseCost(BaseModel):
    release_id: str
    name: str
    total: Decimal


class PortfolioCost(BaseModel):
    total: Decimal
    releases: list[ReleaseCost]
