"""Allocation model."""
from decimal import Decimal

from pydantic import BaseModel


class Allocation(BaseModel):
    """Fraction (0.0-1.0) of one resource committed to one release for one month.

    At most one allocation exists per (release_id, resource_id, month_str).
    """

    id: str
    release_id: str
    resource_id: str
    month_str: str
    percentage: Decimal

    class Config:
        frozen = True
