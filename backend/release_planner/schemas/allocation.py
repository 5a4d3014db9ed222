"""Allocation schemas."""
from decimal import Decimal

from pydantic import BaseModel, Field

from release_planner.schemas.release import MONTH_PATTERN


class AssignResourceRequest(BaseModel):
    resource_id: str
    percentage: Decimal | None = Field(None, ge=0, le=1)


class AllocationUpsert(BaseModel):
    resource_id: str
    month_str: str = Field(..., pattern=MONTH_PATTERN)
    percentage: Decimal = Field(..., ge=0, le=1)


class AllocationResponse(BaseModel):
    id: str
    release_id: str
    resource_id: str
    month_str: str
    percentage: Decimal

    class Config:
        from_attributes = True
