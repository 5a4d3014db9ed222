"""Resource schemas."""
from decimal import Decimal

from pydantic import BaseModel, Field

from release_planner.models.resource import Location


class ResourceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=100)
    location: Location = Location.OFFSHORE
    rate_cad: Decimal = Field(..., ge=0)


class ResourceResponse(BaseModel):
    id: str
    name: str
    role: str
    location: Location
    rate_cad: Decimal
    rate_usd: Decimal

    class Config:
        from_attributes = True
