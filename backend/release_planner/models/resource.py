"""Resource model."""
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel


class Location(str, Enum):
    """Work location; drives daily working hours in the cost model."""

    ONSITE = "Onsite"
    OFFSHORE = "Offshore"


class Resource(BaseModel):
    """A staffed individual with an hourly rate in CAD."""

    id: str
    name: str
    role: str
    location: Location
    rate_cad: Decimal

    class Config:
        frozen = True
