"""Release schemas."""
from decimal import Decimal

from pydantic import BaseModel, Field

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class ReleaseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    start_month: str = Field(..., pattern=MONTH_PATTERN)
    end_month: str = Field(..., pattern=MONTH_PATTERN)


class ReleaseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    start_month: str | None = Field(None, pattern=MONTH_PATTERN)
    end_month: str | None = Field(None, pattern=MONTH_PATTERN)


class ReleaseResponse(BaseModel):
    id: str
    name: str
    start_month: str
    end_month: str
    months: list[str]
    total_cost_usd: Decimal

    class Config:
        from_attributes = True
