"""Typed, non-fatal degradation records."""
from enum import Enum

from pydantic import BaseModel


class WarningCode(str, Enum):
    # Aggregation
    MISSING_RESOURCE = "missing_resource"
    OUT_OF_RANGE = "out_of_range"
    # Import
    MALFORMED_ROW = "malformed_row"
    MISSING_NAME = "missing_name"
    INVALID_RATE = "invalid_rate"
    INVALID_PERCENTAGE = "invalid_percentage"
    INVALID_LOCATION = "invalid_location"
    NAME_COLLISION = "name_collision"


class PlanWarning(BaseModel):
    code: WarningCode
    message: str
    line: int | None = None  # 1-based line in imported text
    entity_id: str | None = None
