"""CSV import/export schemas."""
from pydantic import BaseModel

from release_planner.models import Allocation, PlanWarning, Release, Resource


class TableImport(BaseModel):
    """Result of decoding a CSV table into fresh collections."""

    releases: list[Release]
    resources: list[Resource]
    allocations: list[Allocation]
    warnings: list[PlanWarning] = []


class ImportResponse(BaseModel):
    message: str
    releases: int
    resources: int
    allocations: int
    warnings: list[PlanWarning]
