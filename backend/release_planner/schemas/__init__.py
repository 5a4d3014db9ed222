"""Pydantic schemas."""
from release_planner.schemas.allocation import AllocationResponse, AllocationUpsert, AssignResourceRequest
from release_planner.schemas.calculation import CostBreakdown, PortfolioCost, ReleaseCost
from release_planner.schemas.release import ReleaseCreate, ReleaseResponse, ReleaseUpdate
from release_planner.schemas.resource import ResourceCreate, ResourceResponse
from release_planner.schemas.summary import SummaryResponse
from release_planner.schemas.transfer import ImportResponse, TableImport

__all__ = [
    "AllocationResponse",
    "AllocationUpsert",
    "AssignResourceRequest",
    "CostBreakdown",
    "ImportResponse",
    "PortfolioCost",
    "ReleaseCost",
    "ReleaseCreate",
    "ReleaseResponse",
    "ReleaseUpdate",
    "ResourceCreate",
    "ResourceResponse",
    "SummaryResponse",
    "TableImport",
]
