"""Domain models."""
from release_planner.models.allocation import Allocation
from release_planner.models.plan import PlanState
from release_planner.models.release import Release
from release_planner.models.resource import Location, Resource
from release_planner.models.warning import PlanWarning, WarningCode

__all__ = [
    "Allocation",
    "Location",
    "PlanState",
    "PlanWarning",
    "Release",
    "Resource",
    "WarningCode",
]
