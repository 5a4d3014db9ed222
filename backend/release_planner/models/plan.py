"""Whole-session plan state."""
from pydantic import BaseModel

from release_planner.models.allocation import Allocation
from release_planner.models.release import Release
from release_planner.models.resource import Resource


class PlanState(BaseModel):
    """The three peer collections. Never mutated; replace() builds a new state."""

    releases: tuple[Release, ...] = ()
    resources: tuple[Resource, ...] = ()
    allocations: tuple[Allocation, ...] = ()

    class Config:
        frozen = True

    def replace(self, **collections) -> "PlanState":
        return self.model_copy(update={k: tuple(v) for k, v in collections.items()})
