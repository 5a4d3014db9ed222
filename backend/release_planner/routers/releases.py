"""Release and allocation API routes."""
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from release_planner.config import get_settings
from release_planner.engine.calculator import CalculationEngine
from release_planner.engine.calendar import months_in_range
from release_planner.engine.ids import IdFactory
from release_planner.models import PlanState, Release
from release_planner.schemas.allocation import AllocationResponse, AllocationUpsert, AssignResourceRequest
from release_planner.schemas.release import ReleaseCreate, ReleaseResponse, ReleaseUpdate
from release_planner.services import planning
from release_planner.store import PlanStore, get_id_factory, get_store

router = APIRouter(prefix="/releases", tags=["releases"])


def _get_release(state: PlanState, release_id: str) -> Release:
    release = next((r for r in state.releases if r.id == release_id), None)
    if not release:
        raise HTTPException(status_code=404, detail="Release not found")
    return release


def _to_response(release: Release, state: PlanState, engine: CalculationEngine) -> ReleaseResponse:
    return ReleaseResponse(
        id=release.id,
        name=release.name,
        start_month=release.start_month,
        end_month=release.end_month,
        months=months_in_range(release.start_month, release.end_month),
        total_cost_usd=engine.release_total_cost_usd(release, state.resources, state.allocations),
    )


@router.get("", response_model=list[ReleaseResponse])
async def list_releases(store: Annotated[PlanStore, Depends(get_store)]):
    engine = CalculationEngine()
    state = store.state
    return [_to_response(r, state, engine) for r in state.releases]


@router.post("", response_model=ReleaseResponse)
async def create_release(
    data: ReleaseCreate,
    store: Annotated[PlanStore, Depends(get_store)],
    new_id: Annotated[IdFactory, Depends(get_id_factory)],
):
    state = store.state
    releases, release = planning.create_release(
        state.releases, data.name, data.start_month, data.end_month, new_id
    )
    state = state.replace(releases=releases)
    response = _to_response(release, state, CalculationEngine())
    store.commit(state)
    return response


@router.patch("/{release_id}", response_model=ReleaseResponse)
async def update_release(
    release_id: str,
    data: ReleaseUpdate,
    store: Annotated[PlanStore, Depends(get_store)],
):
    state = store.state
    _get_release(state, release_id)
    releases = planning.update_release(state.releases, release_id, **data.model_dump(exclude_unset=True))
    state = state.replace(releases=releases)
    response = _to_response(_get_release(state, release_id), state, CalculationEngine())
    store.commit(state)
    return response


@router.delete("/{release_id}")
async def delete_release(release_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    state = store.state
    _get_release(state, release_id)
    releases, allocations = planning.delete_release(state.releases, state.allocations, release_id)
    store.commit(state.replace(releases=releases, allocations=allocations))
    return {"ok": True}


@router.get("/{release_id}/months", response_model=list[str])
async def list_months(release_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    release = _get_release(store.state, release_id)
    return months_in_range(release.start_month, release.end_month)


@router.post("/{release_id}/resources", response_model=list[AllocationResponse])
async def assign_resource(
    release_id: str,
    data: AssignResourceRequest,
    store: Annotated[PlanStore, Depends(get_store)],
    new_id: Annotated[IdFactory, Depends(get_id_factory)],
):
    """Assign a resource for every month of the release at the default allocation."""
    state = store.state
    release = _get_release(state, release_id)
    if not any(r.id == data.resource_id for r in state.resources):
        raise HTTPException(status_code=404, detail="Resource not found")
    percentage = data.percentage
    if percentage is None:
        percentage = Decimal(str(get_settings().default_allocation))
    allocations = planning.assign_resource(
        release, data.resource_id, state.allocations, new_id, percentage=percentage
    )
    state = store.commit(state.replace(allocations=allocations))
    return [
        AllocationResponse.model_validate(a)
        for a in state.allocations
        if a.release_id == release_id and a.resource_id == data.resource_id
    ]


@router.delete("/{release_id}/resources/{resource_id}")
async def remove_resource(
    release_id: str,
    resource_id: str,
    store: Annotated[PlanStore, Depends(get_store)],
):
    state = store.state
    _get_release(state, release_id)
    allocations = planning.remove_resource_from_release(state.allocations, release_id, resource_id)
    store.commit(state.replace(allocations=allocations))
    return {"ok": True}


@router.get("/{release_id}/allocations", response_model=list[AllocationResponse])
async def list_allocations(release_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    state = store.state
    _get_release(state, release_id)
    return [AllocationResponse.model_validate(a) for a in state.allocations if a.release_id == release_id]


@router.put("/{release_id}/allocations", response_model=AllocationResponse)
async def upsert_allocation(
    release_id: str,
    data: AllocationUpsert,
    store: Annotated[PlanStore, Depends(get_store)],
    new_id: Annotated[IdFactory, Depends(get_id_factory)],
):
    """Set one (resource, month) cell of the allocation grid."""
    state = store.state
    _get_release(state, release_id)
    if not any(r.id == data.resource_id for r in state.resources):
        raise HTTPException(status_code=404, detail="Resource not found")
    allocations, allocation = planning.upsert_allocation(
        state.allocations, release_id, data.resource_id, data.month_str, data.percentage, new_id
    )
    store.commit(state.replace(allocations=allocations))
    return AllocationResponse.model_validate(allocation)
