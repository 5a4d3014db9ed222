"""Resource API routes."""
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from release_planner.engine.calculator import CalculationEngine
from release_planner.engine.ids import IdFactory
from release_planner.models import Resource
from release_planner.schemas.resource import ResourceCreate, ResourceResponse
from release_planner.services import planning
from release_planner.store import PlanStore, get_id_factory, get_store

router = APIRouter(prefix="/resources", tags=["resources"])


def _to_response(resource: Resource, engine: CalculationEngine) -> ResourceResponse:
    return ResourceResponse(
        id=resource.id,
        name=resource.name,
        role=resource.role,
        location=resource.location,
        rate_cad=resource.rate_cad,
        rate_usd=engine.rate_usd(resource).quantize(Decimal("0.01")),
    )


@router.get("", response_model=list[ResourceResponse])
async def list_resources(store: Annotated[PlanStore, Depends(get_store)]):
    engine = CalculationEngine()
    return [_to_response(r, engine) for r in store.state.resources]


@router.post("", response_model=ResourceResponse)
async def create_resource(
    data: ResourceCreate,
    store: Annotated[PlanStore, Depends(get_store)],
    new_id: Annotated[IdFactory, Depends(get_id_factory)],
):
    state = store.state
    resources, resource = planning.create_resource(
        state.resources, data.name, data.role, data.location, data.rate_cad, new_id
    )
    store.commit(state.replace(resources=resources))
    return _to_response(resource, CalculationEngine())


@router.delete("/{resource_id}")
async def delete_resource(resource_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    """Delete a resource and all of its allocations."""
    state = store.state
    if not any(r.id == resource_id for r in state.resources):
        raise HTTPException(status_code=404, detail="Resource not found")
    resources, allocations = planning.delete_resource(state.resources, state.allocations, resource_id)
    store.commit(state.replace(resources=resources, allocations=allocations))
    return {"ok": True}
