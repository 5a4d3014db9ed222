"""Calculation API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from release_planner.engine.calculator import CalculationEngine
from release_planner.schemas.calculation import CostBreakdown, PortfolioCost
from release_planner.store import PlanStore, get_store

router = APIRouter(tags=["calculations"])


@router.get("/releases/{release_id}/calculations/cost", response_model=CostBreakdown)
async def get_release_cost(release_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    state = store.state
    release = next((r for r in state.releases if r.id == release_id), None)
    if not release:
        raise HTTPException(status_code=404, detail="Release not found")
    return CalculationEngine().release_cost_breakdown(release, state.resources, state.allocations)


@router.get("/portfolio/cost", response_model=PortfolioCost)
async def get_portfolio_cost(store: Annotated[PlanStore, Depends(get_store)]):
    state = store.state
    return CalculationEngine().portfolio_cost(state.releases, state.resources, state.allocations)
