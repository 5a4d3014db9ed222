"""Executive summary API route."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from release_planner.schemas.summary import SummaryResponse
from release_planner.services.ai_service import generate_executive_summary
from release_planner.store import PlanStore, get_store

router = APIRouter(prefix="/releases", tags=["summary"])


@router.post("/{release_id}/summary", response_model=SummaryResponse)
async def create_summary(release_id: str, store: Annotated[PlanStore, Depends(get_store)]):
    """Generate a narrative cost summary. AI failures come back as summary text, not errors."""
    state = store.state
    release = next((r for r in state.releases if r.id == release_id), None)
    if not release:
        raise HTTPException(status_code=404, detail="Release not found")
    summary = await generate_executive_summary(release, state.resources, state.allocations)
    return SummaryResponse(release_id=release_id, summary=summary)
