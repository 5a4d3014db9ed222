"""CSV import/export API routes."""
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from release_planner.engine.ids import IdFactory
from release_planner.models import PlanState
from release_planner.schemas.transfer import ImportResponse
from release_planner.services.tabular import from_table, to_table
from release_planner.store import PlanStore, get_id_factory, get_store

router = APIRouter(prefix="/transfer", tags=["transfer"])


@router.get("/export")
async def export_csv(store: Annotated[PlanStore, Depends(get_store)]):
    state = store.state
    csv_text = to_table(state.releases, state.resources, state.allocations)
    filename = f"estimate_export_{date.today().isoformat()}.csv"
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResponse)
async def import_csv(
    store: Annotated[PlanStore, Depends(get_store)],
    new_id: Annotated[IdFactory, Depends(get_id_factory)],
    file: UploadFile = File(...),
):
    """Replace the whole plan with the contents of an exported CSV."""
    raw = await file.read()
    try:
        content = raw.decode("utf-8-sig")  # handle BOM
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded CSV")

    parsed = from_table(content, new_id)
    store.commit(PlanState(
        releases=tuple(parsed.releases),
        resources=tuple(parsed.resources),
        allocations=tuple(parsed.allocations),
    ))
    return ImportResponse(
        message=f"Imported {len(parsed.releases)} releases and {len(parsed.resources)} resources.",
        releases=len(parsed.releases),
        resources=len(parsed.resources),
        allocations=len(parsed.allocations),
        warnings=parsed.warnings,
    )
