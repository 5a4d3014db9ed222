"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from release_planner.config import get_settings
from release_planner.routers import calculations, releases, resources, summary, transfer

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Release Resource Planner",
    description="Release staffing allocations, monthly cost estimation and CSV exchange",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(releases.router)
app.include_router(resources.router)
app.include_router(calculations.router)
app.include_router(transfer.router)
app.include_router(summary.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
