"""Narrative summary schemas."""
from pydantic import BaseModel


class SummaryResponse(BaseModel):
    release_id: str
    summary: str
