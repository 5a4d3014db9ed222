"""Release model."""
from pydantic import BaseModel


class Release(BaseModel):
    """A named, time-bounded initiative being costed. Months are YYYY-MM tokens."""

    id: str
    name: str
    start_month: str
    end_month: str

    class Config:
        frozen = True
