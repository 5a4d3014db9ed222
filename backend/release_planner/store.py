"""In-memory session state and FastAPI dependencies."""
from release_planner.engine.ids import IdFactory, uuid_ids
from release_planner.models import PlanState


class PlanStore:
    """Holds the current plan. Operations build a new PlanState and commit() it."""

    def __init__(self, state: PlanState | None = None) -> None:
        self.state = state or PlanState()

    def commit(self, state: PlanState) -> PlanState:
        self.state = state
        return state

    def reset(self) -> None:
        self.state = PlanState()


_store = PlanStore()
_ids = uuid_ids()


def get_store() -> PlanStore:
    return _store


def get_id_factory() -> IdFactory:
    return _ids
