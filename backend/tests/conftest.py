"""Shared fixtures."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from release_planner.config import Settings
from release_planner.engine.calculator import CalculationEngine
from release_planner.engine.ids import SequentialIds
from release_planner.models import Allocation, Location, Release, Resource
from release_planner.store import PlanStore, get_id_factory, get_store


@pytest.fixture
def settings():
    """Default cost constants, independent of the environment."""
    return Settings(
        usd_to_cad=1.32,
        days_per_month=21,
        hours_onsite=8,
        hours_offshore=9,
        openai_api_key="",
        openai_model="gpt-4o-mini",
    )


@pytest.fixture
def engine(settings):
    return CalculationEngine(settings)


@pytest.fixture
def onsite():
    return Resource(id="res-on", name="Ana", role="Developer", location=Location.ONSITE, rate_cad=Decimal("132"))


@pytest.fixture
def offshore():
    return Resource(id="res-off", name="Ravi", role="QA Engineer", location=Location.OFFSHORE, rate_cad=Decimal("132"))


@pytest.fixture
def release():
    return Release(id="rel-1", name="Q1 Launch", start_month="2024-01", end_month="2024-03")


def alloc(id, release_id, resource_id, month, pct):
    return Allocation(
        id=id,
        release_id=release_id,
        resource_id=resource_id,
        month_str=month,
        percentage=Decimal(str(pct)),
    )


@pytest.fixture
def store():
    return PlanStore()


@pytest.fixture
def client(store):
    """Test client over a fresh in-memory store with deterministic ids."""
    from release_planner.main import app

    ids = SequentialIds("id")
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_id_factory] = lambda: ids

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
