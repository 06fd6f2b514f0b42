import pytest
from fastapi.testclient import TestClient

from taskplanner.main import app
from taskplanner.db.deps import get_section_store, get_weekly_plan_store
from taskplanner.db.section_store import SectionStore
from taskplanner.db.weekly_plan_store import WeeklyPlanStore


@pytest.fixture
def section_store(tmp_path):
    return SectionStore(tmp_path / "sections")


@pytest.fixture
def plan_store(tmp_path):
    return WeeklyPlanStore(tmp_path / "weekly-plans")


@pytest.fixture
def client(section_store, plan_store):
    app.dependency_overrides[get_section_store] = lambda: section_store
    app.dependency_overrides[get_weekly_plan_store] = lambda: plan_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
