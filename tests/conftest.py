"""
Shared pytest fixtures for the workout catalog admin tests.

Provides fresh fakes per test, a notification center driven by a manual
clock, an admin session built on the fakes and a TestClient whose admin
session dependency is overridden with that session.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_admin_session
from application.notifications import NotificationCenter
from application.use_cases import WorkoutAdminSession
from backend.main import create_app
from backend.settings import Settings
from domain.models import ExerciseRef, ToolRef
from tests.fakes import (
    FakeBlobStore,
    FakeClock,
    FakeExerciseCatalog,
    FakeToolCatalog,
    FakeWorkoutRecordStore,
)


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SENTRY_DSN",
    "CORS_ALLOWED_ORIGINS",
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def test_settings(clean_env) -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def record_store() -> FakeWorkoutRecordStore:
    """Create a fresh fake record store."""
    return FakeWorkoutRecordStore()


@pytest.fixture
def blob_store() -> FakeBlobStore:
    """Create a fresh fake blob store."""
    return FakeBlobStore()


@pytest.fixture
def exercise_catalog() -> FakeExerciseCatalog:
    return FakeExerciseCatalog([
        ExerciseRef(id="ex-squat", title="Squat"),
        ExerciseRef(id="ex-lunge", title="Lunge"),
        ExerciseRef(id="ex-plank", title="Plank"),
        ExerciseRef(id="ex-burpee", title="Burpee"),
    ])


@pytest.fixture
def tool_catalog() -> FakeToolCatalog:
    return FakeToolCatalog([
        ToolRef(id="dumbbell", name="Dumbbell"),
        ToolRef(id="mat", name="Mat"),
    ])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifications(clock: FakeClock) -> NotificationCenter:
    return NotificationCenter(ttl_seconds=2.0, clock=clock)


@pytest.fixture
def session(
    record_store,
    blob_store,
    exercise_catalog,
    tool_catalog,
    notifications,
) -> WorkoutAdminSession:
    """Admin session on fakes; a successful save closes the editor immediately."""
    return WorkoutAdminSession(
        record_store,
        blob_store,
        exercise_catalog=exercise_catalog,
        tool_catalog=tool_catalog,
        notifications=notifications,
        close_delay_seconds=0,
    )


@pytest.fixture
def app(test_settings):
    return create_app(settings=test_settings)


@pytest.fixture
def client(app, session):
    """
    TestClient with the admin session dependency pointed at the fake session.

    Used as a context manager so every request runs on the same event loop.
    """
    app.dependency_overrides[get_admin_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
