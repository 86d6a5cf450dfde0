"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, patch

from backend.main import (
    _close_supabase_client,
    _configure_cors,
    _create_supabase_client,
    _init_sentry,
    _log_startup_config,
    create_app,
)
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self, test_settings):
        """create_app() should return a FastAPI application instance."""
        app = create_app(settings=test_settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self, test_settings):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = test_settings

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self, test_settings):
        """create_app() should configure app title and version."""
        app = create_app(settings=test_settings)

        assert app.title == "Workout Catalog Admin API"
        assert app.version == "1.0.0"

    def test_create_app_keeps_settings_on_state(self, test_settings):
        app = create_app(settings=test_settings)
        assert app.state.settings is test_settings
        assert app.state.admin_session is None

    def test_routes_registered(self, test_settings):
        paths = create_app(settings=test_settings).openapi()["paths"]
        for path in [
            "/health",
            "/workouts",
            "/workouts/delete-selected",
            "/editor/save",
            "/reference/exercises",
            "/notifications",
        ]:
            assert path in paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self, clean_env):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self, clean_env):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
            )


@pytest.mark.unit
class TestSupabaseClient:
    @pytest.mark.asyncio
    async def test_no_client_without_credentials(self, test_settings):
        with patch("backend.main.acreate_client", new=AsyncMock()) as mock_create:
            assert await _create_supabase_client(test_settings) is None
            mock_create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_client_created_with_service_role_key(self, clean_env):
        settings = Settings(
            supabase_url="https://proj.supabase.co",
            supabase_service_role_key="service-key",
            supabase_anon_key="anon-key",
            _env_file=None,
        )
        sentinel = object()
        with patch("backend.main.acreate_client", new=AsyncMock(return_value=sentinel)) as mock_create:
            assert await _create_supabase_client(settings) is sentinel
            mock_create.assert_awaited_once_with("https://proj.supabase.co", "service-key")


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self, test_settings):
        """_configure_cors should add CORS middleware to the app."""
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, test_settings)

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_extra_origins_from_settings(self, clean_env):
        settings = Settings(cors_allowed_origins="https://admin.example.com", _env_file=None)
        app = create_app(settings=settings)

        client = TestClient(app)
        response = client.get("/health", headers={"Origin": "https://admin.example.com"})

        assert response.headers["access-control-allow-origin"] == "https://admin.example.com"


@pytest.mark.unit
class TestLogStartupConfig:
    def test_logs_collection_and_bucket(self, test_settings, caplog):
        with caplog.at_level("INFO"):
            _log_startup_config(test_settings)

        assert "Workouts collection 'Workouts'" in caplog.text
        assert "workout-images/workout_image" in caplog.text


@pytest.mark.integration
class TestAppIntegration:
    """Integration tests for the created app."""

    def test_cors_allows_requests(self, test_settings):
        """CORS should allow cross-origin requests."""
        app = create_app(settings=test_settings)

        client = TestClient(app)
        response = client.get(
            "/health",
            headers={"Origin": "http://localhost:3000"}
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

    def test_lifespan_leaves_client_unset_without_credentials(self, test_settings):
        app = create_app(settings=test_settings)
        with TestClient(app):
            assert app.state.supabase is None

    def test_shutdown_closes_editor_and_client(self, test_settings):
        supabase = MagicMock()
        supabase.postgrest.aclose = AsyncMock()
        session = MagicMock()
        app = create_app(settings=test_settings)

        with patch("backend.main._create_supabase_client", new=AsyncMock(return_value=supabase)):
            with TestClient(app):
                assert app.state.supabase is supabase
                app.state.admin_session = session

        session.close_editor.assert_called_once()
        supabase.postgrest.aclose.assert_awaited_once()
        assert app.state.supabase is None
        assert app.state.admin_session is None


@pytest.mark.unit
class TestCloseSupabaseClient:
    @pytest.mark.asyncio
    async def test_none_is_ignored(self):
        await _close_supabase_client(None)
