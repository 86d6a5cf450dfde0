"""
Tests for api/deps.py dependency providers.

These tests verify that:
1. Providers return the Supabase-backed implementations
2. Missing Supabase credentials surface as HTTP 503
3. The admin session is created once and kept on app.state
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from api.deps import (
    get_admin_session,
    get_blob_store,
    get_exercise_catalog,
    get_record_store,
    get_supabase_client,
    get_supabase_client_required,
    get_tool_catalog,
)
from infrastructure import (
    CollectionExerciseCatalog,
    CollectionToolCatalog,
    SupabaseBlobStore,
    SupabaseWorkoutRecordStore,
)

pytestmark = pytest.mark.unit


def fake_request(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


class TestSupabaseClientProviders:
    def test_client_read_from_app_state(self):
        client = MagicMock()
        assert get_supabase_client(fake_request(supabase=client)) is client

    def test_client_missing_from_state_is_none(self):
        assert get_supabase_client(fake_request()) is None

    def test_required_client_raises_503(self):
        with pytest.raises(HTTPException) as exc_info:
            get_supabase_client_required(None)
        assert exc_info.value.status_code == 503

    def test_required_client_passthrough(self):
        client = MagicMock()
        assert get_supabase_client_required(client) is client


class TestStoreProviders:
    def test_record_store(self):
        assert isinstance(get_record_store(MagicMock()), SupabaseWorkoutRecordStore)

    def test_blob_store_uses_configured_bucket(self, test_settings):
        store = get_blob_store(MagicMock(), test_settings)
        assert isinstance(store, SupabaseBlobStore)
        assert store._bucket == "workout-images"

    def test_reference_catalogs(self, test_settings, record_store):
        assert isinstance(get_exercise_catalog(record_store, test_settings), CollectionExerciseCatalog)
        assert isinstance(get_tool_catalog(record_store, test_settings), CollectionToolCatalog)


class TestAdminSessionProvider:
    def test_session_created_once_and_cached(
        self, test_settings, record_store, blob_store, exercise_catalog, tool_catalog
    ):
        request = fake_request(admin_session=None)

        first = get_admin_session(
            request, test_settings, record_store, blob_store, exercise_catalog, tool_catalog
        )
        second = get_admin_session(
            request, test_settings, record_store, blob_store, exercise_catalog, tool_catalog
        )

        assert first is second
        assert request.app.state.admin_session is first
        assert first.workouts.page_size == test_settings.default_page_size
