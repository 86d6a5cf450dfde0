"""
FastAPI Dependency Providers for the workout catalog admin.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The async Supabase client is created once in the app lifespan and kept on
  app.state
- Store providers create new adapter instances per-request
- The admin session (list + editor + notifications) lives on app.state for
  the lifetime of the process

Usage in routers:
    from api.deps import get_admin_session
    from application.use_cases import WorkoutAdminSession

    @router.get("/workouts")
    def list_workouts(session: WorkoutAdminSession = Depends(get_admin_session)):
        return session.workouts.derived_view()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_admin_session] = lambda: session_built_on_fakes
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request
from supabase import AsyncClient

# Protocol types (interfaces)
from application.ports import (
    BlobStore,
    ExerciseCatalog,
    ToolCatalog,
    WorkoutRecordStore,
)
from application.use_cases import WorkoutAdminSession

# Concrete implementations
from infrastructure import (
    CollectionExerciseCatalog,
    CollectionToolCatalog,
    SupabaseBlobStore,
    SupabaseWorkoutRecordStore,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


def get_supabase_client(request: Request) -> Optional[AsyncClient]:
    """
    Get the async Supabase client created at startup.

    Returns:
        AsyncClient: Supabase client instance, or None if not configured
    """
    return getattr(request.app.state, "supabase", None)


def get_supabase_client_required(
    client: Optional[AsyncClient] = Depends(get_supabase_client),
) -> AsyncClient:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        AsyncClient: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Store Providers
# =============================================================================


def get_record_store(
    client: AsyncClient = Depends(get_supabase_client_required),
) -> WorkoutRecordStore:
    """
    Get WorkoutRecordStore implementation.

    Returns a SupabaseWorkoutRecordStore instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseWorkoutRecordStore(client)


def get_blob_store(
    client: AsyncClient = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> BlobStore:
    """
    Get BlobStore implementation.

    Returns a SupabaseBlobStore bound to the configured thumbnail bucket.
    """
    return SupabaseBlobStore(client, settings.image_bucket)


def get_exercise_catalog(
    store: WorkoutRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> ExerciseCatalog:
    """Get the exercise reference data provider."""
    return CollectionExerciseCatalog(store, settings.exercises_collection)


def get_tool_catalog(
    store: WorkoutRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> ToolCatalog:
    """Get the tool reference data provider."""
    return CollectionToolCatalog(store, settings.tools_collection)


# =============================================================================
# Admin Session Provider
# =============================================================================


def get_admin_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    record_store: WorkoutRecordStore = Depends(get_record_store),
    blob_store: BlobStore = Depends(get_blob_store),
    exercise_catalog: ExerciseCatalog = Depends(get_exercise_catalog),
    tool_catalog: ToolCatalog = Depends(get_tool_catalog),
) -> WorkoutAdminSession:
    """
    Get the process-wide admin session.

    Created on first use and kept on app.state, so the list snapshot,
    selection, editor form and notifications persist across requests.

    Returns:
        WorkoutAdminSession: The shared admin session
    """
    session = getattr(request.app.state, "admin_session", None)
    if session is None:
        session = WorkoutAdminSession.from_settings(
            settings,
            record_store=record_store,
            blob_store=blob_store,
            exercise_catalog=exercise_catalog,
            tool_catalog=tool_catalog,
        )
        request.app.state.admin_session = session
    return session
