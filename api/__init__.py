"""
API package for the workout catalog admin.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_record_store,
    get_blob_store,
    get_exercise_catalog,
    get_tool_catalog,
    get_admin_session,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Stores
    "get_record_store",
    "get_blob_store",
    "get_exercise_catalog",
    "get_tool_catalog",
    # Session
    "get_admin_session",
]
