"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from supabase import acreate_client

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.supabase = await _create_supabase_client(settings)
        yield
        session = app.state.admin_session
        if session is not None:
            session.close_editor()
        app.state.admin_session = None
        await _close_supabase_client(app.state.supabase)
        app.state.supabase = None

    # Create FastAPI app
    app = FastAPI(
        title="Workout Catalog Admin API",
        description="Manage the workout catalog: list, filter, edit and delete workouts",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.supabase = None
    app.state.admin_session = None

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Include API routers
    _include_routers(app)

    _log_startup_config(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for workout catalog admin")


async def _create_supabase_client(settings: Settings):
    """Create the async Supabase client, or None when credentials are missing."""
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning(
            "Supabase credentials not configured; workout endpoints will answer 503"
        )
        return None
    return await acreate_client(settings.supabase_url, settings.supabase_key)


async def _close_supabase_client(client) -> None:
    """Close the HTTP session behind the table client, if one was created."""
    if client is None:
        return
    await client.postgrest.aclose()
    logger.info("Supabase client closed")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    # Production domains from CORS_ALLOWED_ORIGINS
    trusted_origins.extend(
        origin for origin in settings.cors_allowed_origins_list if origin not in trusted_origins
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        editor_router,
        health_router,
        notifications_router,
        reference_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(workouts_router)
    app.include_router(editor_router)
    app.include_router(reference_router)
    app.include_router(notifications_router)


def _log_startup_config(settings: Settings) -> None:
    """Log where workouts and thumbnails are stored."""
    logger.info(
        f"Workouts collection '{settings.workouts_collection}', "
        f"thumbnails in bucket '{settings.image_bucket}/{settings.image_path_prefix}'"
    )
    if settings.is_development:
        logger.info(f"Page size options: {settings.page_size_options_list}")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
