"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_supabase_client
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def ready(
    client=Depends(get_supabase_client),
    settings: Settings = Depends(get_settings),
):
    """
    Readiness endpoint reporting whether the stores are configured.

    Returns:
        dict: Status plus the collections and bucket in use
    """
    configured = client is not None
    if not configured:
        logger.warning("Readiness check: Supabase client not configured")
    return {
        "status": "ok" if configured else "degraded",
        "supabase_configured": configured,
        "workouts_collection": settings.workouts_collection,
        "image_bucket": settings.image_bucket,
    }
