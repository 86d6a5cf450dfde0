"""
Router package for the workout catalog admin.

This package contains all API routers organized by domain:
- health: Liveness and readiness checks
- workouts: Catalog table (view, refresh, selection, batch delete)
- editor: Add/edit form and save
- reference: Exercises and tools for the editor
- notifications: Transient status messages
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.editor import router as editor_router
from api.routers.reference import router as reference_router
from api.routers.notifications import router as notifications_router

__all__ = [
    "health_router",
    "workouts_router",
    "editor_router",
    "reference_router",
    "notifications_router",
]
