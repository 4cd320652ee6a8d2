"""
API Routers - FastAPI endpoint definitions.
"""

from taskboard.presentation.api.health import router as health_router
from taskboard.presentation.api.tasks import router as tasks_router

__all__ = [
    "health_router",
    "tasks_router",
]
