"""API routes, split by concern."""

from .system import router as system_router
from .tasks import router as tasks_router

__all__ = [
    "system_router",
    "tasks_router",
]
