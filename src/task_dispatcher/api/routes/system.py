"""System endpoints.

Health check with per-status task counts.
"""

from fastapi import APIRouter

from ... import __version__
from ..dependencies import DispatcherDep
from ..models import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
def health_check(dispatcher: DispatcherDep) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        tasks=dispatcher.status_counts(),
    )
