"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Reports "degraded" when the service started without its catalogs.
"""

from fastapi import APIRouter, Request

from timeconvert.interfaces.conversion.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    state = request.app.state
    degraded = state.error_catalog.degraded or state.locale_catalog.degraded
    return HealthResponse(status="degraded" if degraded else "ok", version=request.app.version)
