"""Health check endpoints.

Provides health status for container probes and monitoring.
"""

from fastapi import APIRouter

from stamp_studio import __version__
from stamp_studio.config import settings
from stamp_studio.infra.database import verify_db_connection
from stamp_studio.schemas.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready() -> HealthResponse:
    """Readiness check.

    Verifies the database is reachable.
    """
    checks = {"database": await verify_db_connection()}

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
