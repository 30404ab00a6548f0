"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status

from abonnement.di.container import DIContainer
from abonnement.di.dependencies import get_container

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness probe endpoint.

    The process answering is enough to be considered alive.
    """
    return {"status": "healthy"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    container: DIContainer = Depends(get_container),
):
    """
    Readiness probe endpoint.

    Returns 200 if the database answers, 503 otherwise.
    """
    db_healthy = await container.database.health_check()

    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "checks": {"database": "healthy" if db_healthy else "unhealthy"},
    }
