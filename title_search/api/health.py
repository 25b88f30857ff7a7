"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..engine_instance import get_search_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the title search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the title search service.

    An empty catalog is reported as degraded: the service answers every
    query, but with no results.
    """
    total_titles = len(get_search_engine().index)

    return HealthResponse(
        status="healthy" if total_titles else "degraded",
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        total_titles=total_titles
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the title index is loaded"
)
async def readiness_check() -> JSONResponse:
    """Report ready once a non-empty title index is published."""
    stats = get_search_engine().get_stats()
    ready = stats["index_stats"]["total_entries"] > 0

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.utcnow().isoformat(),
            "index_stats": stats["index_stats"]
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
