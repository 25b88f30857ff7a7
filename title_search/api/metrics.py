"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter

from ..engine_instance import get_search_engine
from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics and memory usage for the title search service"
)
async def get_metrics() -> MetricsResponse:
    """
    Get performance metrics for the title search service.

    Counters are best-effort: concurrent queries may race on them.
    """
    stats = get_search_engine().get_stats()

    # Resident memory of this process, in MB
    memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

    return MetricsResponse(
        total_queries=stats["total_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        exact_match_rate=stats["exact_match_rate"],
        fuzzy_match_rate=stats["fuzzy_match_rate"],
        no_match_rate=stats["no_match_rate"],
        memory_usage_mb=memory_usage_mb
    )
