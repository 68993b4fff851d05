"""Metrics API endpoints."""

from typing import Optional

import psutil
from fastapi import APIRouter, Depends

from ..models.response import MetricsResponse
from ..session import EngineSession, SessionRegistry
from .deps import find_session, get_registry

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics for the caller's engines and process memory usage"
)
async def get_metrics(
    session: Optional[EngineSession] = Depends(find_session),
    registry: SessionRegistry = Depends(get_registry)
) -> MetricsResponse:
    """
    Get performance metrics for the caller's session.
    
    Statistics are kept per engine instance, so the totals describe the
    session resolved from the request, not the whole process. A session
    that does not exist yet is reported as empty rather than created.
    """
    engines = session.get_stats() if session is not None else {}
    
    total_queries = sum(stats["total_queries"] for stats in engines.values())
    total_execution_time = sum(stats["total_execution_time"] for stats in engines.values())
    
    if total_queries > 0:
        average_response_time_ms = total_execution_time / total_queries
    else:
        average_response_time_ms = 0.0
    
    memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)
    
    return MetricsResponse(
        total_queries=total_queries,
        average_response_time_ms=average_response_time_ms,
        active_sessions=len(registry),
        engines=engines,
        memory_usage_mb=memory_usage_mb
    )
