"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import Settings
from ..models.response import HealthResponse
from ..session import SessionRegistry
from .deps import get_app_settings, get_registry

router = APIRouter(prefix="/api/v1", tags=["health"])

# Track application start time
app_start_time = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of every search engine"
)
async def health_check(
    registry: SessionRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings)
) -> HealthResponse:
    """
    Perform a health check on the search engines.
    
    Every engine of every held session is probed with a read-only accessor;
    an engine that raises in any session is reported as unhealthy. No
    session is created by the check.
    """
    dependencies = {
        "binary_search": "healthy",
        "hash_table": "healthy",
        "trie": "healthy",
        "substring": "healthy",
    }
    
    for session in registry.sessions():
        probes = {
            "binary_search": session.sequence.size,
            "hash_table": session.store.size,
            "trie": session.trie.word_count,
            "substring": session.matcher.get_texts,
        }
        for name, probe in probes.items():
            try:
                probe()
            except Exception:
                dependencies[name] = "unhealthy"
    
    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    else:
        status = "unhealthy"
    
    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(registry: SessionRegistry = Depends(get_registry)) -> JSONResponse:
    """Report readiness together with the number of held sessions."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": _now(),
            "active_sessions": len(registry)
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Report that the process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": _now(),
            "uptime": time.time() - app_start_time
        }
    )
