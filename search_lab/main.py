"""Main FastAPI application for the Search Lab."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    binary_search_router,
    hash_table_router,
    trie_router,
    substring_router,
    session_router,
    health_router,
    metrics_router,
)
from .config import Settings, get_settings
from .models.response import ErrorResponse
from .session import SessionRegistry

logger = structlog.get_logger(__name__)

COMPLEXITY = {
    "binary_search": {"search": "O(log n)", "insert": "O(n)"},
    "hash_table": {"search": "O(1) average", "insert": "O(1) average"},
    "trie": {"search": "O(m)", "insert": "O(m)", "autocomplete": "O(m + k)"},
    "substring": {"naive": "O(n×m)", "kmp": "O(n+m)"},
}


def configure_logging(settings: Settings) -> None:
    """Configure structured logging."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())
    
    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.
    
    Args:
        settings: Settings to use (cached environment settings if None)
        
    Returns:
        FastAPI application holding its own session registry
    """
    settings = settings or get_settings()
    configure_logging(settings)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info(
            "Starting Search Lab service",
            version=settings.app_version,
            seed_sample_data=settings.seed_sample_data
        )
        yield
        logger.info("Shutting down Search Lab service", active_sessions=len(app.state.registry))
    
    app = FastAPI(
        title=settings.app_name,
        description="Binary search, exact match, prefix tree and substring search engines with step traces",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.registry = SessionRegistry(settings)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        """Log all HTTP requests."""
        start_time = time.time()
        
        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None
        )
        
        response = await call_next(request)
        
        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2)
        )
        
        return response
    
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle global exceptions."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True
        )
        
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                details={"exception": str(exc)} if settings.debug else None
            ).model_dump(mode="json")
        )
    
    app.include_router(binary_search_router)
    app.include_router(hash_table_router)
    app.include_router(trie_router)
    app.include_router(substring_router)
    app.include_router(session_router)
    app.include_router(health_router)
    app.include_router(metrics_router)
    
    @app.get("/", summary="Root endpoint", description="Get basic information about the API")
    async def root() -> dict:
        """Root endpoint with basic API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs_url": "/docs",
            "health_url": "/api/v1/health",
            "status": "running"
        }
    
    @app.get("/api", summary="API information", description="Get detailed API information")
    async def api_info() -> dict:
        """Get endpoint map and algorithm complexities."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "binary_search": "/api/v1/binary-search/search/{target}",
                "hash_table": "/api/v1/hash-table/search/{key}",
                "trie_search": "/api/v1/trie/search/{word}",
                "autocomplete": "/api/v1/trie/autocomplete/{prefix}",
                "naive": "/api/v1/substring/naive",
                "kmp": "/api/v1/substring/kmp",
                "session": "/api/v1/session",
                "health": "/api/v1/health",
                "metrics": "/api/v1/metrics"
            },
            "complexity": COMPLEXITY,
            "session_header": settings.session_header
        }
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "search_lab.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
