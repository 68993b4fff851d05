"""Shared dependencies for API endpoints."""

from typing import Optional

from fastapi import HTTPException, Request

from ..config import Settings
from ..session import EngineSession, SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    """Get the session registry held by the application."""
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def _session_id(request: Request, settings: Settings) -> str:
    return request.headers.get(settings.session_header) or settings.default_session_id


def get_session(request: Request) -> EngineSession:
    """Resolve the caller's session from the session header, creating it on first use."""
    registry: SessionRegistry = request.app.state.registry
    return registry.get(_session_id(request, registry.settings))


def find_session(request: Request) -> Optional[EngineSession]:
    """Resolve the caller's session only if it already exists."""
    registry: SessionRegistry = request.app.state.registry
    return registry.peek(_session_id(request, registry.settings))


def check_length(value: str, limit: int, name: str) -> None:
    """Reject input longer than the configured limit."""
    if len(value) > limit:
        raise HTTPException(
            status_code=400,
            detail=f"{name} too long. Maximum length is {limit} characters"
        )
