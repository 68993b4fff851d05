"""Session management API endpoints."""

from fastapi import APIRouter, Depends

from ..models.response import MessageResponse
from ..session import EngineSession, SessionRegistry
from .deps import get_registry, get_session

router = APIRouter(prefix="/api/v1/session", tags=["session"])


@router.get(
    "",
    summary="Describe the session",
    description="Get the caller's session id and engine sizes"
)
async def describe_session(
    session: EngineSession = Depends(get_session),
    registry: SessionRegistry = Depends(get_registry)
) -> dict:
    """Return the resolved session and its engine sizes."""
    return {
        "session_id": session.session_id,
        "active_sessions": len(registry),
        "sizes": {
            "binary_search": session.sequence.size(),
            "hash_table": session.store.size(),
            "trie": session.trie.word_count(),
            "substring": len(session.matcher.get_texts()),
        }
    }


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Reset the session",
    description="Clear every engine of the caller's session"
)
async def reset_session(session: EngineSession = Depends(get_session)) -> MessageResponse:
    """Clear all four engines."""
    session.reset()
    return MessageResponse(message=f"Session '{session.session_id}' reset", size=0)
