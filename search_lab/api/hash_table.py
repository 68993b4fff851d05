"""Exact match store API endpoints."""

from fastapi import APIRouter, Depends, Path
import structlog

from ..config import Settings
from ..models.request import KeyValueRequest
from ..models.response import (
    ExactMatchResult,
    MessageResponse,
    OperationLogResponse,
    StoreStateResponse,
)
from ..session import EngineSession
from .deps import check_length, get_app_settings, get_session

router = APIRouter(prefix="/api/v1/hash-table", tags=["hash-table"])
logger = structlog.get_logger(__name__)


@router.get(
    "",
    response_model=StoreStateResponse,
    summary="Get stored entries",
    description="Get every key/value pair in the store"
)
async def get_entries(session: EngineSession = Depends(get_session)) -> StoreStateResponse:
    """Return the stored entries."""
    return StoreStateResponse(entries=session.store.get_entries(), size=session.store.size())


@router.post(
    "/insert",
    response_model=MessageResponse,
    summary="Insert a key/value pair",
    description="Store a value under a key, replacing any previous value"
)
async def insert_entry(
    request: KeyValueRequest,
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> MessageResponse:
    """Insert or overwrite an entry."""
    check_length(request.key, settings.max_key_length, "Key")
    check_length(request.value, settings.max_value_length, "Value")
    
    session.store.insert(request.key, request.value)
    logger.info("Entry inserted", session_id=session.session_id, key=request.key)
    
    return MessageResponse(message=f"Inserted '{request.key}'", size=session.store.size())


@router.get(
    "/search/{key:path}",
    response_model=ExactMatchResult,
    summary="Exact match lookup",
    description="Look up the value stored under a key"
)
async def search_entry(
    key: str = Path(..., description="The key to look up", min_length=1),
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> ExactMatchResult:
    """Look up a key; a missing key is a normal result, not an error."""
    check_length(key, settings.max_key_length, "Key")
    
    result = session.store.search(key)
    logger.info("Key lookup", session_id=session.session_id, key=key, found=result.found)
    return result


@router.get(
    "/operations",
    response_model=OperationLogResponse,
    summary="Get operation log",
    description="Get the chronological log of inserts and lookups"
)
async def get_operations(session: EngineSession = Depends(get_session)) -> OperationLogResponse:
    """Return the operation log."""
    return OperationLogResponse(engine="hash_table", operations=session.store.get_operations())


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Clear the store",
    description="Remove every entry and the operation log"
)
async def clear_store(session: EngineSession = Depends(get_session)) -> MessageResponse:
    """Empty the store."""
    session.store.clear()
    logger.info("Store cleared", session_id=session.session_id)
    return MessageResponse(message="Store cleared", size=0)
