"""Substring search API endpoints."""

import time

from fastapi import APIRouter, Depends
import structlog

from ..config import Settings
from ..models.request import PatternRequest, TextRequest
from ..models.response import (
    MessageResponse,
    OperationLogResponse,
    PatternSearchResponse,
    TextListResponse,
)
from ..session import EngineSession
from .deps import check_length, get_app_settings, get_session

router = APIRouter(prefix="/api/v1/substring", tags=["substring"])
logger = structlog.get_logger(__name__)


@router.get(
    "/texts",
    response_model=TextListResponse,
    summary="List texts",
    description="Get the texts searched by the pattern matcher"
)
async def get_texts(session: EngineSession = Depends(get_session)) -> TextListResponse:
    """Return the texts in insertion order."""
    texts = session.matcher.get_texts()
    return TextListResponse(texts=texts, total_texts=len(texts))


@router.post(
    "/texts",
    response_model=TextListResponse,
    summary="Add a text",
    description="Append a text to the searched collection"
)
async def add_text(
    request: TextRequest,
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> TextListResponse:
    """Add a text and return the updated collection."""
    check_length(request.text, settings.max_text_length, "Text")
    
    session.matcher.add_text(request.text)
    logger.info("Text added", session_id=session.session_id, length=len(request.text))
    
    texts = session.matcher.get_texts()
    return TextListResponse(texts=texts, total_texts=len(texts))


@router.post(
    "/naive",
    response_model=PatternSearchResponse,
    summary="Naive substring search",
    description="Check the pattern at every offset of every text"
)
async def naive_search(
    request: PatternRequest,
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> PatternSearchResponse:
    """Run the naive search and return matches with the comparison trace."""
    check_length(request.pattern, settings.max_pattern_length, "Pattern")
    
    start_time = time.time()
    result = session.matcher.naive_search(request.pattern)
    execution_time = (time.time() - start_time) * 1000
    
    logger.info(
        "Naive search",
        session_id=session.session_id,
        pattern=request.pattern,
        matches=len(result.matches),
        comparisons=result.total_comparisons
    )
    return PatternSearchResponse(
        algorithm="naive",
        pattern=request.pattern,
        matches=result.matches,
        total_matches=len(result.matches),
        total_comparisons=result.total_comparisons,
        lps_array=None,
        operations=session.matcher.get_operations(),
        execution_time_ms=execution_time
    )


@router.post(
    "/kmp",
    response_model=PatternSearchResponse,
    summary="KMP substring search",
    description="Search with the Knuth-Morris-Pratt algorithm"
)
async def kmp_search(
    request: PatternRequest,
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> PatternSearchResponse:
    """Run the KMP search and return matches, the LPS array and the trace."""
    check_length(request.pattern, settings.max_pattern_length, "Pattern")
    
    start_time = time.time()
    result = session.matcher.kmp_search(request.pattern)
    execution_time = (time.time() - start_time) * 1000
    
    logger.info(
        "KMP search",
        session_id=session.session_id,
        pattern=request.pattern,
        matches=len(result.matches),
        comparisons=result.total_comparisons
    )
    return PatternSearchResponse(
        algorithm="kmp",
        pattern=request.pattern,
        matches=result.matches,
        total_matches=len(result.matches),
        total_comparisons=result.total_comparisons,
        lps_array=result.lps_array,
        operations=session.matcher.get_operations(),
        execution_time_ms=execution_time
    )


@router.get(
    "/operations",
    response_model=OperationLogResponse,
    summary="Get search trace",
    description="Get the trace of the most recent substring search"
)
async def get_operations(session: EngineSession = Depends(get_session)) -> OperationLogResponse:
    """Return the trace of the latest search."""
    return OperationLogResponse(engine="substring", operations=session.matcher.get_operations())


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Clear texts",
    description="Remove every text and the search trace"
)
async def clear_texts(session: EngineSession = Depends(get_session)) -> MessageResponse:
    """Empty the text collection."""
    session.matcher.clear()
    logger.info("Texts cleared", session_id=session.session_id)
    return MessageResponse(message="Texts cleared", size=0)
