"""Prefix tree API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
import structlog

from ..config import Settings
from ..models.request import WordRequest
from ..models.response import (
    AutocompleteResponse,
    MessageResponse,
    OperationLogResponse,
    TrieSearchResult,
    WordListResponse,
)
from ..session import EngineSession
from .deps import check_length, get_app_settings, get_session

router = APIRouter(prefix="/api/v1/trie", tags=["trie"])
logger = structlog.get_logger(__name__)


@router.post(
    "/insert",
    response_model=MessageResponse,
    summary="Insert a word",
    description="Insert a word into the prefix tree, keeping its original case for output"
)
async def insert_word(
    request: WordRequest,
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> MessageResponse:
    """Insert a word."""
    check_length(request.word, settings.max_word_length, "Word")
    
    session.trie.insert(request.word)
    logger.info("Word inserted", session_id=session.session_id, word=request.word)
    
    return MessageResponse(message=f"Inserted '{request.word}'", size=session.trie.word_count())


@router.get(
    "/search/{word}",
    response_model=TrieSearchResult,
    summary="Exact word search",
    description="Check whether a complete word is stored (case-insensitive)"
)
async def search_word(
    word: str = Path(..., description="The word to search for", min_length=1),
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> TrieSearchResult:
    """Search for a complete word; a stored prefix alone is not a match."""
    check_length(word, settings.max_word_length, "Word")
    
    result = session.trie.search(word)
    logger.info(
        "Word search",
        session_id=session.session_id,
        word=word,
        found=result.found,
        steps=result.steps
    )
    return result


@router.get(
    "/autocomplete/{prefix}",
    response_model=AutocompleteResponse,
    summary="Autocomplete a prefix",
    description="Get stored words that start with a prefix"
)
async def autocomplete(
    prefix: str = Path(..., description="The prefix to complete", min_length=1),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=1000,
        description="Maximum number of suggestions to return"
    ),
    session: EngineSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings)
) -> AutocompleteResponse:
    """
    Complete a prefix.
    
    Suggestions come back in tree traversal order, which follows the order
    in which characters were first inserted.
    """
    check_length(prefix, settings.max_word_length, "Prefix")
    
    suggestions = session.trie.autocomplete(
        prefix,
        max_results=max_results or settings.autocomplete_max_results
    )
    logger.info(
        "Autocomplete",
        session_id=session.session_id,
        prefix=prefix,
        total_results=len(suggestions)
    )
    return AutocompleteResponse(
        prefix=prefix,
        suggestions=suggestions,
        total_results=len(suggestions)
    )


@router.get(
    "/words",
    response_model=WordListResponse,
    summary="List stored words",
    description="Get every stored word, up to the configured limit"
)
async def get_all_words(session: EngineSession = Depends(get_session)) -> WordListResponse:
    """Return the word inventory."""
    words = session.trie.get_all_words()
    return WordListResponse(words=words, total_words=len(words))


@router.get(
    "/operations",
    response_model=OperationLogResponse,
    summary="Get operation log",
    description="Get the chronological log of inserts, searches and autocompletes"
)
async def get_operations(session: EngineSession = Depends(get_session)) -> OperationLogResponse:
    """Return the operation log."""
    return OperationLogResponse(engine="trie", operations=session.trie.get_operations())


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Clear the tree",
    description="Discard every word and the operation log"
)
async def clear_trie(session: EngineSession = Depends(get_session)) -> MessageResponse:
    """Empty the prefix tree."""
    session.trie.clear()
    logger.info("Trie cleared", session_id=session.session_id)
    return MessageResponse(message="Trie cleared", size=0)
