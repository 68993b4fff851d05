"""Binary search API endpoints."""

from fastapi import APIRouter, Depends, Path
import structlog

from ..models.request import InsertNumberRequest
from ..models.response import BinarySearchResult, MessageResponse, SequenceStateResponse
from ..session import EngineSession
from .deps import get_session

router = APIRouter(prefix="/api/v1/binary-search", tags=["binary-search"])
logger = structlog.get_logger(__name__)


@router.get(
    "",
    response_model=SequenceStateResponse,
    summary="Get the sorted sequence",
    description="Get the current contents of the sorted sequence"
)
async def get_sequence(session: EngineSession = Depends(get_session)) -> SequenceStateResponse:
    """Return the sequence in ascending order."""
    return SequenceStateResponse(
        values=session.sequence.get_values(),
        size=session.sequence.size()
    )


@router.post(
    "/insert",
    response_model=SequenceStateResponse,
    summary="Insert a value",
    description="Insert an integer at its sorted position"
)
async def insert_value(
    request: InsertNumberRequest,
    session: EngineSession = Depends(get_session)
) -> SequenceStateResponse:
    """Insert a value and return the updated sequence."""
    session.sequence.insert(request.value)
    logger.info("Value inserted", session_id=session.session_id, value=request.value)
    
    return SequenceStateResponse(
        values=session.sequence.get_values(),
        size=session.sequence.size()
    )


@router.get(
    "/search/{target}",
    response_model=BinarySearchResult,
    summary="Binary search",
    description="Search the sorted sequence and return every probe made"
)
async def search_value(
    target: int = Path(..., description="The integer to search for"),
    session: EngineSession = Depends(get_session)
) -> BinarySearchResult:
    """
    Binary search for a target.
    
    The response carries the full probe trace so the narrowing interval
    can be replayed.
    """
    result = session.sequence.search(target)
    logger.info(
        "Binary search",
        session_id=session.session_id,
        target=target,
        found=result.found,
        steps=len(result.steps)
    )
    return result


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Clear the sequence",
    description="Remove every value and the search trace"
)
async def clear_sequence(session: EngineSession = Depends(get_session)) -> MessageResponse:
    """Empty the sorted sequence."""
    session.sequence.clear()
    logger.info("Sequence cleared", session_id=session.session_id)
    return MessageResponse(message="Sequence cleared", size=0)
