"""Result and response models for the search engines and API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchStep(BaseModel):
    """One probe of a binary search."""
    
    model_config = ConfigDict(frozen=True)
    
    left: int = Field(..., description="Left bound of the interval before the probe")
    right: int = Field(..., description="Right bound of the interval before the probe")
    mid: int = Field(..., description="Probed index")
    mid_value: int = Field(..., description="Value stored at the probed index")
    comparison: str = Field(..., description="Human readable comparison description")
    found: bool = Field(default=False, description="Whether this probe hit the target")


class BinarySearchResult(BaseModel):
    """Result of a binary search over a sorted sequence."""
    
    found: bool = Field(..., description="Whether the target is in the sequence")
    index: Optional[int] = Field(None, description="Index of the target when found")
    steps: List[SearchStep] = Field(..., description="Every probe made, in order")


class ExactMatchResult(BaseModel):
    """Result of a key lookup in the exact match store."""
    
    found: bool = Field(..., description="Whether the key is stored")
    value: Optional[str] = Field(None, description="Stored value when found")
    steps: int = Field(default=1, description="Lookups performed (always 1)")


class TrieSearchResult(BaseModel):
    """Result of an exact word search in the prefix tree."""
    
    found: bool = Field(..., description="Whether the complete word is stored")
    steps: int = Field(..., description="Characters consumed before failure or exhaustion")


class SearchMatch(BaseModel):
    """One occurrence of a pattern within a text."""
    
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., description="Text the pattern was found in")
    index: int = Field(..., ge=0, description="Starting offset of the match")
    pattern: str = Field(..., description="Pattern that matched")
    match_length: int = Field(..., ge=0, description="Length of the matched pattern")


class NaiveSearchResult(BaseModel):
    """Result of a naive substring search over all stored texts."""
    
    matches: List[SearchMatch] = Field(..., description="Matches in text order")
    total_comparisons: int = Field(..., description="Character comparisons performed")


class KMPSearchResult(BaseModel):
    """Result of a Knuth-Morris-Pratt substring search over all stored texts."""
    
    matches: List[SearchMatch] = Field(..., description="Matches in text order")
    total_comparisons: int = Field(..., description="Character comparisons performed")
    lps_array: List[int] = Field(..., description="Failure function of the pattern")


class SequenceStateResponse(BaseModel):
    """Current contents of the sorted sequence."""
    
    values: List[int] = Field(..., description="Sequence in ascending order")
    size: int = Field(..., description="Number of stored values")


class StoreStateResponse(BaseModel):
    """Current contents of the exact match store."""
    
    entries: Dict[str, str] = Field(..., description="Stored key/value pairs")
    size: int = Field(..., description="Number of stored keys")


class OperationLogResponse(BaseModel):
    """Chronological operation log of an engine."""
    
    engine: str = Field(..., description="Engine that produced the log")
    operations: List[str] = Field(..., description="Log entries, oldest first")


class AutocompleteResponse(BaseModel):
    """Autocomplete suggestions for a prefix."""
    
    prefix: str = Field(..., description="Requested prefix")
    suggestions: List[str] = Field(..., description="Stored words starting with the prefix")
    total_results: int = Field(..., description="Number of suggestions returned")


class WordListResponse(BaseModel):
    """Inventory of the words stored in the prefix tree."""
    
    words: List[str] = Field(..., description="Stored words in traversal order")
    total_words: int = Field(..., description="Number of words returned")


class TextListResponse(BaseModel):
    """Texts held by the pattern matcher."""
    
    texts: List[str] = Field(..., description="Texts in insertion order")
    total_texts: int = Field(..., description="Number of texts")


class PatternSearchResponse(BaseModel):
    """Substring search result together with its comparison trace."""
    
    algorithm: str = Field(..., description="Algorithm used (naive or kmp)")
    pattern: str = Field(..., description="Searched pattern")
    matches: List[SearchMatch] = Field(..., description="Matches in text order")
    total_matches: int = Field(..., description="Number of matches")
    total_comparisons: int = Field(..., description="Character comparisons performed")
    lps_array: Optional[List[int]] = Field(None, description="Failure function (KMP only)")
    operations: List[str] = Field(..., description="Comparison trace")
    execution_time_ms: float = Field(..., description="Search execution time in milliseconds")


class MessageResponse(BaseModel):
    """Acknowledgement of a mutating operation."""
    
    status: str = Field(default="ok", description="Operation status")
    message: str = Field(..., description="What was done")
    size: Optional[int] = Field(None, description="Engine size after the operation")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Engine status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_queries: int = Field(..., description="Queries processed by the current session")
    average_response_time_ms: float = Field(..., description="Average engine query time")
    active_sessions: int = Field(..., description="Sessions currently held")
    engines: Dict[str, Dict[str, Any]] = Field(..., description="Per-engine statistics")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
