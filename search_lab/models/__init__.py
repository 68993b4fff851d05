"""Data models for the search lab."""

from .response import (
    SearchStep,
    BinarySearchResult,
    ExactMatchResult,
    TrieSearchResult,
    SearchMatch,
    NaiveSearchResult,
    KMPSearchResult,
    ErrorResponse,
)
from .request import (
    InsertNumberRequest,
    KeyValueRequest,
    WordRequest,
    TextRequest,
    PatternRequest,
)

__all__ = [
    "SearchStep",
    "BinarySearchResult",
    "ExactMatchResult",
    "TrieSearchResult",
    "SearchMatch",
    "NaiveSearchResult",
    "KMPSearchResult",
    "ErrorResponse",
    "InsertNumberRequest",
    "KeyValueRequest",
    "WordRequest",
    "TextRequest",
    "PatternRequest",
]
