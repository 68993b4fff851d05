"""
Search Lab - classic search and pattern-matching engines with step traces.

This package provides sorted-array binary search, an exact match key/value
store, a prefix tree with autocomplete and naive/KMP substring search. Every
engine records what it did so a client can replay and visualize it.
"""

__version__ = "1.0.0"

from .core import ExactMatchStore, PatternMatcher, PrefixTree, SortedSequence
from .models.response import (
    BinarySearchResult,
    ExactMatchResult,
    KMPSearchResult,
    NaiveSearchResult,
    SearchMatch,
    SearchStep,
    TrieSearchResult,
)

__all__ = [
    "SortedSequence",
    "ExactMatchStore",
    "PrefixTree",
    "PatternMatcher",
    "SearchStep",
    "BinarySearchResult",
    "ExactMatchResult",
    "TrieSearchResult",
    "SearchMatch",
    "NaiveSearchResult",
    "KMPSearchResult",
]
