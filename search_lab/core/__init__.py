"""Core search engines."""

from .binary_search import SortedSequence
from .exact_match import ExactMatchStore
from .trie import PrefixTree, TrieNode
from .substring import PatternMatcher
from .stats import QueryStats

__all__ = [
    "SortedSequence",
    "ExactMatchStore",
    "PrefixTree",
    "TrieNode",
    "PatternMatcher",
    "QueryStats",
]
