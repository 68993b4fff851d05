"""API endpoints for the search lab."""

from .binary_search import router as binary_search_router
from .hash_table import router as hash_table_router
from .trie import router as trie_router
from .substring import router as substring_router
from .session import router as session_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "binary_search_router",
    "hash_table_router",
    "trie_router",
    "substring_router",
    "session_router",
    "health_router",
    "metrics_router",
]
