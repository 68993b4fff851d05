"""Exact match key/value store with an operation log."""

import time
from typing import Any, Dict, List

from ..models.response import ExactMatchResult
from .stats import QueryStats


class ExactMatchStore:
    """
    String key to string value store.
    
    Lookups delegate to a ``dict``, so every search is reported as a single
    step. Collision chains and bucket layout are not modelled.
    """
    
    def __init__(self) -> None:
        self._table: Dict[str, str] = {}
        self._operations: List[str] = []
        self._stats = QueryStats()
    
    def insert(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.
        
        Args:
            key: Lookup key
            value: Value to associate with the key
        """
        self._table[key] = value
        self._operations.append(f"INSERT: {key} -> {value}")
    
    def search(self, key: str) -> ExactMatchResult:
        """
        Look up a key.
        
        Args:
            key: Key to look up
            
        Returns:
            ExactMatchResult with the stored value when found
        """
        start_time = time.time()
        self._operations.append(f'SEARCH: Looking for "{key}"')
        
        if key in self._table:
            value = self._table[key]
            self._operations.append(f'FOUND: "{key}" -> {value}')
            self._stats.record(True, start_time)
            return ExactMatchResult(found=True, value=value, steps=1)
        
        self._operations.append(f'NOT FOUND: "{key}"')
        self._stats.record(False, start_time)
        return ExactMatchResult(found=False, value=None, steps=1)
    
    def get_operations(self) -> List[str]:
        """Get a copy of the operation log."""
        return list(self._operations)
    
    def get_entries(self) -> Dict[str, str]:
        """Get a copy of the stored entries."""
        return self._table.copy()
    
    def size(self) -> int:
        """Number of stored keys."""
        return len(self._table)
    
    def clear(self) -> None:
        """Remove all entries and the operation log."""
        self._table.clear()
        self._operations = []
    
    def get_stats(self) -> Dict[str, Any]:
        """Get lookup statistics."""
        stats = self._stats.as_dict()
        stats["size"] = len(self._table)
        return stats
