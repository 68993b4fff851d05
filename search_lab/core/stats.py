"""Query counters shared by the search engines."""

import time
from typing import Any, Dict


class QueryStats:
    """Tracks query counts and execution time for one engine."""
    
    def __init__(self) -> None:
        self.reset()
    
    def reset(self) -> None:
        """Reset all counters."""
        self._stats = {
            "total_queries": 0,
            "hits": 0,
            "misses": 0,
            "total_execution_time": 0.0,
            "last_query": None
        }
    
    def record(self, hit: bool, start_time: float) -> float:
        """
        Record a finished query.
        
        Args:
            hit: Whether the query found anything
            start_time: ``time.time()`` taken when the query started
            
        Returns:
            Execution time of the query in milliseconds
        """
        execution_time = (time.time() - start_time) * 1000
        
        self._stats["total_queries"] += 1
        if hit:
            self._stats["hits"] += 1
        else:
            self._stats["misses"] += 1
        self._stats["total_execution_time"] += execution_time
        self._stats["last_query"] = time.time()
        
        return execution_time
    
    def as_dict(self) -> Dict[str, Any]:
        """Get the counters together with derived rates."""
        stats = self._stats.copy()
        
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["hit_rate"] = stats["hits"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["hit_rate"] = 0.0
        
        return stats
