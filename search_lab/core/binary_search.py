"""Sorted integer sequence with a traced binary search."""

import bisect
import time
from typing import Any, Dict, Iterable, List, Optional

from ..models.response import BinarySearchResult, SearchStep
from .stats import QueryStats


class SortedSequence:
    """Integer sequence kept in ascending order, searchable by binary search."""
    
    def __init__(self, initial_values: Optional[Iterable[int]] = None) -> None:
        """
        Initialize the sequence.
        
        Args:
            initial_values: Optional values to start with, in any order
        """
        self._values: List[int] = sorted(initial_values or [])
        self._steps: List[SearchStep] = []
        self._stats = QueryStats()
    
    def insert(self, value: int) -> None:
        """
        Insert a value at its sorted position.
        
        Args:
            value: Integer to insert; duplicates are allowed
        """
        bisect.insort(self._values, value)
    
    def search(self, target: int) -> BinarySearchResult:
        """
        Binary search for a target, recording every probe.
        
        Args:
            target: Value to look for
            
        Returns:
            BinarySearchResult with the index of the target and the probe trace
        """
        start_time = time.time()
        self._steps = []
        left = 0
        right = len(self._values) - 1
        
        while left <= right:
            mid = (left + right) // 2
            mid_value = self._values[mid]
            comparison = f"array[{mid}] = {mid_value} vs target {target}"
            
            if mid_value == target:
                self._steps.append(SearchStep(
                    left=left,
                    right=right,
                    mid=mid,
                    mid_value=mid_value,
                    comparison=f"{comparison} -> {mid_value} == {target}, found",
                    found=True
                ))
                self._stats.record(True, start_time)
                return BinarySearchResult(found=True, index=mid, steps=list(self._steps))
            
            if mid_value < target:
                comparison += f" -> {mid_value} < {target}, search right half"
                next_left, next_right = mid + 1, right
            else:
                comparison += f" -> {mid_value} > {target}, search left half"
                next_left, next_right = left, mid - 1
            
            self._steps.append(SearchStep(
                left=left, right=right, mid=mid, mid_value=mid_value, comparison=comparison
            ))
            left, right = next_left, next_right
        
        self._stats.record(False, start_time)
        return BinarySearchResult(found=False, index=None, steps=list(self._steps))
    
    def get_values(self) -> List[int]:
        """Get a copy of the sequence."""
        return list(self._values)
    
    def get_steps(self) -> List[SearchStep]:
        """Get the probe trace of the most recent search."""
        return list(self._steps)
    
    def size(self) -> int:
        """Number of stored values."""
        return len(self._values)
    
    def clear(self) -> None:
        """Empty the sequence and discard the trace."""
        self._values = []
        self._steps = []
    
    def get_stats(self) -> Dict[str, Any]:
        """Get search statistics."""
        stats = self._stats.as_dict()
        stats["size"] = len(self._values)
        return stats
