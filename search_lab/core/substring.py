"""Naive and Knuth-Morris-Pratt substring search over a collection of texts."""

import time
from typing import Any, Dict, Iterable, List, Optional

from ..models.response import KMPSearchResult, NaiveSearchResult, SearchMatch
from .stats import QueryStats


class PatternMatcher:
    """
    Holds texts and searches them for a pattern.
    
    Both search algorithms replace the operation log with the trace of the
    current call, so ``get_operations`` always describes the latest search.
    An empty pattern matches at every offset ``0..len(text)`` of every text
    without any character comparison.
    """
    
    def __init__(self, initial_texts: Optional[Iterable[str]] = None) -> None:
        """
        Initialize the matcher.
        
        Args:
            initial_texts: Optional texts to start with
        """
        self._texts: List[str] = list(initial_texts or [])
        self._operations: List[str] = []
        self._stats = QueryStats()
    
    def add_text(self, text: str) -> None:
        """Append a text to the collection."""
        self._texts.append(text)
    
    def get_texts(self) -> List[str]:
        """Get the texts in insertion order."""
        return list(self._texts)
    
    def get_operations(self) -> List[str]:
        """Get the trace of the most recent search."""
        return list(self._operations)
    
    def clear(self) -> None:
        """Remove all texts and the operation log."""
        self._texts = []
        self._operations = []
    
    def naive_search(self, pattern: str) -> NaiveSearchResult:
        """
        Search every text by checking the pattern at each offset.
        
        Args:
            pattern: Pattern to look for
            
        Returns:
            NaiveSearchResult with the matches and the number of character
            comparisons, the mismatching comparison included
        """
        start_time = time.time()
        self._operations = [f'NAIVE SEARCH: Looking for "{pattern}"']
        matches: List[SearchMatch] = []
        total_comparisons = 0
        m = len(pattern)
        
        for text_number, text in enumerate(self._texts, start=1):
            self._operations.append(f'Searching in text {text_number}: "{text}"')
            
            for i in range(len(text) - m + 1):
                j = 0
                while j < m:
                    total_comparisons += 1
                    if text[i + j] != pattern[j]:
                        break
                    j += 1
                
                if j == m:
                    matches.append(SearchMatch(text=text, index=i, pattern=pattern, match_length=m))
                    self._operations.append(f'  FOUND at position {i}: "{text[i:i + m]}"')
        
        self._operations.append(
            f"Total matches: {len(matches)}, Total comparisons: {total_comparisons}"
        )
        self._stats.record(bool(matches), start_time)
        return NaiveSearchResult(matches=matches, total_comparisons=total_comparisons)
    
    @staticmethod
    def build_lps(pattern: str) -> List[int]:
        """
        Build the KMP failure function.
        
        ``lps[i]`` is the length of the longest proper prefix of
        ``pattern[:i + 1]`` that is also a suffix of it.
        
        Args:
            pattern: Pattern to analyse
            
        Returns:
            List with one entry per pattern character
        """
        lps = [0] * len(pattern)
        length = 0
        i = 1
        
        while i < len(pattern):
            if pattern[i] == pattern[length]:
                length += 1
                lps[i] = length
                i += 1
            elif length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1
        
        return lps
    
    def kmp_search(self, pattern: str) -> KMPSearchResult:
        """
        Search every text with the Knuth-Morris-Pratt algorithm.
        
        Matches, overlapping ones included, are identical in position and
        count to ``naive_search``; only the comparison count and trace differ.
        
        Args:
            pattern: Pattern to look for
            
        Returns:
            KMPSearchResult with the matches, comparison count and LPS array
        """
        start_time = time.time()
        lps = self.build_lps(pattern)
        self._operations = [
            f'KMP SEARCH: Pattern "{pattern}"',
            f"LPS Array: [{', '.join(str(n) for n in lps)}]",
        ]
        matches: List[SearchMatch] = []
        total_comparisons = 0
        m = len(pattern)
        
        for text_number, text in enumerate(self._texts, start=1):
            self._operations.append(f'Searching in text {text_number}: "{text}"')
            
            if m == 0:
                for i in range(len(text) + 1):
                    matches.append(SearchMatch(text=text, index=i, pattern=pattern, match_length=0))
                    self._operations.append(f"  FOUND at position {i}")
                continue
            
            i = 0
            j = 0
            while i < len(text):
                total_comparisons += 1
                
                if text[i] == pattern[j]:
                    self._operations.append(
                        f"  Match: text[{i}]='{text[i]}' = pattern[{j}]='{pattern[j]}'"
                    )
                    i += 1
                    j += 1
                    
                    if j == m:
                        matches.append(
                            SearchMatch(text=text, index=i - j, pattern=pattern, match_length=m)
                        )
                        self._operations.append(f"  FOUND at position {i - j}")
                        j = lps[j - 1]
                else:
                    self._operations.append(
                        f"  Mismatch: text[{i}]='{text[i]}' != pattern[{j}]='{pattern[j]}'"
                    )
                    if j != 0:
                        j = lps[j - 1]
                        self._operations.append(f"  Using LPS: jump to pattern[{j}]")
                    else:
                        i += 1
        
        self._operations.append(
            f"Total matches: {len(matches)}, Total comparisons: {total_comparisons}"
        )
        self._stats.record(bool(matches), start_time)
        return KMPSearchResult(matches=matches, total_comparisons=total_comparisons, lps_array=lps)
    
    def get_stats(self) -> Dict[str, Any]:
        """Get search statistics."""
        stats = self._stats.as_dict()
        stats["total_texts"] = len(self._texts)
        return stats
