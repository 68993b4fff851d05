"""Case-insensitive prefix tree with autocomplete."""

import time
from typing import Any, Dict, List, Optional

from ..models.response import TrieSearchResult
from .stats import QueryStats


class TrieNode:
    """Single node of the prefix tree."""
    
    def __init__(self) -> None:
        # Child order is first-insertion order; autocomplete relies on it.
        self.children: Dict[str, "TrieNode"] = {}
        self.is_end_of_word = False
        self.word: Optional[str] = None


class PrefixTree:
    """
    Prefix tree over lower-cased characters.
    
    Words are walked in lower case so lookups are case-insensitive, while
    the original spelling of each word is kept on its terminal node and
    returned by autocomplete.
    """
    
    def __init__(self, all_words_limit: int = 1000) -> None:
        """
        Initialize an empty tree.
        
        Args:
            all_words_limit: Cap applied by get_all_words
        """
        self.all_words_limit = all_words_limit
        self.root = TrieNode()
        self._operations: List[str] = []
        self._word_count = 0
        self._stats = QueryStats()
    
    def insert(self, word: str) -> None:
        """
        Insert a word, creating nodes as needed.
        
        Args:
            word: Word to insert; its original case is preserved for output
        """
        current = self.root
        self._operations.append(f'INSERT: "{word}"')
        
        for char in word:
            char = char.lower()
            
            if char not in current.children:
                current.children[char] = TrieNode()
                self._operations.append(f"  Created node for '{char}'")
            else:
                self._operations.append(f"  Found existing node for '{char}'")
            
            current = current.children[char]
        
        if not current.is_end_of_word:
            self._word_count += 1
        current.is_end_of_word = True
        current.word = word
        self._operations.append(f'  Marked end of word: "{word}"')
    
    def search(self, word: str) -> TrieSearchResult:
        """
        Search for a complete word.
        
        Args:
            word: Word to look up
            
        Returns:
            TrieSearchResult; ``steps`` is the number of characters examined
        """
        start_time = time.time()
        current = self.root
        self._operations.append(f'SEARCH: "{word}"')
        steps = 0
        
        for char in word:
            char = char.lower()
            steps += 1
            
            if char not in current.children:
                self._operations.append(f"  '{char}' not found at step {steps}")
                self._stats.record(False, start_time)
                return TrieSearchResult(found=False, steps=steps)
            
            self._operations.append(f"  Found '{char}' at step {steps}")
            current = current.children[char]
        
        found = current.is_end_of_word
        if found:
            self._operations.append("  Complete word found")
        else:
            self._operations.append("  Prefix found but not complete word")
        
        self._stats.record(found, start_time)
        return TrieSearchResult(found=found, steps=steps)
    
    def autocomplete(self, prefix: str, max_results: int = 10) -> List[str]:
        """
        Collect stored words that start with a prefix.
        
        Args:
            prefix: Prefix to complete
            max_results: Maximum number of words to return
            
        Returns:
            Original-case words in pre-order, child insertion order
        """
        start_time = time.time()
        current = self.root
        self._operations.append(f'AUTOCOMPLETE: "{prefix}"')
        
        for char in prefix:
            char = char.lower()
            
            if char not in current.children:
                self._operations.append(f'  Prefix "{prefix}" not found')
                self._stats.record(False, start_time)
                return []
            
            current = current.children[char]
        
        results: List[str] = []
        self._collect_words(current, results, max_results)
        
        self._operations.append(f"  Found {len(results)} suggestions")
        self._stats.record(bool(results), start_time)
        return results
    
    def _collect_words(self, node: TrieNode, results: List[str], max_results: int) -> None:
        if len(results) >= max_results:
            return
        
        if node.is_end_of_word and node.word is not None:
            results.append(node.word)
        
        for child in node.children.values():
            self._collect_words(child, results, max_results)
    
    def get_all_words(self) -> List[str]:
        """Get every stored word, up to ``all_words_limit``."""
        words: List[str] = []
        self._collect_words(self.root, words, self.all_words_limit)
        return words
    
    def word_count(self) -> int:
        """Number of distinct stored words."""
        return self._word_count
    
    def get_operations(self) -> List[str]:
        """Get a copy of the operation log."""
        return list(self._operations)
    
    def clear(self) -> None:
        """Discard every node and the operation log."""
        self.root = TrieNode()
        self._operations = []
        self._word_count = 0
    
    def get_stats(self) -> Dict[str, Any]:
        """Get search and autocomplete statistics."""
        stats = self._stats.as_dict()
        stats["total_words"] = self._word_count
        return stats
