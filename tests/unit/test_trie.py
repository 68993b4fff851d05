"""Unit tests for the prefix tree."""

import pytest
from search_lab.core.trie import PrefixTree, TrieNode


class TestPrefixTree:
    """Test cases for the PrefixTree class."""
    
    @pytest.fixture
    def trie(self):
        """Create an empty prefix tree."""
        return PrefixTree()
    
    @pytest.fixture
    def sample_trie(self):
        """Create a tree holding a few words."""
        trie = PrefixTree()
        for word in ["apple", "app", "Apply", "banana", "band", "cat"]:
            trie.insert(word)
        return trie
    
    def test_initialization(self, trie):
        """Test an empty tree."""
        assert isinstance(trie.root, TrieNode)
        assert trie.root.children == {}
        assert trie.root.is_end_of_word is False
        assert trie.word_count() == 0
        assert trie.get_all_words() == []
    
    def test_insert_creates_nodes(self, trie):
        """Test that insert creates one node per character."""
        trie.insert("app")
        
        node = trie.root
        for char in "app":
            assert char in node.children
            node = node.children[char]
        assert node.is_end_of_word is True
        assert node.word == "app"
    
    def test_insert_log(self, trie):
        """Test created and reused node log entries."""
        trie.insert("ab")
        trie.insert("ac")
        
        assert trie.get_operations() == [
            'INSERT: "ab"',
            "  Created node for 'a'",
            "  Created node for 'b'",
            '  Marked end of word: "ab"',
            'INSERT: "ac"',
            "  Found existing node for 'a'",
            "  Created node for 'c'",
            '  Marked end of word: "ac"',
        ]
    
    def test_prefix_and_word(self, trie):
        """Test inserting a word and one of its prefixes."""
        trie.insert("app")
        trie.insert("apple")
        
        assert trie.search("app").found is True
        assert trie.search("apple").found is True
        suggestions = trie.autocomplete("ap")
        assert "app" in suggestions
        assert "apple" in suggestions
    
    def test_search_prefix_only(self, sample_trie):
        """Test that a stored prefix without an end marker is not found."""
        result = sample_trie.search("ban")
        
        assert result.found is False
        assert result.steps == 3
        assert sample_trie.get_operations()[-1] == "  Prefix found but not complete word"
    
    def test_search_missing_edge(self, sample_trie):
        """Test that search stops at the first missing child."""
        result = sample_trie.search("bat")
        
        assert result.found is False
        assert result.steps == 3
        assert sample_trie.get_operations()[-1] == "  't' not found at step 3"
        
        result = sample_trie.search("zebra")
        assert result.found is False
        assert result.steps == 1
    
    def test_search_full_word_steps(self, sample_trie):
        """Test that a full match consumes every character."""
        result = sample_trie.search("banana")
        
        assert result.found is True
        assert result.steps == 6
    
    def test_case_insensitive(self, sample_trie):
        """Test that lookups ignore case and output keeps it."""
        assert sample_trie.search("APPLY").found is True
        assert sample_trie.search("Cat").found is True
        assert "Apply" in sample_trie.autocomplete("APP")
    
    def test_reinsert_overwrites_original_case(self, sample_trie):
        """Test that re-inserting only replaces the stored spelling."""
        sample_trie.insert("CAT")
        
        assert sample_trie.word_count() == 6
        assert sample_trie.autocomplete("c") == ["CAT"]
    
    def test_autocomplete_order(self, sample_trie):
        """Test pre-order traversal in child insertion order."""
        assert sample_trie.autocomplete("ap") == ["app", "apple", "Apply"]
        assert sample_trie.autocomplete("ban") == ["banana", "band"]
    
    def test_autocomplete_missing_prefix(self, sample_trie):
        """Test autocomplete for a prefix that is not stored."""
        assert sample_trie.autocomplete("dog") == []
        assert sample_trie.get_operations()[-1] == '  Prefix "dog" not found'
    
    def test_autocomplete_includes_prefix_word(self, sample_trie):
        """Test that a complete word equal to the prefix is returned first."""
        assert sample_trie.autocomplete("app")[0] == "app"
    
    def test_autocomplete_log(self, sample_trie):
        """Test autocomplete log entries."""
        sample_trie.autocomplete("ba")
        
        assert sample_trie.get_operations()[-2:] == [
            'AUTOCOMPLETE: "ba"',
            "  Found 2 suggestions",
        ]
    
    def test_autocomplete_max_results(self, trie):
        """Test that autocomplete is capped regardless of tree size."""
        for i in range(1000):
            trie.insert(f"ap{i}")
        
        assert len(trie.autocomplete("ap", max_results=10)) == 10
        assert len(trie.autocomplete("ap")) == 10
        assert trie.autocomplete("ap", max_results=3) == ["ap0", "ap1", "ap10"]
    
    def test_get_all_words(self, sample_trie):
        """Test the word inventory."""
        assert sample_trie.get_all_words() == ["app", "apple", "Apply", "banana", "band", "cat"]
    
    def test_get_all_words_limit(self):
        """Test the inventory cap."""
        trie = PrefixTree(all_words_limit=5)
        for i in range(20):
            trie.insert(f"word{i}")
        
        assert len(trie.get_all_words()) == 5
    
    def test_clear(self, sample_trie):
        """Test that clear replaces the root."""
        old_root = sample_trie.root
        sample_trie.clear()
        
        assert sample_trie.root is not old_root
        assert sample_trie.get_all_words() == []
        assert sample_trie.get_operations() == []
        assert sample_trie.word_count() == 0
        assert sample_trie.search("apple").found is False
    
    def test_stats(self, sample_trie):
        """Test search statistics."""
        sample_trie.search("cat")
        sample_trie.search("dog")
        sample_trie.autocomplete("ba")
        stats = sample_trie.get_stats()
        
        assert stats["total_queries"] == 3
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert stats["total_words"] == 6
