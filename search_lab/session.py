"""Per-client engine sessions."""

from collections import OrderedDict
from typing import Any, Dict, List, Optional

import structlog

from .config import Settings, get_settings
from .core import ExactMatchStore, PatternMatcher, PrefixTree, SortedSequence
from .samples import SAMPLE_ENTRIES, SAMPLE_SEQUENCE, SAMPLE_TEXTS, SAMPLE_WORDS

logger = structlog.get_logger(__name__)


class EngineSession:
    """One instance of every search engine, owned by a single client."""
    
    def __init__(self, session_id: str, settings: Optional[Settings] = None) -> None:
        """
        Initialize empty engines.
        
        Args:
            session_id: Identifier of the owning client
            settings: Application settings (cached settings if None)
        """
        settings = settings or get_settings()
        self.session_id = session_id
        self.sequence = SortedSequence()
        self.store = ExactMatchStore()
        self.trie = PrefixTree(all_words_limit=settings.all_words_limit)
        self.matcher = PatternMatcher()
    
    def seed(self) -> None:
        """Load the sample data set into every engine."""
        for value in SAMPLE_SEQUENCE:
            self.sequence.insert(value)
        for key, value in SAMPLE_ENTRIES.items():
            self.store.insert(key, value)
        for word in SAMPLE_WORDS:
            self.trie.insert(word)
        for text in SAMPLE_TEXTS:
            self.matcher.add_text(text)
        
        logger.info(
            "Session seeded",
            session_id=self.session_id,
            values=self.sequence.size(),
            entries=self.store.size(),
            words=self.trie.word_count(),
            texts=len(self.matcher.get_texts())
        )
    
    def reset(self) -> None:
        """Clear every engine."""
        self.sequence.clear()
        self.store.clear()
        self.trie.clear()
        self.matcher.clear()
        logger.info("Session reset", session_id=self.session_id)
    
    def get_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics of every engine, keyed by engine name."""
        return {
            "binary_search": self.sequence.get_stats(),
            "hash_table": self.store.get_stats(),
            "trie": self.trie.get_stats(),
            "substring": self.matcher.get_stats(),
        }


class SessionRegistry:
    """Holds engine sessions by id, evicting the least recently used."""
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._sessions: "OrderedDict[str, EngineSession]" = OrderedDict()
    
    def get(self, session_id: str) -> EngineSession:
        """
        Get a session, creating it on first use.
        
        Args:
            session_id: Client session identifier
            
        Returns:
            The session's EngineSession
        """
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session
        
        session = EngineSession(session_id, self.settings)
        if self.settings.seed_sample_data:
            session.seed()
        self._sessions[session_id] = session
        logger.info("Session created", session_id=session_id, active_sessions=len(self._sessions))
        
        while len(self._sessions) > self.settings.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Session evicted", session_id=evicted_id)
        
        return session
    
    def peek(self, session_id: str) -> Optional[EngineSession]:
        """
        Get an existing session without creating it or refreshing its age.
        
        Returns:
            The session, or None if it is not held
        """
        return self._sessions.get(session_id)
    
    def sessions(self) -> List[EngineSession]:
        """All held sessions, least recently used first."""
        return list(self._sessions.values())
    
    def drop(self, session_id: str) -> bool:
        """
        Forget a session.
        
        Returns:
            True if the session existed
        """
        if session_id in self._sessions:
            del self._sessions[session_id]
            logger.info("Session dropped", session_id=session_id)
            return True
        return False
    
    def session_ids(self) -> List[str]:
        """Ids of all held sessions, least recently used first."""
        return list(self._sessions.keys())
    
    def __len__(self) -> int:
        return len(self._sessions)
