from typing import Dict, Any, Callable, Iterator, List, Optional
from collections import OrderedDict
from dataclasses import dataclass, field
import logging
import threading
import time

from config import CONFIG

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"

# An attempt counts as a success at the same score a syllable counts as correct
SUCCESS_THRESHOLD = 80

class RecentWords:
    """Ordered set of recently generated words; the oldest is evicted past `limit`."""

    def __init__(self, limit: int = 10):
        self.limit = limit
        self._words: "OrderedDict[str, None]" = OrderedDict()

    def add(self, word: str) -> None:
        if word in self._words:
            self._words.move_to_end(word)
        else:
            self._words[word] = None
        while len(self._words) > self.limit:
            evicted, _ = self._words.popitem(last=False)
            logger.debug("[Session] Evicted recent word %r", evicted)

    def to_list(self) -> List[str]:
        return list(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __len__(self) -> int:
        return len(self._words)

@dataclass
class PracticeStats:
    total_attempts: int = 0
    successful_attempts: int = 0
    current_streak: int = 0
    best_streak: int = 0
    average_score: float = 0.0

    def record(self, score: float) -> None:
        """Fold one scored attempt into the running counters."""
        successful = score >= SUCCESS_THRESHOLD
        self.current_streak = self.current_streak + 1 if successful else 0
        self.best_streak = max(self.best_streak, self.current_streak)
        self.average_score = (
            (self.average_score * self.total_attempts + score) / (self.total_attempts + 1)
        )
        self.total_attempts += 1
        if successful:
            self.successful_attempts += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAttempts": self.total_attempts,
            "successfulAttempts": self.successful_attempts,
            "currentStreak": self.current_streak,
            "bestStreak": self.best_streak,
            "averageScore": self.average_score,
        }

@dataclass
class Session:
    session_id: str
    recent_words: RecentWords
    current_word: Optional[str] = None
    reference_audio: Optional[bytes] = None
    audio_stored_at: float = 0.0
    stats: PracticeStats = field(default_factory=PracticeStats)
    last_seen: float = 0.0

class SessionStore:
    """
    In-memory sessions keyed by client-supplied session id.

    Holds at most `max_sessions` sessions (least recently used evicted first);
    sessions idle for `session_ttl` seconds and reference audio older than
    `audio_ttl` seconds are dropped when next looked at.
    """

    def __init__(
        self,
        max_sessions: int = 1000,
        session_ttl: float = 3600,
        audio_ttl: float = 3600,
        recent_words_limit: int = 10,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_sessions = max_sessions
        self.session_ttl = session_ttl
        self.audio_ttl = audio_ttl
        self.recent_words_limit = recent_words_limit
        self._clock = clock
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Session:
        """Get or create a session, refreshing its LRU position."""
        session_id = session_id or DEFAULT_SESSION_ID
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            session = self._sessions.get(session_id)
            if session is None:
                session = Session(
                    session_id=session_id,
                    recent_words=RecentWords(self.recent_words_limit),
                )
                self._sessions[session_id] = session
                while len(self._sessions) > self.max_sessions:
                    evicted_id, _ = self._sessions.popitem(last=False)
                    logger.info("[Session] Evicted least recently used session %s", evicted_id)
            else:
                self._sessions.move_to_end(session_id)
            session.last_seen = now
            return session

    def store_audio(self, session_id: str, audio: bytes) -> None:
        session = self.get(session_id)
        session.reference_audio = audio
        session.audio_stored_at = self._clock()

    def get_audio(self, session_id: str) -> Optional[bytes]:
        session = self.get(session_id)
        if session.reference_audio is None:
            return None
        if self._clock() - session.audio_stored_at > self.audio_ttl:
            logger.info("[Session] Reference audio for %s expired", session.session_id)
            session.reference_audio = None
            return None
        return session.reference_audio

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def _purge_expired(self, now: float) -> None:
        expired = [
            sid for sid, s in self._sessions.items()
            if now - s.last_seen > self.session_ttl
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("[Session] Expired %d idle session(s)", len(expired))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

SESSIONS = SessionStore(
    max_sessions=CONFIG.MAX_SESSIONS,
    session_ttl=CONFIG.SESSION_TTL_SECONDS,
    audio_ttl=CONFIG.AUDIO_TTL_SECONDS,
    recent_words_limit=CONFIG.RECENT_WORDS_LIMIT,
)

def get_session(session_id: str) -> Session:
    """Get or create a session."""
    return SESSIONS.get(session_id)
