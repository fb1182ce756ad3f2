"""
Session store.

Keeps one Session per session ID, created lazily on first use.
Optional idle TTL bounds the memory held by abandoned sessions.
"""
import logging
import threading
import time
from typing import Callable, Dict, Optional

from .session import Session

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"


def resolve_session_id(raw: Optional[str], default: str = DEFAULT_SESSION_ID) -> str:
    """
    Map a client-supplied token to a session ID.

    Missing or blank tokens map to the shared default session.
    """
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


class SessionStore:
    """
    Process-local mapping of session ID to Session.

    Purpose:
    - Isolate history and document memory per client
    - Guarantee at most one Session per ID
    - Evict sessions idle longer than the configured TTL

    Build a fresh store per app (or per test); there is no module-level instance.
    """

    def __init__(
        self,
        max_history_turns: int = 10,
        session_ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        default_session_id: str = DEFAULT_SESSION_ID,
    ):
        """
        Initialize session store.

        :param max_history_turns: Sliding window size for each session
        :param session_ttl_seconds: Idle time after which a session is evicted (None disables eviction)
        :param clock: Monotonic time source, injectable for tests
        :param default_session_id: Session used by clients that send no token
        """
        if not default_session_id or not default_session_id.strip():
            raise ValueError("default_session_id cannot be blank")
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()
        self._max_history_turns = max_history_turns
        self._ttl = session_ttl_seconds
        self._clock = clock
        self._default_session_id = default_session_id.strip()

    @property
    def session_ttl_seconds(self) -> Optional[float]:
        return self._ttl

    @property
    def default_session_id(self) -> str:
        return self._default_session_id

    def resolve_id(self, raw: Optional[str]) -> str:
        """Map a client token to a session ID, using this store's default."""
        return resolve_session_id(raw, default=self._default_session_id)

    def get_or_create(self, session_id: str) -> Session:
        """
        Get or create the session for ``session_id``.

        An existing session that has been idle beyond the TTL is replaced
        with a fresh one.

        :param session_id: Session identifier
        :return: Session instance
        """
        now = self._clock()
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None and self._is_expired(session, now):
                logger.info("Session expired on access: %s", session_id)
                session = None
            if session is None:
                session = Session(session_id, max_turns=self._max_history_turns, now=now)
                self._sessions[session_id] = session
                logger.debug("Created session: %s", session_id)
            session.touch(now)
            return session

    def evict_idle(self) -> int:
        """
        Remove every session idle beyond the TTL.

        :return: Number of sessions evicted
        """
        if self._ttl is None:
            return 0
        now = self._clock()
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if self._is_expired(s, now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("Evicted %d idle session(s)", len(expired))
        return len(expired)

    def touch(self, session: Session) -> None:
        """
        Mark a session as used now.

        Called when a request finishes so a slow model call does not leave
        a just-answered session looking idle.
        """
        session.touch(self._clock())

    def has_session(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _is_expired(self, session: Session, now: float) -> bool:
        if self._ttl is None:
            return False
        # A request in flight holds the lock; never evict under it.
        if not session.lock.acquire(blocking=False):
            return False
        try:
            return session.idle_for(now) > self._ttl
        finally:
            session.lock.release()
