"""
Background eviction of idle sessions.
"""
import logging
import threading
from typing import Optional

from .session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionReaper:
    """
    Daemon thread that calls ``store.evict_idle()`` at a fixed interval.

    Usage:
        reaper = SessionReaper(store, interval_seconds=60)
        reaper.start()
        ...
        reaper.stop()
    """

    def __init__(self, store: SessionStore, interval_seconds: float = 60.0):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._store = store
        self._interval = interval_seconds
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="session-reaper", daemon=True
        )
        self._thread.start()
        logger.info("Session reaper started (interval=%ss)", self._interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Session reaper stopped")

    def run_once(self) -> int:
        return self._store.evict_idle()

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self.run_once()
            except Exception:
                # Keep the thread alive; the next tick retries.
                logger.exception("Session eviction failed")
