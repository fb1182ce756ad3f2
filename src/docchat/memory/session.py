"""
Session domain object.

Per-conversation state: bounded history plus the current document text.
"""
import threading
from typing import List

from .conversation_memory import ConversationMemory, Role, Turn


class Session:
    """
    One client's ongoing conversation.

    The session lock is re-entrant so a request can hold it across the whole
    read-modify-respond sequence while helper methods take it again.
    """

    def __init__(self, session_id: str, max_turns: int = 10, now: float = 0.0):
        self.id = session_id
        self.document: str = ""
        self.created_at = now
        self.last_access = now
        self.lock = threading.RLock()
        self._memory = ConversationMemory(max_turns=max_turns)

    @property
    def history(self) -> List[Turn]:
        return self._memory.turns()

    @property
    def memory(self) -> ConversationMemory:
        return self._memory

    def add_user_turn(self, content: str) -> bool:
        with self.lock:
            return self._memory.record(Turn(Role.USER, content))

    def add_assistant_turn(self, content: str) -> bool:
        with self.lock:
            return self._memory.record(Turn(Role.ASSISTANT, content))

    def set_document(self, text: str) -> None:
        """Replace document memory wholesale."""
        with self.lock:
            self.document = text

    def has_document(self) -> bool:
        return bool(self.document)

    def touch(self, now: float) -> None:
        self.last_access = now

    def idle_for(self, now: float) -> float:
        return now - self.last_access

    def __repr__(self) -> str:
        return (
            f"Session(id={self.id!r}, turns={len(self._memory)}, "
            f"document_chars={len(self.document)})"
        )
