"""
Conversation memory implementation.

Short-term, bounded memory for conversational continuity.
Sliding window over the most recent turns - no embeddings, no persistence.
"""
from enum import Enum
from dataclasses import dataclass
from typing import List


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Turn:
    """One role-tagged message in a conversation."""
    role: Role
    content: str


class ConversationMemory:
    """
    Bounded conversation history.

    Key traits:
    - FIFO eviction (oldest turns dropped first)
    - Empty turns are never stored
    - Insertion order is chronological order
    """

    def __init__(self, max_turns: int = 10):
        """
        Initialize conversation memory.

        :param max_turns: Maximum number of turns to keep
        """
        if max_turns < 1:
            raise ValueError("max_turns must be at least 1")
        self._buffer: List[Turn] = []
        self._max_turns = max_turns

    @property
    def max_turns(self) -> int:
        return self._max_turns

    def record(self, turn: Turn) -> bool:
        """
        Append a turn and enforce the window.

        :param turn: Turn to append
        :return: True if the turn was stored, False if it was empty
        """
        if not turn.content:
            return False
        self._buffer.append(turn)
        if len(self._buffer) > self._max_turns:
            self._buffer = self._buffer[-self._max_turns:]
        return True

    def turns(self) -> List[Turn]:
        """Snapshot of stored turns, oldest first."""
        return list(self._buffer)

    def format_as_chat_history(self) -> str:
        """
        Format history as ``ROLE: content`` lines for prompt injection.

        :return: Formatted chat history string (empty if no turns)
        """
        return "\n".join(
            f"{turn.role.value.upper()}: {turn.content}" for turn in self._buffer
        )

    def __len__(self) -> int:
        return len(self._buffer)
