"""
Orchestration of chat requests over session memory.
"""

from .chat_orchestrator import (
    EXTRACTION_ERROR_PREFIX,
    MODEL_ERROR_PREFIX,
    NO_INPUT_REPLY,
    ChatOrchestrator,
)

__all__ = [
    "ChatOrchestrator",
    "NO_INPUT_REPLY",
    "MODEL_ERROR_PREFIX",
    "EXTRACTION_ERROR_PREFIX",
]
