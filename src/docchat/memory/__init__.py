"""
Session memory layer.

Per-session bounded history and document memory, plus the store
that owns session lifecycle.
"""
from .conversation_memory import ConversationMemory, Role, Turn
from .session import Session
from .session_store import DEFAULT_SESSION_ID, SessionStore, resolve_session_id
from .session_reaper import SessionReaper

__all__ = [
    "ConversationMemory",
    "Role",
    "Turn",
    "Session",
    "SessionStore",
    "SessionReaper",
    "DEFAULT_SESSION_ID",
    "resolve_session_id",
]
