"""
Document chat service: session-scoped conversational memory in front of a
remote LLM, with optional PDF context.
"""
from .app import DocChatApp
from .config import DocChatConfig
from .config_loader import load_config_from_env
from .schemas import ChatReply, UploadedFile

__all__ = [
    "DocChatApp",
    "DocChatConfig",
    "load_config_from_env",
    "ChatReply",
    "UploadedFile",
]

__version__ = "1.0.0"
