from .completion_client import (
    NO_RESPONSE_TEXT,
    CompletionClient,
    LangChainCompletionClient,
    extract_reply_text,
)

__all__ = [
    "NO_RESPONSE_TEXT",
    "CompletionClient",
    "LangChainCompletionClient",
    "extract_reply_text",
]
