class DocChatError(Exception):
    """Base exception for document chat service."""


class ConfigurationError(DocChatError):
    """Raised when required configuration is missing or invalid."""


class ExtractionError(DocChatError):
    """Raised when text cannot be extracted from an uploaded document."""


class CompletionError(DocChatError):
    """Raised when the completion service call fails."""


class AppNotInitializedError(DocChatError):
    """Raised when the app facade is used before initialize()."""
