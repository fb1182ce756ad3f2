from dataclasses import dataclass
from typing import Any, Dict, Optional


# Machine-readable failure kinds carried next to the reply text.
ERROR_NO_INPUT = "no_input"
ERROR_EXTRACTION_FAILED = "extraction_failed"
ERROR_MODEL = "model_error"
ERROR_INTERNAL = "internal_error"


@dataclass
class UploadedFile:
    """A request-scoped temporary upload."""
    path: str
    media_type: str
    filename: Optional[str] = None


@dataclass
class ChatReply:
    reply: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self, include_error: bool = False) -> Dict[str, Any]:
        body: Dict[str, Any] = {"reply": self.reply}
        if include_error and self.error:
            body["error"] = self.error
        return body
