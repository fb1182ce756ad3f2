from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class DocChatConfig:
    # LLM
    llm_provider: str = "google"
    llm_model: str = "gemini-1.5-flash"
    llm_max_retries: int = 0
    llm_retry_backoff_seconds: float = 0.5
    llm: Optional[Any] = None

    # Session memory
    memory_max_turns: int = 10
    default_session_id: str = "default"
    session_ttl_seconds: Optional[float] = None
    session_reap_interval_seconds: float = 60.0

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024

    # HTTP
    include_error_codes: bool = False
    static_dir: str = "public"
    port: int = 3000
