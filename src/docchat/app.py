"""
Public application facade for Document Chat Service.

Single entry point that wires store, extractor, model client and
orchestrator from a DocChatConfig.
"""
import logging
from typing import Optional

from .completion.completion_client import LangChainCompletionClient
from .config import DocChatConfig
from .exceptions import AppNotInitializedError
from .extraction.document_extractor import PdfDocumentExtractor
from .llm_factory import get_llm_instance
from .memory.session_reaper import SessionReaper
from .memory.session_store import SessionStore
from .orchestration.chat_orchestrator import ChatOrchestrator
from .schemas import ChatReply, UploadedFile

logger = logging.getLogger(__name__)


class DocChatApp:
    """
    Public application facade.

    Usage:
        config = load_config_from_env()
        app = DocChatApp(config)
        app.initialize()
        reply = app.chat("What is 2+2?", session_id="s1")
        app.shutdown()
    """

    def __init__(self, config: DocChatConfig):
        """
        :param config: DocChatConfig instance. ``config.llm`` may carry a
            pre-built chat model; otherwise one is created from the provider settings.
        """
        self._config = config
        self._store: Optional[SessionStore] = None
        self._orchestrator: Optional[ChatOrchestrator] = None
        self._reaper: Optional[SessionReaper] = None

    @property
    def config(self) -> DocChatConfig:
        return self._config

    @property
    def orchestrator(self) -> ChatOrchestrator:
        if self._orchestrator is None:
            raise AppNotInitializedError("App not initialized. Call initialize() first.")
        return self._orchestrator

    def initialize(self) -> None:
        """
        Wire all dependencies. Idempotent.

        Starts the idle-session reaper when a session TTL is configured.
        """
        if self._orchestrator is not None:
            return

        config = self._config
        if config.llm is None:
            config.llm = get_llm_instance(provider=config.llm_provider, model=config.llm_model)
        logger.info("LLM ready: provider=%s model=%s", config.llm_provider, config.llm_model)

        self._store = SessionStore(
            max_history_turns=config.memory_max_turns,
            session_ttl_seconds=config.session_ttl_seconds,
            default_session_id=config.default_session_id,
        )
        client = LangChainCompletionClient(
            config.llm,
            max_retries=config.llm_max_retries,
            retry_backoff_seconds=config.llm_retry_backoff_seconds,
        )
        extractor = PdfDocumentExtractor(max_file_bytes=config.max_upload_bytes)
        self._orchestrator = ChatOrchestrator(self._store, extractor, client)

        if config.session_ttl_seconds is not None:
            self._reaper = SessionReaper(
                self._store, interval_seconds=config.session_reap_interval_seconds
            )
            self._reaper.start()

    def chat(
        self,
        message: Optional[str],
        session_id: Optional[str] = None,
        upload: Optional[UploadedFile] = None,
    ) -> ChatReply:
        return self.orchestrator.handle(session_id, message, upload)

    def shutdown(self) -> None:
        if self._reaper is not None:
            self._reaper.stop(timeout=5)
            self._reaper = None
