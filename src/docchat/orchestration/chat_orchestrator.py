"""
Chat orchestrator.

Request-level coordinator: session → document memory → history → prompt →
model → history. Every outcome is a ChatReply; nothing propagates.
"""
import logging
from typing import Callable, Optional

from ..agent.prompt_builder import build_prompt
from ..completion.completion_client import CompletionClient, extract_reply_text
from ..extraction.document_extractor import DocumentExtractor, is_extractable
from ..memory.session import Session
from ..memory.session_store import SessionStore
from ..schemas import (
    ERROR_EXTRACTION_FAILED,
    ERROR_INTERNAL,
    ERROR_MODEL,
    ERROR_NO_INPUT,
    ChatReply,
    UploadedFile,
)
from ..uploads import discard_upload

logger = logging.getLogger(__name__)

NO_INPUT_REPLY = "No input received"
MODEL_ERROR_PREFIX = "AI error occurred: "
EXTRACTION_ERROR_PREFIX = "Document error occurred: "


class ChatOrchestrator:
    """
    Orchestrates one chat request against session memory.

    The session lock is held for the whole request, so requests on one
    session are serialized and requests on different sessions are not.

    OOP: Dependency Inversion - store, extractor and client are injected.
    """

    def __init__(
        self,
        store: SessionStore,
        extractor: DocumentExtractor,
        client: CompletionClient,
        prompt_builder: Callable[[Session, str], str] = build_prompt,
        cleanup: Callable[[Optional[UploadedFile]], None] = discard_upload,
    ):
        """
        Initialize chat orchestrator.

        :param store: SessionStore owning session state
        :param extractor: DocumentExtractor for uploaded documents
        :param client: CompletionClient for the remote model
        :param prompt_builder: Pure prompt assembly function
        :param cleanup: Best-effort removal of the temporary upload
        """
        self._store = store
        self._extractor = extractor
        self._client = client
        self._build_prompt = prompt_builder
        self._cleanup = cleanup

    @property
    def store(self) -> SessionStore:
        return self._store

    def handle(
        self,
        session_id: Optional[str],
        user_message: Optional[str],
        upload: Optional[UploadedFile] = None,
    ) -> ChatReply:
        """
        Handle one chat request.

        :param session_id: Client session token (None maps to the default session)
        :param user_message: User text (may be empty)
        :param upload: Optional temporary uploaded file, removed afterwards
        :return: ChatReply (never raises)
        """
        session = self._store.get_or_create(self._store.resolve_id(session_id))
        try:
            with session.lock:
                try:
                    return self._handle_locked(session, user_message or "", upload)
                finally:
                    self._store.touch(session)
        except Exception as e:
            logger.exception("Unexpected chat failure - Session: %s", session.id)
            return ChatReply(reply=f"{MODEL_ERROR_PREFIX}{e}", error=ERROR_INTERNAL)
        finally:
            self._discard(upload)

    def _handle_locked(
        self, session: Session, message: str, upload: Optional[UploadedFile]
    ) -> ChatReply:
        if upload is not None:
            failure = self._update_document(session, upload)
            if failure is not None:
                return failure

        # Whitespace-only counts as empty; real messages are stored as sent.
        has_message = bool(message.strip())
        if not has_message and not session.has_document():
            logger.info("Empty request - Session: %s", session.id)
            return ChatReply(reply=NO_INPUT_REPLY, error=ERROR_NO_INPUT)

        if has_message:
            session.add_user_turn(message)

        prompt = self._build_prompt(session, message)
        logger.debug("Prompt built - Session: %s, chars: %d", session.id, len(prompt))

        try:
            response = self._client.generate(prompt)
        except Exception as e:
            logger.error("Model call failed - Session: %s: %s", session.id, e, exc_info=True)
            return ChatReply(reply=f"{MODEL_ERROR_PREFIX}{e}", error=ERROR_MODEL)

        reply = extract_reply_text(response)
        session.add_assistant_turn(reply)
        logger.info(
            "Chat reply - Session: %s, turns: %d, reply chars: %d",
            session.id, len(session.memory), len(reply),
        )
        return ChatReply(reply=reply)

    def _update_document(self, session: Session, upload: UploadedFile) -> Optional[ChatReply]:
        """
        Replace document memory from an extractable upload.

        :return: Failure reply, or None on success / pass-through
        """
        if not is_extractable(upload.media_type):
            logger.info(
                "Upload passed through - Session: %s, type: %s, file: %s",
                session.id, upload.media_type, upload.filename,
            )
            return None

        try:
            text = self._extractor.extract(upload.path, upload.media_type)
        except Exception as e:
            logger.error("Extraction failed - Session: %s: %s", session.id, e, exc_info=True)
            return ChatReply(reply=f"{EXTRACTION_ERROR_PREFIX}{e}", error=ERROR_EXTRACTION_FAILED)

        session.set_document((text or "").strip())
        logger.info(
            "Document stored - Session: %s, file: %s, chars: %d",
            session.id, upload.filename, len(session.document),
        )
        return None

    def _discard(self, upload: Optional[UploadedFile]) -> None:
        if upload is None:
            return
        try:
            self._cleanup(upload)
        except Exception:
            logger.debug("Upload cleanup failed", exc_info=True)
