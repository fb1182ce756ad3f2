"""
Flask HTTP surface.

Every /chat outcome is HTTP 200 with a ``{"reply": ...}`` body.
"""
import logging
import os
from typing import Optional

from flask import Flask, jsonify, request, send_from_directory

from .config import DocChatConfig
from .orchestration.chat_orchestrator import MODEL_ERROR_PREFIX, ChatOrchestrator
from .schemas import ERROR_INTERNAL, ChatReply, UploadedFile
from .uploads import discard_upload, save_upload

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Id"


def _json_body() -> dict:
    # Valid JSON that is not an object carries no fields.
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _session_token() -> Optional[str]:
    token = request.headers.get(SESSION_HEADER)
    if token:
        return token
    if request.is_json:
        value = _json_body().get("sessionId")
    else:
        value = request.form.get("sessionId")
    return value if isinstance(value, str) else None


def _message() -> str:
    if request.is_json:
        value = _json_body().get("message")
    else:
        value = request.form.get("message")
    return value if isinstance(value, str) else ""


def create_app(orchestrator: ChatOrchestrator, config: Optional[DocChatConfig] = None) -> Flask:
    """
    Build the Flask application.

    :param orchestrator: ChatOrchestrator handling /chat
    :param config: DocChatConfig (defaults are used if omitted)
    :return: Flask app
    """
    config = config or DocChatConfig()
    static_dir = os.path.abspath(config.static_dir)
    app = Flask(__name__, static_folder=None)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes + 1024 * 1024

    @app.route("/")
    def index():
        """Serve the static frontend."""
        return send_from_directory(static_dir, "index.html")

    @app.route("/static/<path:filename>")
    def static_files(filename):
        return send_from_directory(static_dir, filename)

    @app.route("/chat", methods=["POST"])
    def chat():
        """Chat endpoint."""
        upload: Optional[UploadedFile] = None
        try:
            session_id = _session_token()
            message = _message()
            file = request.files.get("file")
            if file is not None and file.filename:
                upload = save_upload(file)
            logger.info(
                "Chat request - Session: %s, message chars: %d, upload: %s",
                session_id, len(message), upload.media_type if upload else None,
            )
            result = orchestrator.handle(session_id, message, upload)
        except Exception as e:
            # Request parsing failed before the orchestrator took ownership.
            logger.error("Chat endpoint error: %s", e, exc_info=True)
            discard_upload(upload)
            result = ChatReply(reply=f"{MODEL_ERROR_PREFIX}{e}", error=ERROR_INTERNAL)
        return jsonify(result.to_dict(include_error=config.include_error_codes)), 200

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "sessions": len(orchestrator.store)})

    return app
