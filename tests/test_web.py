"""
Tests for the Flask HTTP surface.

Every /chat outcome must be HTTP 200 with a ``reply`` field.
"""
import io
import os
from unittest.mock import Mock

import pytest

from docchat.config import DocChatConfig
from docchat.orchestration import MODEL_ERROR_PREFIX, NO_INPUT_REPLY
from docchat.web import SESSION_HEADER, create_app


@pytest.fixture
def static_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Document Chat</h1>")
    return tmp_path


@pytest.fixture
def client_factory(static_dir):
    def _make(orchestrator, **overrides):
        config = DocChatConfig(static_dir=str(static_dir), **overrides)
        app = create_app(orchestrator, config)
        app.testing = True
        return app.test_client()
    return _make


class TestChatEndpoint:
    def test_json_message(self, store, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=["4"])
        client = client_factory(orch)

        response = client.post("/chat", json={"message": "What is 2+2?"}, headers={SESSION_HEADER: "s1"})

        assert response.status_code == 200
        assert response.get_json() == {"reply": "4"}
        assert len(store.get_or_create("s1").history) == 2

    def test_empty_body_returns_sentinel(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator()
        response = client_factory(orch).post("/chat", json={})
        assert response.status_code == 200
        assert response.get_json() == {"reply": NO_INPUT_REPLY}

    def test_non_string_message_is_ignored(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator()
        response = client_factory(orch).post("/chat", json={"message": 42})
        assert response.get_json()["reply"] == NO_INPUT_REPLY

    @pytest.mark.parametrize("body", [["hi"], "hi", 42])
    def test_non_object_json_body_is_empty_input(self, body, make_orchestrator, client_factory):
        orch, llm, _ = make_orchestrator()
        response = client_factory(orch, include_error_codes=True).post("/chat", json=body)
        assert response.status_code == 200
        assert response.get_json() == {"reply": NO_INPUT_REPLY, "error": "no_input"}
        assert llm.prompts == []

    def test_non_string_session_id_is_ignored(self, store, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=["hi"])
        client_factory(orch).post("/chat", json={"message": "hello", "sessionId": ["x"]})
        assert store.has_session("default")

    def test_missing_header_uses_default_session(self, store, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=["hi"])
        client_factory(orch).post("/chat", json={"message": "hello"})
        assert store.has_session("default")

    def test_session_id_from_body(self, store, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=["hi"])
        client_factory(orch).post("/chat", json={"message": "hello", "sessionId": "body-id"})
        assert store.has_session("body-id")

    def test_multipart_pdf_upload(self, store, make_orchestrator, client_factory):
        orch, llm, extractor = make_orchestrator(replies=["It is $500."], text="Contract value: $500")
        client = client_factory(orch)

        response = client.post(
            "/chat",
            data={"message": "", "file": (io.BytesIO(b"%PDF-1.4 test"), "contract.pdf", "application/pdf")},
            headers={SESSION_HEADER: "s1"},
            content_type="multipart/form-data",
        )

        assert response.status_code == 200
        assert response.get_json() == {"reply": "It is $500."}
        assert store.get_or_create("s1").document == "Contract value: $500"
        temp_path, media_type = extractor.calls[0]
        assert media_type == "application/pdf"
        assert not os.path.exists(temp_path)

    def test_extraction_failure_is_still_200(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(error="File is not a valid PDF")
        response = client_factory(orch).post(
            "/chat",
            data={"file": (io.BytesIO(b"junk"), "bad.pdf", "application/pdf")},
            content_type="multipart/form-data",
        )
        assert response.status_code == 200
        assert "File is not a valid PDF" in response.get_json()["reply"]

    def test_model_failure_is_still_200(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=[RuntimeError("quota exceeded")])
        response = client_factory(orch).post("/chat", json={"message": "hi"})
        assert response.status_code == 200
        assert response.get_json() == {"reply": MODEL_ERROR_PREFIX + "quota exceeded"}

    def test_error_codes_opt_in(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=[RuntimeError("down")])
        response = client_factory(orch, include_error_codes=True).post("/chat", json={"message": "hi"})
        body = response.get_json()
        assert body["error"] == "model_error"
        assert "down" in body["reply"]

    def test_success_has_no_error_field_even_when_opted_in(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator(replies=["fine"])
        response = client_factory(orch, include_error_codes=True).post("/chat", json={"message": "hi"})
        assert response.get_json() == {"reply": "fine"}

    def test_orchestrator_crash_is_contained(self, client_factory):
        orchestrator = Mock()
        orchestrator.handle.side_effect = RuntimeError("unexpected")
        response = client_factory(orchestrator).post("/chat", json={"message": "hi"})
        assert response.status_code == 200
        assert response.get_json()["reply"].startswith(MODEL_ERROR_PREFIX)


class TestOtherRoutes:
    def test_health_reports_session_count(self, store, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator()
        store.get_or_create("a")
        store.get_or_create("b")
        response = client_factory(orch).get("/health")
        assert response.get_json() == {"status": "ok", "sessions": 2}

    def test_index_served_from_static_dir(self, make_orchestrator, client_factory):
        orch, _, _ = make_orchestrator()
        response = client_factory(orch).get("/")
        assert response.status_code == 200
        assert b"Document Chat" in response.data
