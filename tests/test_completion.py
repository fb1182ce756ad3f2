"""
Tests for the completion client and reply-text fallback chain.
"""
from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from langchain_core.messages import AIMessage

from docchat.completion import NO_RESPONSE_TEXT, LangChainCompletionClient, extract_reply_text
from docchat.exceptions import CompletionError


class TestExtractReplyText:
    def test_message_content(self):
        assert extract_reply_text(AIMessage(content="4")) == "4"

    def test_content_parts_list(self):
        message = AIMessage(content=[{"type": "text", "text": "from parts"}])
        assert extract_reply_text(message) == "from parts"

    def test_raw_candidates_payload(self):
        payload = {"candidates": [{"content": {"parts": [{"text": "raw"}]}}]}
        assert extract_reply_text(payload) == "raw"

    def test_generic_text_method(self):
        response = SimpleNamespace(content=None, text=lambda: "via accessor")
        assert extract_reply_text(response) == "via accessor"

    def test_generic_text_attribute(self):
        response = SimpleNamespace(text="plain attribute")
        assert extract_reply_text(response) == "plain attribute"

    def test_failing_accessor_falls_back(self):
        def boom():
            raise ValueError("blocked")
        assert extract_reply_text(SimpleNamespace(text=boom)) == NO_RESPONSE_TEXT

    @pytest.mark.parametrize("response", [None, "", {}, {"candidates": []}, SimpleNamespace()])
    def test_literal_fallback(self, response):
        assert extract_reply_text(response) == NO_RESPONSE_TEXT

    def test_plain_string(self):
        assert extract_reply_text("hello") == "hello"


class TestLangChainCompletionClient:
    def test_single_attempt_by_default(self):
        llm = Mock()
        llm.invoke.side_effect = RuntimeError("network down")
        client = LangChainCompletionClient(llm)

        with pytest.raises(CompletionError, match="network down"):
            client.generate("prompt")
        assert llm.invoke.call_count == 1

    def test_returns_raw_response(self):
        llm = Mock()
        llm.invoke.return_value = AIMessage(content="hi")
        assert LangChainCompletionClient(llm).generate("p").content == "hi"
        llm.invoke.assert_called_once_with("p")

    def test_retries_with_exponential_backoff(self):
        llm = Mock()
        llm.invoke.side_effect = [RuntimeError("e1"), RuntimeError("e2"), AIMessage(content="ok")]
        sleep = Mock()
        client = LangChainCompletionClient(llm, max_retries=2, retry_backoff_seconds=0.5, sleep=sleep)

        assert client.generate("p").content == "ok"
        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]

    def test_gives_up_after_max_retries(self):
        llm = Mock()
        llm.invoke.side_effect = RuntimeError("still failing")
        sleep = Mock()
        client = LangChainCompletionClient(llm, max_retries=2, sleep=sleep)

        with pytest.raises(CompletionError, match="still failing"):
            client.generate("p")
        assert llm.invoke.call_count == 3
        assert sleep.call_count == 2

    def test_negative_retries_rejected(self):
        with pytest.raises(ValueError):
            LangChainCompletionClient(Mock(), max_retries=-1)
