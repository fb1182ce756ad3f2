"""
Shared fixtures: fake clock, fake model, fake extractor, fresh store.
"""
import pytest
from langchain_core.messages import AIMessage

from docchat.completion import LangChainCompletionClient
from docchat.exceptions import ExtractionError
from docchat.memory import SessionStore
from docchat.orchestration import ChatOrchestrator


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedLLM:
    """Chat model stand-in: records prompts, returns queued replies or raises."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        if not self.replies:
            return AIMessage(content="ok")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return AIMessage(content=reply)


class FakeExtractor:
    """Returns a fixed text, or raises ExtractionError when ``error`` is set."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def extract(self, file_path, media_type):
        self.calls.append((file_path, media_type))
        if self.error:
            raise ExtractionError(self.error)
        return self.text


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """Fresh store per test."""
    return SessionStore(max_history_turns=10, clock=clock)


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def make_orchestrator(store):
    """Build an orchestrator around a scripted model and fake extractor."""
    def _make(replies=None, text="", error=None, cleanup=None):
        llm = ScriptedLLM(replies)
        extractor = FakeExtractor(text=text, error=error)
        kwargs = {"cleanup": cleanup} if cleanup is not None else {}
        orch = ChatOrchestrator(store, extractor, LangChainCompletionClient(llm), **kwargs)
        return orch, llm, extractor
    return _make
