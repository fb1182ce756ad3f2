"""
Completion client over a LangChain chat model.
"""
import logging
import time
from typing import Any, Callable, Protocol

from ..exceptions import CompletionError

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response from model"


class CompletionClient(Protocol):
    """Protocol for the remote text-generation service."""
    def generate(self, prompt: str) -> Any:
        ...


def _first_part_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list) and content:
        part = content[0]
        if isinstance(part, str):
            return part
        if isinstance(part, dict):
            return part.get("text") or ""
    return ""


def _structured_text(response: Any) -> str:
    # Raw generateContent payload: candidates[0].content.parts[0].text
    if isinstance(response, dict):
        try:
            parts = response["candidates"][0]["content"]["parts"]
            return parts[0].get("text") or ""
        except (KeyError, IndexError, TypeError, AttributeError):
            return ""
    return _first_part_text(getattr(response, "content", None))


def _generic_text(response: Any) -> str:
    text = getattr(response, "text", None)
    if callable(text):
        try:
            text = text()
        except Exception:
            logger.debug("Response text accessor failed", exc_info=True)
            return ""
    return text if isinstance(text, str) else ""


def extract_reply_text(response: Any) -> str:
    """
    Pull reply text out of a model response.

    Fallback chain: structured content field, then a generic ``text``
    accessor, then NO_RESPONSE_TEXT.

    :param response: Raw response (AIMessage, dict payload, or similar)
    :return: Non-empty reply string
    """
    if response is None:
        return NO_RESPONSE_TEXT
    if isinstance(response, str):
        return response or NO_RESPONSE_TEXT
    return _structured_text(response) or _generic_text(response) or NO_RESPONSE_TEXT


class LangChainCompletionClient:
    """
    Sends a prompt string to a LangChain chat model.

    With ``max_retries=0`` exactly one attempt is made. Retries use
    exponential backoff: ``retry_backoff_seconds * 2 ** attempt``.
    """

    def __init__(
        self,
        llm: Any,
        max_retries: int = 0,
        retry_backoff_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        :param llm: Object exposing ``invoke(prompt)`` (any LangChain chat model)
        :param max_retries: Extra attempts after the first failure
        :param retry_backoff_seconds: Base delay between attempts
        :param sleep: Sleep function, injectable for tests
        """
        if max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        self._llm = llm
        self._max_retries = max_retries
        self._backoff = retry_backoff_seconds
        self._sleep = sleep

    def generate(self, prompt: str) -> Any:
        """
        Invoke the model.

        :param prompt: Full prompt string
        :return: Raw model response
        :raises CompletionError: when every attempt fails
        """
        attempt = 0
        while True:
            start = time.time()
            try:
                response = self._llm.invoke(prompt)
                latency_ms = int((time.time() - start) * 1000)
                logger.info("Model responded in %dms (attempt %d)", latency_ms, attempt + 1)
                return response
            except Exception as e:
                if attempt >= self._max_retries:
                    raise CompletionError(str(e) or e.__class__.__name__) from e
                delay = self._backoff * (2 ** attempt)
                logger.warning(
                    "Model call failed (attempt %d/%d): %s; retrying in %.2fs",
                    attempt + 1, self._max_retries + 1, e, delay,
                )
                self._sleep(delay)
                attempt += 1
