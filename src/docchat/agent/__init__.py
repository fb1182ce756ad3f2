from .prompt_builder import build_prompt
from .prompts import CHAT_PROMPT, NO_DOCUMENT_PLACEHOLDER, SYSTEM_PREAMBLE

__all__ = ["build_prompt", "CHAT_PROMPT", "NO_DOCUMENT_PLACEHOLDER", "SYSTEM_PREAMBLE"]
