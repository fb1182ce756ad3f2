"""
Prompt assembly from session state.

Pure: reads a Session snapshot, returns a string, mutates nothing.
"""
from ..memory.session import Session
from .prompts import CHAT_PROMPT, NO_DOCUMENT_PLACEHOLDER, SECTION_RULE, SYSTEM_PREAMBLE


def render_document_block(document: str) -> str:
    return document if document else NO_DOCUMENT_PLACEHOLDER


def render_history_block(session: Session) -> str:
    return session.memory.format_as_chat_history()


def build_prompt(session: Session, new_message: str) -> str:
    """
    Build the completion prompt for a session.

    Section order is fixed: preamble, document, history, ``ASSISTANT:`` cue.
    The history already contains the new user turn when the caller appended
    it; ``new_message`` is accepted so callers need not care.

    :param session: Session to read from
    :param new_message: Latest user message (may be empty)
    :return: Prompt string
    """
    return CHAT_PROMPT.format(
        preamble=SYSTEM_PREAMBLE,
        document=render_document_block(session.document),
        history=render_history_block(session),
        rule=SECTION_RULE,
    )
