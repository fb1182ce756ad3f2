"""
Tests for prompt assembly.
"""
from docchat.agent import NO_DOCUMENT_PLACEHOLDER, SYSTEM_PREAMBLE, build_prompt
from docchat.memory import Session


def section_positions(prompt):
    return [
        prompt.index(SYSTEM_PREAMBLE),
        prompt.index("=== DOCUMENT CONTENT ==="),
        prompt.index("=== CONVERSATION HISTORY ==="),
        prompt.rindex("ASSISTANT:"),
    ]


class TestBuildPrompt:
    def test_sections_in_fixed_order(self):
        session = Session("s1")
        session.set_document("Contract value: $500")
        session.add_user_turn("What is the value?")

        prompt = build_prompt(session, "What is the value?")

        positions = section_positions(prompt)
        assert positions == sorted(positions)
        assert prompt.rstrip().endswith("ASSISTANT:")

    def test_placeholder_when_no_document(self):
        session = Session("s1")
        session.add_user_turn("hi")
        prompt = build_prompt(session, "hi")
        assert NO_DOCUMENT_PLACEHOLDER in prompt

    def test_document_text_is_injected(self):
        session = Session("s1")
        session.set_document("Clause 7: termination")
        prompt = build_prompt(session, "")
        assert "Clause 7: termination" in prompt
        assert NO_DOCUMENT_PLACEHOLDER not in prompt

    def test_history_lines_use_uppercase_roles(self):
        session = Session("s1")
        session.add_user_turn("What is 2+2?")
        session.add_assistant_turn("4")
        prompt = build_prompt(session, "What is 2+2?")
        assert "USER: What is 2+2?\nASSISTANT: 4" in prompt

    def test_history_follows_document_block(self):
        session = Session("s1")
        session.set_document("USER: fake line inside the document")
        session.add_user_turn("real question")
        prompt = build_prompt(session, "real question")
        assert prompt.index("USER: real question") > prompt.index("=== CONVERSATION HISTORY ===")

    def test_braces_in_content_are_left_alone(self):
        session = Session("s1")
        session.set_document('{"json": {"nested": true}}')
        session.add_user_turn("what is {this}?")
        prompt = build_prompt(session, "what is {this}?")
        assert '{"json": {"nested": true}}' in prompt
        assert "USER: what is {this}?" in prompt

    def test_build_is_pure(self):
        session = Session("s1")
        session.add_user_turn("hello")
        before = (session.history, session.document)
        build_prompt(session, "hello")
        build_prompt(session, "hello")
        assert (session.history, session.document) == before
