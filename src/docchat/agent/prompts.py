from langchain_core.prompts import PromptTemplate


SYSTEM_PREAMBLE = """You are a helpful document assistant.
Answer the user's questions clearly and concisely.
When document content is provided, ground your answer in it and say so when the document does not contain the answer.
Use the conversation history to resolve follow-up questions."""

NO_DOCUMENT_PLACEHOLDER = "(no document provided)"

SECTION_RULE = "-" * 40


CHAT_PROMPT = PromptTemplate.from_template(
"""{preamble}

=== DOCUMENT CONTENT ===
{document}
{rule}

=== CONVERSATION HISTORY ===
{history}
{rule}

ASSISTANT:"""
)
