"""
Chat prompt for answering questions about one PDF.

Two system messages (document identity, then the retrieved context) followed
by the user's question. Only the single best chunk is ever included.

Dependencies: langchain_core.prompts
System role: Prompt template for document Q&A
"""

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = (
    'You are an assistant with access to the contents of the PDF titled "{file_name}". '
    "Use the provided context to answer questions."
)

RAG_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("system", "Context: {context}"),
    ("human", "{question}"),
])


def build_chat_messages(file_name: str, context: str, question: str) -> list[BaseMessage]:
    """
    Render the chat prompt.

    Args:
        file_name: Original PDF filename
        context: Text of the selected chunk
        question: User message

    Returns:
        list[BaseMessage]: [SystemMessage, SystemMessage, HumanMessage]
    """
    return RAG_CHAT_PROMPT.format_messages(
        file_name=file_name,
        context=context,
        question=question,
    )
