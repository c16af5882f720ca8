"""
Chat-model answer generation.

Dependencies: langchain_core
System role: Chat completion adapter
"""

import logging

from langchain_core.language_models.chat_models import BaseChatModel

from pdfchat.core.exceptions import ChatCompletionError
from pdfchat.core.rag_query.rag_prompt import build_chat_messages

logger = logging.getLogger(__name__)


def _content_to_text(content: str | list) -> str:
    # Gemini returns a list of content blocks instead of a plain string
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class AnswerGenerator:
    """Send the document prompt to a chat model and return its text."""

    def __init__(self, chat_model: BaseChatModel) -> None:
        self._model = chat_model

    async def agenerate(self, file_name: str, context: str, question: str) -> str:
        """
        Generate an answer grounded in one chunk of context.

        Args:
            file_name: Original PDF filename, named in the system instruction
            context: Selected chunk text
            question: User message

        Returns:
            str: Model answer text

        Raises:
            ChatCompletionError: When the model call fails
        """
        messages = build_chat_messages(file_name=file_name, context=context, question=question)

        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            raise ChatCompletionError(
                f"Chat completion failed: {e}",
                operation="chat",
            ) from e

        answer = _content_to_text(response.content)
        logger.info(
            f"{__name__}:agenerate - Answer generated",
            extra={"answer_len": len(answer)},
        )
        return answer
