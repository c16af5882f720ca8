"""
Answer generation for single-document chat.

Exports: AnswerGenerator, build_chat_messages
"""

from .answer_generator import AnswerGenerator
from .rag_prompt import build_chat_messages

__all__ = ["AnswerGenerator", "build_chat_messages"]
