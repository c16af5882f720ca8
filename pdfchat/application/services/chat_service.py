"""
Chat service for single-document Q&A.

Runs the chat pipeline for one question:
load record -> embed question -> rank chunks -> answer with the best chunk.

Dependencies: pdfchat.boundary.db, pdfchat.core
System role: Chat orchestration layer
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pdfchat.boundary.db.CRUD.pdf_document_crud import pdf_document_crud
from pdfchat.boundary.db.models.pdf_document_model import PdfDocumentModel
from pdfchat.core.document_processing.tasks import EmbeddingTask
from pdfchat.core.exceptions import DocumentNotFoundError, PersistenceError
from pdfchat.core.rag_query.answer_generator import AnswerGenerator
from pdfchat.core.retriever import select_best_match

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for single-document Q&A.

    Retrieval is top-1: exactly one chunk is sent to the chat model.
    """

    def __init__(
        self,
        db: AsyncSession,
        embedding_task: EmbeddingTask,
        answer_generator: AnswerGenerator,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for record lookup
            embedding_task: Query embedding generator
            answer_generator: Chat model adapter
        """
        self.db = db
        self._embedding_task = embedding_task
        self._answer_generator = answer_generator

    async def get_document(self, file_id: str) -> PdfDocumentModel:
        """
        Load a Document Record by its public id.

        Args:
            file_id: Record id as sent by the client

        Returns:
            PdfDocumentModel: The record

        Raises:
            DocumentNotFoundError: Id is malformed or no record matches
            PersistenceError: Database read failed
        """
        try:
            record_id = UUID(str(file_id))
        except ValueError as e:
            raise DocumentNotFoundError(str(file_id)) from e

        try:
            record = await pdf_document_crud.get_by_id(self.db, record_id)
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Error fetching embeddings or file not found: {e}",
                operation="select",
                details={"file_id": str(file_id)},
            ) from e

        if record is None:
            raise DocumentNotFoundError(str(file_id))
        return record

    async def answer(self, file_id: str, message: str) -> str:
        """
        Answer a question about one uploaded PDF.

        Flow:
        1. Fetch the Document Record
        2. Embed the message as one query vector
        3. Select the best-matching chunk by cosine similarity
        4. Ask the chat model with that chunk as context

        Args:
            file_id: Document Record id
            message: User question

        Returns:
            str: Generated answer

        Raises:
            DocumentNotFoundError: No such document
            EmbeddingError: Query embedding failed
            SimilarityError: Stored vectors cannot be compared with the query
            ChatCompletionError: Chat model call failed
        """
        record = await self.get_document(file_id)

        query_vector = await self._embedding_task.embed_query(message)
        best = select_best_match(query_vector, record.embeddings)
        relevant_text = record.text_chunks[best.index]

        logger.info(
            f"{__name__}:answer - Selected context chunk",
            extra={
                "file_id": str(record.id),
                "chunk_index": best.index,
                "similarity": round(best.score, 4),
                "chunk_count": len(record.text_chunks),
            },
        )

        return await self._answer_generator.agenerate(
            file_name=record.file_name,
            context=relevant_text,
            question=message,
        )
