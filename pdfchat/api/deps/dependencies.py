"""
Dependency injection container.

Process-wide service handles live in ServiceCache and are built lazily
on first use; request handlers receive them through FastAPI Depends
together with a per-request database session.

Dependencies: pdfchat.configs, pdfchat.application, pdfchat.boundary, pdfchat.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pdfchat.application.services import ChatService, UploadService
from pdfchat.boundary.aws.s3_client import S3DocumentClient
from pdfchat.boundary.db import get_async_db
from pdfchat.boundary.llm import get_chat_model, get_embeddings
from pdfchat.configs import Settings, get_settings
from pdfchat.core.document_processing.tasks import ChunkingTask, EmbeddingTask, ParsingTask
from pdfchat.core.rag_query.answer_generator import AnswerGenerator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._s3_client = None
        self._embedding_task = None
        self._answer_generator = None
        self._chunking_task = None
        self._parsing_task = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def s3_client(self) -> S3DocumentClient:
        """Get cached S3 document client."""
        if self._s3_client is None:
            s3_config = self.settings.s3_documents
            self._s3_client = S3DocumentClient(
                bucket=s3_config.bucket,
                region=s3_config.region,
                key_prefix=s3_config.key_prefix,
                endpoint_url=s3_config.endpoint_url,
            )
        return self._s3_client

    @property
    def embedding_task(self) -> EmbeddingTask:
        """Get cached embedding task."""
        if self._embedding_task is None:
            self._embedding_task = EmbeddingTask(get_embeddings(self.settings.llm))
        return self._embedding_task

    @property
    def answer_generator(self) -> AnswerGenerator:
        """Get cached chat model adapter."""
        if self._answer_generator is None:
            self._answer_generator = AnswerGenerator(get_chat_model(self.settings.llm))
        return self._answer_generator

    @property
    def chunking_task(self) -> ChunkingTask:
        """Get cached chunker."""
        if self._chunking_task is None:
            self._chunking_task = ChunkingTask(chunk_size=self.settings.pipeline.chunk_size)
        return self._chunking_task

    @property
    def parsing_task(self) -> ParsingTask:
        """Get cached PDF text extractor."""
        if self._parsing_task is None:
            self._parsing_task = ParsingTask()
        return self._parsing_task

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._embedding_task = None
        self._answer_generator = None
        self._chunking_task = None
        self._parsing_task = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_upload_service(db: AsyncSession = Depends(get_async_db)) -> UploadService:
    """
    Get upload service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UploadService: Upload pipeline bound to this request's session
    """
    cache = get_service_cache()
    return UploadService(
        db=db,
        s3_client=cache.s3_client,
        embedding_task=cache.embedding_task,
        chunking_task=cache.chunking_task,
        parsing_task=cache.parsing_task,
    )


def get_chat_service(db: AsyncSession = Depends(get_async_db)) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatService: Chat pipeline bound to this request's session
    """
    cache = get_service_cache()
    return ChatService(
        db=db,
        embedding_task=cache.embedding_task,
        answer_generator=cache.answer_generator,
    )
