"""
Embedding generation task.

Wraps a LangChain Embeddings model: one batch call for document chunks,
one single call for a query.

Dependencies: langchain_core
System role: Third stage of document ingestion pipeline, and query embedding for chat
"""

import logging

from langchain_core.embeddings import Embeddings

from pdfchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings for chunks and queries."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: LangChain embeddings model (OpenAI, Gemini, ...)
        """
        self._embeddings = embeddings

    async def embed_chunks(self, chunks: list[str]) -> list[list[float]]:
        """
        Embed all chunks in a single batch request.

        Args:
            chunks: Chunk texts in document order

        Returns:
            list[list[float]]: One vector per chunk, same order

        Raises:
            EmbeddingError: When the provider call fails or returns the wrong count
        """
        if not chunks:
            return []

        try:
            vectors = await self._embeddings.aembed_documents(chunks)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                operation="embed_documents",
            ) from e

        if len(vectors) != len(chunks):
            raise EmbeddingError(
                f"Embedding count mismatch: expected {len(chunks)}, got {len(vectors)}",
                operation="embed_documents",
            )

        logger.info(
            f"{__name__}:embed_chunks - Embedded {len(chunks)} chunks",
            extra={"chunk_count": len(chunks)},
        )
        return [list(vector) for vector in vectors]

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a single query string.

        Args:
            text: Query text

        Returns:
            list[float]: Query vector

        Raises:
            EmbeddingError: When the provider call fails
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate query embedding: {e}",
                operation="embed_query",
            ) from e
        return list(vector)
