"""
Document processing stages used by the upload pipeline.

Exports: ParsingTask, ChunkingTask, EmbeddingTask
"""

from pdfchat.core.document_processing.tasks import ChunkingTask, EmbeddingTask, ParsingTask

__all__ = ["ChunkingTask", "EmbeddingTask", "ParsingTask"]
