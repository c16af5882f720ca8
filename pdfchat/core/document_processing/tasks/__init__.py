"""Pipeline tasks: parse, chunk, embed."""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .parsing_task import ParsingTask

__all__ = ["ChunkingTask", "EmbeddingTask", "ParsingTask"]
