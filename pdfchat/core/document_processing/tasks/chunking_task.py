"""
Fixed-size character chunking task.

Splits extracted text into contiguous, non-overlapping windows of
chunk_size characters. Windows may cut through words and sentences.

Dependencies: None
System role: Second stage of document ingestion pipeline
"""


class ChunkingTask:
    """Split text into fixed-size character chunks."""

    def __init__(self, chunk_size: int = 1000) -> None:
        """
        Initialize chunking task.

        Args:
            chunk_size: Chunk length in characters (the last chunk may be shorter)

        Raises:
            ValueError: When chunk_size is not a positive integer
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Full extracted document text

        Returns:
            list[str]: Chunks in document order; empty for empty text
        """
        size = self._chunk_size
        return [text[start:start + size] for start in range(0, len(text), size)]
