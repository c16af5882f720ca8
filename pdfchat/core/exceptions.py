"""
Exception hierarchy for the PDF chat application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PdfChatException(Exception):
    """Base exception for all PDF chat application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message (details stay out of API bodies)."""
        return self.message


class ValidationError(PdfChatException):
    """Raised when request input is missing or invalid."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(PdfChatException):
    """Raised when a referenced document record does not exist."""

    def __init__(self, file_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            file_id: ID of the missing document, as the caller sent it
            details: Additional context
        """
        details = details or {}
        details["file_id"] = file_id
        super().__init__("Error fetching embeddings or file not found.", details)


class UpstreamError(PdfChatException):
    """Base exception for failed calls to storage, extraction, models or the database."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message
            operation: Collaborator operation that failed (upload, embed, insert, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageError(UpstreamError):
    """Raised when the object storage write fails."""

    pass


class ParsingError(UpstreamError):
    """Raised when PDF text extraction fails."""

    pass


class EmbeddingError(UpstreamError):
    """Raised when embedding generation fails."""

    pass


class ChatCompletionError(UpstreamError):
    """Raised when the chat model call fails."""

    pass


class PersistenceError(UpstreamError):
    """Raised when the metadata store rejects a read or write."""

    pass


class SimilarityError(PdfChatException):
    """Raised when vectors cannot be compared (empty set, zero norm, shape mismatch)."""

    pass
