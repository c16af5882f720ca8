"""
PDF text extraction task using pypdf.

Converts raw PDF bytes into one plain-text string.

Dependencies: pypdf
System role: First stage of document ingestion pipeline
"""

from io import BytesIO

from pypdf import PdfReader

from pdfchat.core.exceptions import ParsingError


class ParsingTask:
    """Extract plain text from PDF bytes."""

    def __init__(self, page_separator: str = "\n\n") -> None:
        """
        Initialize parsing task.

        Args:
            page_separator: String placed between the text of consecutive pages
        """
        self._page_separator = page_separator

    def parse(self, data: bytes, file_name: str | None = None) -> str:
        """
        Extract the text of every page, in page order.

        Args:
            data: Raw PDF bytes
            file_name: Original filename, used only for error context

        Returns:
            str: Extracted text (may be empty for image-only PDFs)

        Raises:
            ParsingError: When the bytes are not a readable PDF
        """
        if not data:
            raise ParsingError(
                "Failed to parse PDF: file is empty",
                operation="extract_text",
                details={"file_name": file_name},
            )

        try:
            reader = PdfReader(BytesIO(data))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            raise ParsingError(
                f"Failed to parse PDF: {e}",
                operation="extract_text",
                details={"file_name": file_name},
            ) from e

        return self._page_separator.join(pages)
