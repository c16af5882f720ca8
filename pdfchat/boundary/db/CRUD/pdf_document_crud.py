"""
PDF document CRUD operations.

Dependencies: sqlalchemy, pdfchat.boundary.db.models
System role: Document Record persistence operations
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pdfchat.boundary.db.CRUD.base_crud import BaseCRUD
from pdfchat.boundary.db.models.pdf_document_model import PdfDocumentModel


class PdfDocumentCRUD(BaseCRUD[PdfDocumentModel]):
    """CRUD operations for PdfDocumentModel."""

    def __init__(self) -> None:
        """Initialize PdfDocumentCRUD with PdfDocumentModel."""
        super().__init__(PdfDocumentModel)

    async def create_record(
        self,
        session: AsyncSession,
        file_name: str,
        file_path: str,
        text_chunks: list[str],
        embeddings: list[list[float]],
    ) -> PdfDocumentModel:
        """
        Insert a Document Record.

        Args:
            session: Async database session
            file_name: Original filename
            file_path: Object storage key
            text_chunks: Chunk texts in document order
            embeddings: One vector per chunk, same order

        Returns:
            PdfDocumentModel: Inserted record with generated id

        Raises:
            ValueError: If chunk and embedding counts differ
        """
        if len(text_chunks) != len(embeddings):
            raise ValueError(
                f"text_chunks and embeddings must align: "
                f"{len(text_chunks)} chunks, {len(embeddings)} embeddings"
            )
        return await self.create(
            session,
            file_name=file_name,
            file_path=file_path,
            text_chunks=list(text_chunks),
            embeddings=[list(vector) for vector in embeddings],
        )


pdf_document_crud = PdfDocumentCRUD()
