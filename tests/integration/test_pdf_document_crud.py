"""
Integration tests for PdfDocumentCRUD against an in-memory database.

System role: Verification of Document Record persistence
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pdfchat.boundary.db.CRUD.pdf_document_crud import pdf_document_crud


class TestPdfDocumentCRUD:
    """Test suite for PdfDocumentCRUD."""

    @pytest.mark.asyncio
    async def test_create_record_generates_id(self, test_async_db: AsyncSession) -> None:
        # Act
        record = await pdf_document_crud.create_record(
            test_async_db,
            file_name="report.pdf",
            file_path="uploads/report.pdf",
            text_chunks=["first", "second"],
            embeddings=[[0.1, 0.2], [0.3, 0.4]],
        )

        # Assert
        assert isinstance(record.id, uuid.UUID)
        assert record.created_at is not None

    @pytest.mark.asyncio
    async def test_round_trip_preserves_order(self, test_async_db: AsyncSession) -> None:
        record = await pdf_document_crud.create_record(
            test_async_db,
            file_name="report.pdf",
            file_path="uploads/report.pdf",
            text_chunks=["c0", "c1", "c2"],
            embeddings=[[1.0, 0.0], [0.0, 1.0], [0.5, 0.5]],
        )
        await test_async_db.commit()
        test_async_db.expunge_all()

        loaded = await pdf_document_crud.get_by_id(test_async_db, record.id)

        assert loaded is not None
        assert loaded.file_name == "report.pdf"
        assert loaded.file_path == "uploads/report.pdf"
        assert loaded.text_chunks == ["c0", "c1", "c2"]
        assert loaded.embeddings == [[1.0, 0.0], [0.0, 1.0], [0.5, 0.5]]

    @pytest.mark.asyncio
    async def test_same_file_name_creates_distinct_records(self, test_async_db: AsyncSession) -> None:
        first = await pdf_document_crud.create_record(
            test_async_db, "dup.pdf", "uploads/dup.pdf", ["a"], [[1.0]]
        )
        second = await pdf_document_crud.create_record(
            test_async_db, "dup.pdf", "uploads/dup.pdf", ["b"], [[2.0]]
        )

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_misaligned_lengths_raise(self, test_async_db: AsyncSession) -> None:
        with pytest.raises(ValueError, match="must align"):
            await pdf_document_crud.create_record(
                test_async_db,
                file_name="bad.pdf",
                file_path="uploads/bad.pdf",
                text_chunks=["only one"],
                embeddings=[[1.0], [2.0]],
            )

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, test_async_db: AsyncSession) -> None:
        assert await pdf_document_crud.get_by_id(test_async_db, uuid.uuid4()) is None
