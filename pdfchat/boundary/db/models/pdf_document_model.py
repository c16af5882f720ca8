"""
PDF document ORM model.

One row per uploaded PDF: filename, storage key, chunk texts and their
embeddings. Rows are written once on upload and never updated.

Dependencies: sqlalchemy, pdfchat.boundary.db.base
System role: Document Record persistence
"""

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from pdfchat.boundary.db.base import Base, CreatedAtMixin, UUIDMixin

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONColumn = JSON().with_variant(JSONB(), "postgresql")


class PdfDocumentModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Document Record.

    Invariant: len(text_chunks) == len(embeddings) and embeddings[i] is the
    vector of text_chunks[i]. Enforced by PdfDocumentCRUD.create_record.

    Attributes:
        id: UUID primary key (auto-generated)
        file_name: Original filename
        file_path: Object storage key of the raw PDF
        text_chunks: Ordered chunk texts
        embeddings: Ordered chunk vectors, aligned with text_chunks
        created_at: Upload timestamp (UTC)
    """

    __tablename__ = "pdf_metadata"

    file_name: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Original filename",
    )

    file_path: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        doc="Object storage key for the raw PDF",
    )

    text_chunks: Mapped[list[str]] = mapped_column(
        JSONColumn,
        nullable=False,
        default=list,
    )

    embeddings: Mapped[list[list[float]]] = mapped_column(
        JSONColumn,
        nullable=False,
        default=list,
    )
