"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_engine(): Sync engine for schema scripts
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - PdfDocumentModel: Document Record
  - pdf_document_crud: CRUD singleton

Dependencies: sqlalchemy, pdfchat.configs
System role: Database adapter for Document Records
"""

from pdfchat.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from pdfchat.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_engine,
)
from pdfchat.boundary.db.models.pdf_document_model import PdfDocumentModel
from pdfchat.boundary.db.CRUD import BaseCRUD, PdfDocumentCRUD, pdf_document_crud

__all__ = [
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "get_engine",
    "PdfDocumentModel",
    "BaseCRUD",
    "PdfDocumentCRUD",
    "pdf_document_crud",
]
