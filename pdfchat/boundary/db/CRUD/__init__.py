"""
CRUD operations for database models.

Usage:
    from pdfchat.boundary.db.CRUD import pdf_document_crud

    record = await pdf_document_crud.get_by_id(db, file_id)
"""

from pdfchat.boundary.db.CRUD.base_crud import BaseCRUD
from pdfchat.boundary.db.CRUD.pdf_document_crud import PdfDocumentCRUD, pdf_document_crud

__all__ = [
    "BaseCRUD",
    "PdfDocumentCRUD",
    "pdf_document_crud",
]
