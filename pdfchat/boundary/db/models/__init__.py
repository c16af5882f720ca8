"""ORM models."""

from .pdf_document_model import PdfDocumentModel

__all__ = ["PdfDocumentModel"]
