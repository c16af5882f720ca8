"""PDF chat backend: upload a PDF, ask questions about it."""

__version__ = "0.1.0"
