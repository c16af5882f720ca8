"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, pdfchat.configs
System role: Database schema initialization

Usage:
    python -m pdfchat.boundary.db.create_tables
"""

import logging

from pdfchat.boundary.db.base import Base
from pdfchat.boundary.db.connection import get_engine
from pdfchat.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from pdfchat.boundary.db.models.pdf_document_model import PdfDocumentModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully.")


def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped successfully.")


if __name__ == "__main__":
    configure_logging()
    create_all_tables()
