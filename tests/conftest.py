"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, fake models, PDF byte builder
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock
import uuid

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.messages import AIMessage


def make_pdf_bytes(lines: list[str]) -> bytes:
    """
    Build a minimal single-page PDF that draws each line with Helvetica.

    Args:
        lines: Text lines, top to bottom

    Returns:
        bytes: A valid PDF document with a correct xref table
    """
    ops = ["BT", "/F1 12 Tf", "72 720 Td"]
    for i, line in enumerate(lines):
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        if i:
            ops.append("0 -14 Td")
        ops.append(f"({escaped}) Tj")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from pdfchat.boundary.db.base import Base
    from pdfchat.boundary.db.models import PdfDocumentModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Offline embeddings model producing stable 8-dim vectors."""
    return DeterministicFakeEmbedding(size=8)


@pytest.fixture
def mock_chat_model() -> MagicMock:
    """
    Chat model double recording the messages it receives.

    Returns:
        MagicMock: ainvoke returns an AIMessage with a fixed answer
    """
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="The answer is 42."))
    return model


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """S3DocumentClient double that stores nothing."""
    client = MagicMock()
    client.bucket = "pdf-files"
    client.upload_bytes = MagicMock(side_effect=lambda name, data, content_type: f"uploads/{name}")
    return client


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A small real PDF with two lines of text."""
    return make_pdf_bytes(["Hello World", "Second line of text"])


@pytest.fixture
def file_id() -> uuid.UUID:
    """Generate a test document id."""
    return uuid.uuid4()
