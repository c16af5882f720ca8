"""
Upload service orchestrator.

Runs the upload pipeline for one PDF:
store bytes -> extract text -> chunk -> embed (one batch) -> insert record.

Every step is awaited in order. A failure aborts the request; nothing
already written (the stored object in particular) is rolled back.

Dependencies: pdfchat.boundary, pdfchat.core
System role: Document upload orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pdfchat.boundary.aws.s3_client import S3DocumentClient
from pdfchat.boundary.db.CRUD.pdf_document_crud import pdf_document_crud
from pdfchat.boundary.db.models.pdf_document_model import PdfDocumentModel
from pdfchat.core.document_processing.tasks import ChunkingTask, EmbeddingTask, ParsingTask
from pdfchat.core.exceptions import ParsingError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class UploadService:
    """
    Upload service orchestrator.

    Holds the request's DB session plus the process-wide storage,
    parsing, chunking and embedding handles.
    """

    def __init__(
        self,
        db: AsyncSession,
        s3_client: S3DocumentClient,
        embedding_task: EmbeddingTask,
        chunking_task: ChunkingTask | None = None,
        parsing_task: ParsingTask | None = None,
    ) -> None:
        """
        Initialize upload service.

        Args:
            db: AsyncSession for the Document Record insert
            s3_client: Raw document storage
            embedding_task: Embedding generator
            chunking_task: Chunker (1000-character windows if None)
            parsing_task: PDF text extractor (created if None)
        """
        self.db = db
        self._s3_client = s3_client
        self._embedding_task = embedding_task
        self._chunking_task = chunking_task or ChunkingTask()
        self._parsing_task = parsing_task or ParsingTask()

    async def upload_pdf(
        self,
        file_name: str,
        content_type: str | None,
        data: bytes,
    ) -> PdfDocumentModel:
        """
        Store, parse, chunk, embed and persist one PDF.

        Steps:
        1. Validate declared content type
        2. Store raw bytes under uploads/{file_name}
        3. Extract text
        4. Chunk text
        5. Embed all chunks in one batch
        6. Insert the Document Record and commit

        Args:
            file_name: Original filename
            content_type: Declared MIME type of the upload
            data: File bytes

        Returns:
            PdfDocumentModel: The committed record

        Raises:
            ValidationError: Content type is not application/pdf
            StorageError: Object storage write failed
            ParsingError: PDF unreadable or contains no extractable text
            EmbeddingError: Embedding call failed
            PersistenceError: Database insert failed
        """
        if content_type != PDF_CONTENT_TYPE:
            raise ValidationError(
                "Invalid file type. Please upload a PDF.",
                field="file",
                details={"content_type": content_type},
            )

        logger.info(
            f"{__name__}:upload_pdf - START",
            extra={"file_name": file_name, "size_bytes": len(data)},
        )

        file_path = await run_in_threadpool(
            self._s3_client.upload_bytes, file_name, data, content_type
        )
        logger.info(
            f"{__name__}:upload_pdf - Stored raw PDF",
            extra={"bucket": self._s3_client.bucket, "key": file_path},
        )

        full_text = await run_in_threadpool(self._parsing_task.parse, data, file_name)
        if not full_text:
            raise ParsingError(
                "PDF document contains no extractable text",
                operation="extract_text",
                details={"file_name": file_name},
            )

        text_chunks = self._chunking_task.chunk(full_text)
        embeddings = await self._embedding_task.embed_chunks(text_chunks)

        try:
            record = await pdf_document_crud.create_record(
                self.db,
                file_name=file_name,
                file_path=file_path,
                text_chunks=text_chunks,
                embeddings=embeddings,
            )
            await self.db.commit()
        except (SQLAlchemyError, ValueError) as e:
            await self.db.rollback()
            raise PersistenceError(
                f"Error saving metadata to the database: {e}",
                operation="insert",
                details={"file_name": file_name},
            ) from e

        logger.info(
            f"{__name__}:upload_pdf - END",
            extra={
                "file_id": str(record.id),
                "chunk_count": len(text_chunks),
                "text_length": len(full_text),
            },
        )
        return record
