"""
Upload API endpoint.

Routes:
- POST /upload - Upload a PDF (multipart field "file"), index it, return its id

Dependencies: pdfchat.application.services, pdfchat.models
System role: Document upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from pdfchat.api.deps import get_upload_service
from pdfchat.application.services.upload_service import PDF_CONTENT_TYPE, UploadService
from pdfchat.core.exceptions import ValidationError
from pdfchat.models.common import ErrorResponse
from pdfchat.models.document import UploadResponse
from pdfchat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


def _error(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    file: UploadFile | None = File(default=None),
    upload_service: UploadService = Depends(get_upload_service),
):
    """
    Upload a PDF and index it for chat.

    Args:
        file: Multipart file field "file"
        upload_service: Injected UploadService

    Returns:
        UploadResponse: fileId of the new Document Record

    Errors:
        400: No file, or content type is not application/pdf
        500: Storage, extraction, embedding or database failure
    """
    if file is None:
        return _error(400, "No file uploaded")

    if file.content_type != PDF_CONTENT_TYPE:
        return _error(400, "Invalid file type. Please upload a PDF.")

    try:
        data = await file.read()
        record = await upload_service.upload_pdf(
            file_name=file.filename or "upload.pdf",
            content_type=file.content_type,
            data=data,
        )
    except ValidationError as e:
        return _error(400, e.message)
    except Exception as e:
        log_exception_with_context(
            logger,
            "Error during file upload",
            e,
            file_name=file.filename,
        )
        return _error(500, "Internal server error", str(e))

    return UploadResponse(file_id=record.id)
