"""
Chat API endpoint.

Routes:
- POST /chat - Answer a question about one uploaded PDF

Dependencies: pdfchat.application.services.chat_service, pdfchat.models
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from pdfchat.api.deps import get_chat_service
from pdfchat.application.services.chat_service import ChatService
from pdfchat.models.chat import ChatRequest, ChatResponse
from pdfchat.models.common import ErrorResponse
from pdfchat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest | None = Body(default=None),
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Answer a question using the best-matching chunk of one document.

    Args:
        request: fileId and message
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Generated answer

    Errors:
        400: fileId or message missing
        500: Unknown document, embedding, ranking or chat model failure
    """
    if request is None or not request.file_id or not request.message:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(message="File ID and message are required.").model_dump(
                exclude_none=True
            ),
        )

    try:
        answer = await chat_service.answer(
            file_id=str(request.file_id),
            message=request.message,
        )
    except Exception as e:
        # DocumentNotFoundError lands here as well
        log_exception_with_context(
            logger,
            "Error during chat",
            e,
            file_id=request.file_id,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message="Internal server error", error=str(e)).model_dump(),
        )

    return ChatResponse(answer=answer)
