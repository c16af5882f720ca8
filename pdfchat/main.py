"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, pdfchat.api, pdfchat.observability, pdfchat.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdfchat.api import api_router
from pdfchat.api.deps import get_service_cache
from pdfchat.api.routers import health_router
from pdfchat.boundary.db import dispose_async_engine
from pdfchat.configs import get_settings
from pdfchat.models.common import ErrorResponse
from pdfchat.observability.logger import configure_logging
from pdfchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup; releases cached clients and the
    database pool on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    yield

    get_service_cache().clear()
    await dispose_async_engine()
    logger.info("Application shutdown")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with the shared error shape."""
    errors = exc.errors()
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    # a "file" form field that is not an upload counts as no upload
    if any(tuple(error.get("loc", ()))[:2] == ("body", "file") for error in errors):
        message = "No file uploaded"
    else:
        message = "Invalid request body."
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(message=message).model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="PDF Chat RAG API",
        description="Upload a PDF, then ask questions answered from its most relevant chunk",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = runs last
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pdfchat.main:app",
        host=settings.host,
        port=settings.port,
    )
