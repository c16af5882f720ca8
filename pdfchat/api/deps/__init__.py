"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_service_cache,
    get_upload_service,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_service_cache",
    "get_upload_service",
]
