"""
Observability: logging configuration and request middleware.

Exports: configure_logging, RequestLoggingMiddleware, CorrelationMiddleware
"""

from pdfchat.observability.logger import configure_logging
from pdfchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
