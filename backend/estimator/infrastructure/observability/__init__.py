"""Observability utilities (logging, request middleware)."""

from .structured_logging import configure_logging, configure_structlog
from .middleware import RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "configure_structlog",
    "RequestLoggingMiddleware",
]
