"""
Observability for the CMS backend: structured logging and health checks.

Usage
-----
>>> from cms.monitoring import get_logger
>>> logger = get_logger(__name__)
"""

from cms.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    get_request_id,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "sanitize_headers",
    "sanitize_log_message",
]
