"""Structured stdout logging shared by boxcloud packages."""

from .config import (
    CALL_FIELDS,
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    structured_fields,
)
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "CALL_FIELDS",
    "bind_context",
    "clear_context",
    "configure_logging",
    "ContextFilter",
    "get_context",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
    "structured_fields",
]
