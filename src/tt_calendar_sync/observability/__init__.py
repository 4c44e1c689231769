"""Observability module: structured logging and log-context propagation."""

from tt_calendar_sync.observability.context import (
    bind_log_context,
    generate_operation_id,
    get_log_context,
    log_context,
)
from tt_calendar_sync.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "bind_log_context",
    "configure_logging",
    "generate_operation_id",
    "get_log_context",
    "log_context",
]
