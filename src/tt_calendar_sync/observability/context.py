"""Log context propagation across async boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4


log_context: ContextVar[dict | None] = ContextVar("log_context", default=None)


def generate_operation_id() -> str:
    """Generate a 16-char hex operation ID."""
    return uuid4().hex[:16]


def get_log_context() -> dict:
    """Get a copy of the fields bound to the current async context."""
    return dict(log_context.get() or {})


@contextmanager
def bind_log_context(**fields: object) -> Iterator[dict]:
    """Bind extra fields to every log record emitted inside the block."""
    merged = {**get_log_context(), **fields}
    token = log_context.set(merged)
    try:
        yield merged
    finally:
        log_context.reset(token)
