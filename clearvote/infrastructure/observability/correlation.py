"""Correlation ids for tracing one registry call through the logs.

A registry call arrives either over HTTP (the middleware opens a scope from
the X-Correlation-ID header) or as a direct service call (no scope, so log
lines simply carry no correlation_id).

Usage:
    with correlation_scope(request.headers.get("X-Correlation-ID")) as cid:
        service.register(caller, metadata_hash)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("clearvote_correlation_id", default="")


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Current correlation id, or "" outside any scope."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the rest of the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block.

    A fresh id is generated when none (or a blank one) is given. The previous
    value is restored on exit, so ids never bleed between requests that share
    a worker thread.
    """
    value = (correlation_id or "").strip() or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor: copy the scoped correlation id into the entry.

    An id already bound on the logger wins over the contextvar.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
