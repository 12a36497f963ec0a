"""Request logging with correlation id propagation.

Every request runs inside a correlation scope taken from X-Correlation-ID
(or freshly generated). The id is echoed back on the response, and the
request is logged on completion together with the calling identity, so
registry service logs and access logs can be joined.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from clearvote.api.dependencies.registry import CALLER_HEADER
from clearvote.infrastructure.observability.correlation import correlation_scope

CORRELATION_HEADER = "X-Correlation-ID"

logger = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            log = logger.bind(
                method=request.method,
                path=request.url.path,
                caller=request.headers.get(CALLER_HEADER, ""),
            )
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                log.exception("request_failed", duration_ms=_elapsed_ms(started))
                raise

            # 4xx are registry rejections, already logged by the service
            log_method = log.warning if response.status_code >= 500 else log.info
            log_method(
                "request_completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
            response.headers[CORRELATION_HEADER] = correlation_id
            return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
