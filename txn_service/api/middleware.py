"""Request logging middleware."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Paths that are polled too often to be worth a log line each
UNLOGGED_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, query and processing time of every request.

    The entry is written once the inner app has finished, including when it
    raised.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        status_code: int | None = None

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            if request.url.path not in UNLOGGED_PATHS:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                extra: dict[str, object] = {
                    "req_method": request.method,
                    "req_path": request.url.path,
                    "req_query": request.url.query,
                    "duration_ms": round(elapsed_ms, 3),
                }
                if status_code is not None:
                    extra["status_code"] = status_code
                logger.info(f"request processing time: {elapsed_ms:.3f}ms", extra=extra)
