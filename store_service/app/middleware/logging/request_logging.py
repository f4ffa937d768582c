"""
HTTP request logging middleware for Store Service.

Assigns a request ID and a correlation ID (taken from ``X-Correlation-ID``
when the caller supplies one), logs the request lifecycle with timing, and
echoes both IDs back as response headers.
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import get_store_logger

logger = get_store_logger("store_service.request_logging")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """HTTP request logging middleware for Store Service"""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = str(uuid.uuid4())
        correlation_id = (
            request.headers.get("X-Correlation-ID")
            or request.headers.get("x-request-id")
            or request_id
        )

        request.state.request_id = request_id
        request.state.correlation_id = correlation_id
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"HTTP request failed: {str(e)}",
                extra={
                    "request_id": request_id,
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                    "event_type": "http_request_error",
                },
                exc_info=True,
            )
            raise

        duration_ms = round((time.time() - start_time) * 1000, 2)

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "HTTP request completed",
            extra={
                "request_id": request_id,
                "correlation_id": correlation_id,
                "user_id": getattr(request.state, "user_id", "anonymous"),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "event_type": "http_request_complete",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Correlation-ID"] = correlation_id
        return response
