"""
Application middleware.

RequestContextMiddleware:
  - Assigns a unique request_id (or reads X-Request-ID header).
  - Publishes it through ``request_id_var`` so every log line carries it.
  - Logs request start / finish with timing.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from escrow_refund.core.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a request_id to every request and log timing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                "method": request.method,
                "path": str(request.url.path),
                "query": str(request.url.query),
            },
        )

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": str(request.url.path),
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        # Echo the request_id back to the caller
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
