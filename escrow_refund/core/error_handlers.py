"""
Global error handlers registered on the FastAPI application.

Every failure leaves the service in the same JSON shape:

    {
        "error": true,
        "error_code": "NOT_FOUND",
        "message": "Client '42' not found in CSPC.",
        "details": { ... },
        "request_id": "abc-123"
    }

CSPC lookup failures inside the depositor pass never reach these handlers;
they are written into the party instead.
"""

import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from escrow_refund.core.exceptions import AppException
from escrow_refund.core.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        logger.error(
            "Application error",
            extra={
                "error_code": exc.error_code,
                "status_code": exc.status_code,
                "error_message": exc.message,
                "details": exc.details,
                "path": str(request.url),
                "method": request.method,
            },
        )

        body = exc.to_dict()
        body["request_id"] = _get_request_id(request)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]

        logger.warning(
            "Request validation failed",
            extra={
                "path": str(request.url),
                "method": request.method,
                "validation_errors": errors,
            },
        )

        return _error_response(
            request,
            status_code=422,
            error_code="VALIDATION_ERROR",
            message="Request validation failed.",
            details={"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            "HTTP error",
            extra={
                "status_code": exc.status_code,
                "detail": exc.detail,
                "path": str(request.url),
                "method": request.method,
            },
        )

        return _error_response(
            request,
            status_code=exc.status_code,
            error_code="HTTP_ERROR",
            message=str(exc.detail),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.critical(
            "Unhandled exception",
            extra={
                "path": str(request.url),
                "method": request.method,
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
            },
            exc_info=True,
        )

        return _error_response(
            request,
            status_code=500,
            error_code="INTERNAL_ERROR",
            message="An unexpected internal error occurred.",
        )


# ─── Helpers ──────────────────────────────────────────────────────────


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "error": True,
        "error_code": error_code,
        "message": message,
    }
    if details:
        content["details"] = details
    content["request_id"] = _get_request_id(request)
    return JSONResponse(status_code=status_code, content=content)


def _get_request_id(request: Request) -> str:
    """
    Return the request ID from state (set by middleware) or generate one.
    """
    return getattr(request.state, "request_id", None) or uuid.uuid4().hex
