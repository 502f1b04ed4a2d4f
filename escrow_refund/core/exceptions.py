"""
Custom exception hierarchy for the application.

All application-specific exceptions inherit from AppException,
enabling consistent error handling and structured error responses.

Hierarchy:
    AppException
    ├── SourceAPIException       — Errors when calling CSPC
    │   ├── SourceAPITimeoutException
    │   └── SourceAPIConnectionException
    └── NotFoundException        — Requested resource not found

The depositor enrichment pass never lets these escape: a failed CSPC
lookup is written into the party as an error string instead.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     Human-readable error description.
        status_code: HTTP status code to return to the client.
        error_code:  Machine-readable error identifier (e.g. "SOURCE_API_TIMEOUT").
        details:     Optional dict with extra context for debugging.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Source API Errors ────────────────────────────────────────────────


class SourceAPIException(AppException):
    """Raised when CSPC returns an error or is unreachable."""

    def __init__(
        self,
        message: str = "Failed to fetch data from CSPC.",
        status_code: int = 502,
        error_code: str = "SOURCE_API_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)


class SourceAPITimeoutException(SourceAPIException):
    """Raised when the CSPC request times out."""

    def __init__(
        self,
        message: str = "CSPC request timed out.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=504,
            error_code="SOURCE_API_TIMEOUT",
            details=details,
        )


class SourceAPIConnectionException(SourceAPIException):
    """Raised when unable to establish connection to CSPC."""

    def __init__(
        self,
        message: str = "Unable to connect to CSPC.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=502,
            error_code="SOURCE_API_CONNECTION_ERROR",
            details=details,
        )


# ─── Not Found ────────────────────────────────────────────────────────


class NotFoundException(AppException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found.",
        status_code: int = 404,
        error_code: str = "NOT_FOUND",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)
