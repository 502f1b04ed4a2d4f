from escrow_refund.core.exceptions import (
    AppException,
    SourceAPIException,
    SourceAPITimeoutException,
    SourceAPIConnectionException,
    NotFoundException,
)
from escrow_refund.core.logging import setup_logging, get_logger

__all__ = [
    "AppException",
    "SourceAPIException",
    "SourceAPITimeoutException",
    "SourceAPIConnectionException",
    "NotFoundException",
    "setup_logging",
    "get_logger",
]
