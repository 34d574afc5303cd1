"""
Normalized error codes for the streaming client.

Values are lowercase snake_case and are part of the public contract: they show
up in structured logs and drive the retry policy's retryable set.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Failure categories a caller (or a retry policy) can branch on."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


# Codes a retry policy may reattempt by default.
RETRYABLE_CODES: tuple[ErrorCode, ...] = (
    ErrorCode.TRANSIENT,
    ErrorCode.RATE_LIMIT,
    ErrorCode.TIMEOUT,
    ErrorCode.UNAVAILABLE,
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
