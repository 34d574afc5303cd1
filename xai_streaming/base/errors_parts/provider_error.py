"""
Structured provider error exception types.

``ProviderError`` carries a normalized :class:`ErrorCode` so callers and the
retry policy can decide what to do without parsing messages. The subclasses
name the call-aborting conditions of a streaming call; each fixes its own
code and retryability.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode, RETRYABLE_CODES


@dataclass
class ProviderError(Exception):
    """A structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"xai"``).
        model: Optional model id associated with the failure.
        retryable: Hint for an external retry policy.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class MissingCredentialError(ProviderError):
    """No API key was supplied; raised before any network activity."""

    code: ErrorCode = ErrorCode.AUTH
    message: str = "API key is required"
    provider: str = "xai"


@dataclass
class HttpError(ProviderError):
    """Non-success HTTP status returned while opening the stream.

    ``status`` is the HTTP status code. ``retry_after`` holds the server's
    ``Retry-After`` hint in seconds when it sent a numeric one.
    """

    status: int = 0
    retry_after: Optional[float] = None

    def __post_init__(self) -> None:
        self.retryable = self.code in RETRYABLE_CODES


@dataclass
class NoResponseBodyError(ProviderError):
    """The response was successful but carried no readable body."""

    code: ErrorCode = ErrorCode.INTERNAL
    message: str = "Failed to get response reader"
    provider: str = "xai"


@dataclass
class TransportInterruptionError(ProviderError):
    """The connection dropped after streaming began.

    Events already yielded to the caller stay valid; this only terminates the
    call.
    """

    code: ErrorCode = ErrorCode.TRANSIENT
    message: str = "stream interrupted"
    provider: str = "xai"
    retryable: bool = True


class FrameParseError(ValueError):
    """A single SSE line that could not be decoded into a frame.

    Never raised by the decoder; instances are handed to a diagnostics
    callback and the line is skipped.
    """

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"failed to parse SSE message: {reason}")
        self.line = line
        self.reason = reason


__all__ = [
    "ProviderError",
    "MissingCredentialError",
    "HttpError",
    "NoResponseBodyError",
    "TransportInterruptionError",
    "FrameParseError",
]
