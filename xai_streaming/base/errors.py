"""Unified provider error taxonomy public surface.

Re-exports the implementations under ``xai_streaming.base.errors_parts`` so
callers have one stable import path.
"""

from .errors_parts import (
    RETRYABLE_CODES,
    ErrorCode,
    FrameParseError,
    HttpError,
    MissingCredentialError,
    NoResponseBodyError,
    ProviderError,
    TransportInterruptionError,
    classify_exception,
    code_for_status,
)

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "MissingCredentialError",
    "HttpError",
    "NoResponseBodyError",
    "TransportInterruptionError",
    "FrameParseError",
    "classify_exception",
    "code_for_status",
]
