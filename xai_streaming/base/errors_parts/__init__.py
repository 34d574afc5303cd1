"""Errors parts package public surface.

Prefer importing from `xai_streaming.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, RETRYABLE_CODES
from .provider_error import (
    FrameParseError,
    HttpError,
    MissingCredentialError,
    NoResponseBodyError,
    ProviderError,
    TransportInterruptionError,
)
from .classification import classify_exception, code_for_status

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
