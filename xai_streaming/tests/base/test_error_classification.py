"""Error taxonomy and exception classification."""
from __future__ import annotations

import httpx
import pytest

from xai_streaming.base.errors import (
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


class _WithStatus(Exception):
    def __init__(self, status_code: int) -> None:
        super().__init__("boom")
        self.status_code = status_code


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.VALIDATION),
    ],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code  # nosec B101


def test_classify_precedence():
    pe = ProviderError(code=ErrorCode.CONFLICT, message="x", provider="xai")
    assert classify_exception(pe) is ErrorCode.CONFLICT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(_WithStatus(429)) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("Rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("???")) is ErrorCode.UNKNOWN  # nosec B101


def test_error_defaults_and_retryability():
    assert MissingCredentialError().code is ErrorCode.AUTH  # nosec B101
    assert NoResponseBodyError().message == "Failed to get response reader"  # nosec B101
    assert TransportInterruptionError().retryable is True  # nosec B101
    assert HttpError(code=ErrorCode.RATE_LIMIT, message="429", provider="xai", status=429).retryable  # nosec B101
    assert not HttpError(code=ErrorCode.AUTH, message="401", provider="xai", status=401).retryable  # nosec B101


def test_provider_error_str_includes_message():
    err = HttpError(code=ErrorCode.VALIDATION, message="400 Bad Request - bad request", provider="xai", model="grok-beta", status=400)
    text = str(err)
    assert "400" in text and "bad request" in text  # nosec B101
    assert text.startswith("xai:grok-beta validation:")  # nosec B101


def test_frame_parse_error_keeps_line():
    err = FrameParseError("data: {", "Invalid JSON")
    assert isinstance(err, ValueError)  # nosec B101
    assert err.line == "data: {" and "Invalid JSON" in str(err)  # nosec B101
