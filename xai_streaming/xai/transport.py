"""Transport layer: open one streaming chat-completions POST.

``open_stream`` is a context manager. Entering it validates the credential,
sends the request and checks the response status; only a successful handshake
yields a :class:`ByteStreamHandle`. Leaving it closes the response and its
connection whether the body was drained or abandoned.

Failure semantics (all raised before any byte of the body is handed out):
- empty credential -> ``MissingCredentialError`` (no request is built)
- connect/handshake failure -> ``ProviderError`` classified by
  ``classify_exception`` (``TIMEOUT`` / ``TRANSIENT``)
- non-2xx status -> ``HttpError`` with the provider's message when the body
  is JSON carrying one, else ``"<status> <reason>"``
- 2xx without a body -> ``NoResponseBodyError``

Mid-stream read failures surface from the handle as
``TransportInterruptionError``.
"""
from __future__ import annotations

import contextlib
import time
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Iterator, Optional

import httpx

from ..base.errors import (
    RETRYABLE_CODES,
    ErrorCode,
    HttpError,
    MissingCredentialError,
    NoResponseBodyError,
    ProviderError,
    TransportInterruptionError,
    classify_exception,
    code_for_status,
)
from ..base.models import MessageFormatter, StreamRequest
from ..config.defaults import XAI_CHAT_COMPLETIONS_PATH, XAI_PROVIDER_NAME
from ..transform import convert_to_openai_messages

_NO_BODY_STATUSES = (204, 205)


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "text/event-stream",
        "Authorization": f"Bearer {api_key}",
    }


def extract_error_message(body: Any) -> Optional[str]:
    """Pull a human-readable message out of a provider error body.

    Accepts ``{"error": {"message": ...}}``, ``{"error": "..."}`` and
    ``{"message": ...}``; returns ``None`` for anything else.
    """
    if not isinstance(body, dict):
        return None
    err = body.get("error")
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg:
            return msg
    elif isinstance(err, str) and err:
        return err
    msg = body.get("message")
    return msg if isinstance(msg, str) and msg else None


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Convert a ``Retry-After`` header (seconds or HTTP date) to seconds."""
    if not value:
        return None
    value = value.strip()
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    return max(0.0, when.timestamp() - time.time())


def http_error_from_response(response: httpx.Response, *, provider: str, model: str) -> HttpError:
    """Build an :class:`HttpError` from a failed (still open) streaming response."""
    status = response.status_code
    message = f"{status} {response.reason_phrase}".strip()
    detail: Optional[str] = None
    with contextlib.suppress(httpx.HTTPError):
        response.read()
        with contextlib.suppress(ValueError):
            detail = extract_error_message(response.json())
    if detail:
        message = f"{message} - {detail}"
    return HttpError(
        code=code_for_status(status),
        message=message,
        provider=provider,
        model=model,
        status=status,
        retry_after=parse_retry_after(response.headers.get("retry-after")),
    )


class ByteStreamHandle:
    """Pull-based reader over the raw body chunks of one response.

    ``read_chunk`` returns the next chunk, or ``None`` once the body is
    exhausted (``at_eof`` turns True). The body is read once, front to back.
    """

    def __init__(self, response: httpx.Response, *, provider: str, model: str) -> None:
        self._response = response
        self._provider = provider
        self._model = model
        self._chunks: Optional[Iterator[bytes]] = None
        self._eof = False

    @property
    def at_eof(self) -> bool:
        return self._eof

    @property
    def status_code(self) -> int:
        return self._response.status_code

    def read_chunk(self) -> Optional[bytes]:
        if self._eof:
            return None
        if self._chunks is None:
            self._chunks = self._response.iter_bytes()
        try:
            return next(self._chunks)
        except StopIteration:
            self._eof = True
            return None
        except (httpx.HTTPError, httpx.StreamError) as e:
            self._eof = True
            code = classify_exception(e)
            if code is ErrorCode.UNKNOWN:
                code = ErrorCode.TRANSIENT
            raise TransportInterruptionError(
                code=code,
                message=f"stream interrupted: {str(e) or type(e).__name__}",
                provider=self._provider,
                model=self._model,
                retryable=code in RETRYABLE_CODES,
                raw=e,
            ) from e

    def __iter__(self) -> Iterator[bytes]:
        while (chunk := self.read_chunk()) is not None:
            yield chunk


@contextlib.contextmanager
def open_stream(
    client: httpx.Client,
    request: StreamRequest,
    api_key: Optional[str],
    *,
    formatter: MessageFormatter = convert_to_openai_messages,
    provider: str = XAI_PROVIDER_NAME,
    path: str = XAI_CHAT_COMPLETIONS_PATH,
) -> Iterator[ByteStreamHandle]:
    """Open the streaming POST for ``request`` and yield its body handle.

    ``path`` is resolved against the client's ``base_url``; pass an absolute
    URL to bypass it.
    """
    if not api_key:
        raise MissingCredentialError(
            message="X.AI API key is required",
            provider=provider,
            model=request.model,
        )
    payload = request.to_payload(formatter)
    with contextlib.ExitStack() as stack:
        try:
            response = stack.enter_context(
                client.stream("POST", path, json=payload, headers=build_headers(api_key))
            )
        except httpx.HTTPError as e:
            code = classify_exception(e)
            raise ProviderError(
                code=code,
                message=f"request failed: {str(e) or type(e).__name__}",
                provider=provider,
                model=request.model,
                retryable=code in RETRYABLE_CODES,
                raw=e,
            ) from e
        if not response.is_success:
            raise http_error_from_response(response, provider=provider, model=request.model)
        if response.status_code in _NO_BODY_STATUSES or getattr(response, "stream", None) is None:
            raise NoResponseBodyError(provider=provider, model=request.model)
        yield ByteStreamHandle(response, provider=provider, model=request.model)


__all__ = [
    "ByteStreamHandle",
    "build_headers",
    "extract_error_message",
    "http_error_from_response",
    "open_stream",
    "parse_retry_after",
]
