"""Shared fixtures for the streaming client test suite.

Network access is never needed: every HTTP exchange goes through
``httpx.MockTransport`` and a chunked body whose boundaries the test controls.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator, List, Sequence, Union

import httpx
import pytest

from xai_streaming.base.http import close_all_clients

Chunk = Union[bytes, BaseException]


class ChunkedBody(httpx.SyncByteStream):
    """Response body yielding pre-cut chunks; an exception entry is raised in place."""

    def __init__(self, chunks: Sequence[Chunk]) -> None:
        self._chunks = list(chunks)
        self.closed = False
        self.pulled = 0

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self._chunks:
            if isinstance(chunk, BaseException):
                raise chunk
            self.pulled += 1
            yield chunk

    def close(self) -> None:
        self.closed = True


class ListHandler(logging.Handler):
    """Capture formatted log messages for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self) -> List[dict]:
        return [json.loads(m) for m in self.messages]


def sse(*payloads: Any) -> bytes:
    """Encode payloads as ``data:`` lines (dicts are JSON-encoded, strings kept)."""
    lines = []
    for p in payloads:
        body = p if isinstance(p, str) else json.dumps(p)
        lines.append(f"data: {body}\n")
    return "".join(lines).encode("utf-8")


@pytest.fixture()
def sse_bytes() -> Callable[..., bytes]:
    return sse


@pytest.fixture()
def list_logger() -> Iterator[tuple[logging.Logger, ListHandler]]:
    logger = logging.getLogger("xai_streaming.tests.capture")
    handler = ListHandler()
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, handler
    logger.handlers[:] = []


@pytest.fixture()
def chunked_body() -> Callable[[Sequence[Chunk]], ChunkedBody]:
    return ChunkedBody


@pytest.fixture()
def mock_client() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]]:
    """Factory for clients bound to a request handler; all are closed afterwards."""
    created: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(base_url="https://api.x.ai/v1", transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    yield _make
    for c in created:
        c.close()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep real credentials and config files out of the tests."""
    for name in (
        "XAI_API_KEY",
        "GROK_API_KEY",
        "XAI_MODEL",
        "XAI_BASE_URL",
        "XAI_STREAMING_CONFIG_FILE",
        "XAI_STREAMING_LOG_LEVEL",
        "XAI_TIMEOUT_CONNECT_SECONDS",
        "XAI_TIMEOUT_READ_SECONDS",
        "XAI_TIMEOUT_WRITE_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()
