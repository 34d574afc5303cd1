"""End-to-end streaming through XAIProvider against a mocked transport."""
from __future__ import annotations

import json

import httpx
import pytest

from xai_streaming import XAIProvider
from xai_streaming.base.errors import (
    ErrorCode,
    FrameParseError,
    HttpError,
    MissingCredentialError,
    TransportInterruptionError,
)
from xai_streaming.base.models import Message
from xai_streaming.base.resilience import RetryConfig, with_retry
from xai_streaming.base.streaming import TextDelta, UsageTotal, accumulate_events


def _provider(client, logger, **kwargs):
    return XAIProvider(api_key="xai-test-key", client=client, logger=logger, **kwargs)


def test_text_then_usage(mock_client, chunked_body, sse_bytes, list_logger):
    logger, handler = list_logger
    seen = []

    def respond(request):
        seen.append(request)
        return httpx.Response(
            200,
            stream=chunked_body(
                [
                    sse_bytes({"choices": [{"delta": {"content": "Hi"}}]}),
                    sse_bytes({"usage": {"prompt_tokens": 5, "completion_tokens": 2}}),
                ]
            ),
        )

    provider = _provider(mock_client(respond), logger, model="grok-2-1212")
    events = list(provider.create_message("You are terse.", [Message(role="user", content="Hello")]))
    assert events == [TextDelta("Hi"), UsageTotal(input_tokens=5, output_tokens=2)]  # nosec B101

    request = seen[0]
    assert request.url.path == "/v1/chat/completions"  # nosec B101
    assert request.headers["authorization"] == "Bearer xai-test-key"  # nosec B101
    assert request.headers["accept"] == "text/event-stream"  # nosec B101
    body = json.loads(request.content)
    assert body["model"] == "grok-2-1212"  # nosec B101
    assert body["messages"] == [  # nosec B101
        {"role": "system", "content": "You are terse."},
        {"role": "user", "content": "Hello"},
    ]
    assert body["temperature"] == 0 and body["stream"] is True  # nosec B101

    names = [e["event"] for e in handler.events()]
    assert names == ["stream.start", "stream.end"]  # nosec B101
    end = handler.events()[-1]
    assert end["emitted"] == 2 and end["tokens"]["total"] == 7  # nosec B101
    assert end["call_id"] == handler.events()[0]["call_id"]  # nosec B101


def test_unknown_model_uses_default(mock_client, chunked_body, list_logger):
    seen = []

    def respond(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, stream=chunked_body([]))

    provider = _provider(mock_client(respond), list_logger[0], model="nope")
    assert list(provider.create_message("s", [])) == []  # nosec B101
    assert seen[0]["model"] == "grok-beta"  # nosec B101


def test_missing_key_fails_before_network(mock_client, list_logger):
    calls = []
    client = mock_client(lambda r: calls.append(r) or httpx.Response(200))
    provider = XAIProvider(api_key=None, client=client, logger=list_logger[0])
    with pytest.raises(MissingCredentialError):
        list(provider.create_message("s", [Message(role="user", content="x")]))
    assert calls == []  # nosec B101
    error_event = list_logger[1].events()[-1]
    assert error_event["event"] == "stream.error" and error_event["error_code"] == "auth"  # nosec B101


def test_http_error_surfaces_before_any_event(mock_client, list_logger):
    client = mock_client(lambda r: httpx.Response(401, json={"error": {"message": "invalid key"}}))
    provider = _provider(client, list_logger[0])
    with pytest.raises(HttpError) as ei:
        next(provider.create_message("s", []))
    assert ei.value.code is ErrorCode.AUTH and "invalid key" in str(ei.value)  # nosec B101


def test_interruption_after_partial_output(mock_client, chunked_body, sse_bytes, list_logger):
    body = chunked_body(
        [
            sse_bytes({"choices": [{"delta": {"content": "par"}}]}),
            httpx.ReadError("connection reset"),
        ]
    )
    provider = _provider(mock_client(lambda r: httpx.Response(200, stream=body)), list_logger[0])
    received = []
    with pytest.raises(TransportInterruptionError):
        for event in provider.create_message("s", []):
            received.append(event)
    assert received == [TextDelta("par")]  # nosec B101
    assert body.closed  # nosec B101
    error_event = list_logger[1].events()[-1]
    assert error_event["phase"] == "mid_stream" and error_event["emitted"] == 1  # nosec B101


def test_malformed_lines_go_to_callback(mock_client, chunked_body, list_logger):
    errors = []
    body = chunked_body(
        [
            b'data: {"choices":[{"delta":{"content":"A"}}]}\n',
            b"data: {broken\n",
            b"data: [DONE]\n",
            b'data: {"choices":[{"delta":{"content":"B"}}]}\n',
        ]
    )
    provider = _provider(
        mock_client(lambda r: httpx.Response(200, stream=body)),
        list_logger[0],
        on_decode_error=errors.append,
    )
    summary = accumulate_events(provider.create_message("s", []))
    assert summary.text == "AB"  # nosec B101
    assert len(errors) == 2 and all(isinstance(e, FrameParseError) for e in errors)  # nosec B101
    assert list_logger[1].events()[-1]["metrics"]["decode_errors"] == 2  # nosec B101


def test_malformed_lines_logged_without_callback(mock_client, chunked_body, list_logger):
    body = chunked_body([b"data: nope\n"])
    provider = _provider(mock_client(lambda r: httpx.Response(200, stream=body)), list_logger[0])
    assert list(provider.create_message("s", [])) == []  # nosec B101
    warnings = [e for e in list_logger[1].events() if e["event"] == "stream.decode_error"]
    assert len(warnings) == 1 and warnings[0]["line"] == "data: nope"  # nosec B101


def test_early_close_releases_response(mock_client, chunked_body, sse_bytes, list_logger):
    body = chunked_body([sse_bytes({"choices": [{"delta": {"content": str(i)}}]}) for i in range(10)])
    provider = _provider(mock_client(lambda r: httpx.Response(200, stream=body)), list_logger[0])
    stream = provider.create_message("s", [])
    assert next(stream) == TextDelta("0")  # nosec B101
    stream.close()
    assert body.closed and body.pulled == 1  # nosec B101
    assert list_logger[1].events()[-1]["event"] == "stream.abandoned"  # nosec B101


def test_lazy_until_first_pull(mock_client, list_logger):
    calls = []
    client = mock_client(lambda r: calls.append(r) or httpx.Response(204))
    stream = _provider(client, list_logger[0]).create_message("s", [])
    assert calls == []  # nosec B101
    stream.close()


def test_with_retry_recovers_from_unavailable(monkeypatch, mock_client, chunked_body, sse_bytes, list_logger):
    monkeypatch.setattr("time.sleep", lambda *_: None)
    responses = [
        httpx.Response(503, text="busy"),
        httpx.Response(200, stream=chunked_body([sse_bytes({"choices": [{"delta": {"content": "ok"}}]})])),
    ]
    provider = _provider(mock_client(lambda r: responses.pop(0)), list_logger[0])
    stream = with_retry(provider.create_message, RetryConfig(max_attempts=2, base_delay=0.0))
    assert list(stream("s", [])) == [TextDelta("ok")]  # nosec B101


def test_from_config_reads_env(monkeypatch, list_logger):
    monkeypatch.setenv("XAI_API_KEY", "env-key")
    monkeypatch.setenv("XAI_MODEL", "grok-vision-beta")
    provider = XAIProvider.from_config(logger=list_logger[0])
    assert provider.get_model().id == "grok-vision-beta"  # nosec B101
    assert provider.get_model().info.supports_images  # nosec B101


def test_build_retry_config_logs_attempts(list_logger, tmp_path, monkeypatch):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"xai": {"retry": {"max_attempts": 4}}}), encoding="utf-8")
    monkeypatch.setenv("XAI_STREAMING_CONFIG_FILE", str(path))
    cfg = XAIProvider(logger=list_logger[0]).build_retry_config()
    assert cfg.max_attempts == 4 and cfg.base_delay == 1.0  # nosec B101
    cfg.attempt_logger(attempt=0, max_attempts=4, delay=1.0, error=None)
    assert list_logger[1].events()[-1]["event"] == "retry.attempt"  # nosec B101


def test_corrupt_body_mid_stream_is_a_provider_error(mock_client, chunked_body, sse_bytes, list_logger):
    body = chunked_body(
        [
            sse_bytes({"choices": [{"delta": {"content": "Hi"}}]}),
            httpx.DecodingError("bad gzip"),
        ]
    )
    provider = _provider(mock_client(lambda r: httpx.Response(200, stream=body)), list_logger[0])
    received = []
    with pytest.raises(TransportInterruptionError) as ei:
        for event in with_retry(provider.create_message, RetryConfig(max_attempts=3))("s", []):
            received.append(event)
    assert received == [TextDelta("Hi")]  # nosec B101
    assert ei.value.code is ErrorCode.TRANSIENT  # nosec B101
    error_event = list_logger[1].events()[-1]
    assert error_event["event"] == "stream.error" and error_event["error_code"] == "transient"  # nosec B101
