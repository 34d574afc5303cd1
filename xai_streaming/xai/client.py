"""XAIProvider: streaming chat completions from the xAI (Grok) API.

``create_message`` runs the whole call as one lazy generator:

    resolve model -> build StreamRequest -> open_stream (credential check,
    POST, status check) -> iter_sse_frames -> translate_frame -> yield events

Events are yielded in byte-arrival order as soon as each line completes.
There is no retry and no deadline here; wrap the call with
``xai_streaming.base.resilience.retry.with_retry`` and bound it from the
outside if needed. Closing the generator early closes the HTTP response.

Logging goes through an injected logger (default: ``get_logger("xai")``),
and line-level decode failures through an injected ``on_decode_error``
callback (default: a ``stream.decode_error`` log event).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Sequence

import httpx

from ..base.errors import FrameParseError, ProviderError
from ..base.http import get_httpx_client
from ..base.log_support import new_call_id
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Message, MessageFormatter, ModelSelection, StreamRequest
from ..base.resilience.retry import RetryConfig
from ..base.streaming import StreamEvent, StreamMetrics, iter_sse_frames, translate_frame
from ..base.streaming.sse import FrameErrorCallback
from ..config import get_provider_config
from ..config.defaults import (
    RETRY_DEFAULT_BASE_DELAY,
    RETRY_DEFAULT_MAX_ATTEMPTS,
    RETRY_DEFAULT_MAX_DELAY,
    XAI_DEFAULT_BASE_URL,
    XAI_PROVIDER_NAME,
)
from ..transform import convert_to_openai_messages
from .models import resolve_model
from .transport import open_stream


class XAIProvider:
    """Streaming client for the xAI chat-completions endpoint.

    Parameters:
        api_key: Bearer credential. May be omitted at construction; a call
            without it fails with ``MissingCredentialError`` before any
            network activity.
        model: Requested model id; unknown or missing ids resolve to the
            default model.
        base_url: API root, default ``https://api.x.ai/v1``.
        client: ``httpx.Client`` to use; default is the shared pooled client.
        logger: Logger for structured stream events.
        on_decode_error: Callback receiving each ``FrameParseError``.
        formatter: Message formatter for the conversation history.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        on_decode_error: Optional[FrameErrorCallback] = None,
        formatter: MessageFormatter = convert_to_openai_messages,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = (base_url or XAI_DEFAULT_BASE_URL).rstrip("/")
        self._client = client
        self._logger = logger or get_logger("xai")
        self._on_decode_error = on_decode_error
        self._formatter = formatter

    @property
    def provider_name(self) -> str:
        return XAI_PROVIDER_NAME

    @classmethod
    def from_config(cls, overrides: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "XAIProvider":
        """Build a provider from merged configuration (defaults, file, env, overrides)."""
        cfg = get_provider_config(XAI_PROVIDER_NAME, overrides)
        return cls(
            api_key=cfg.get("api_key"),
            model=cfg.get("model"),
            base_url=cfg.get("base_url"),
            **kwargs,
        )

    def get_model(self) -> ModelSelection:
        return resolve_model(self._model)

    def _http_client(self) -> httpx.Client:
        if self._client is None:
            self._client = get_httpx_client(self._base_url, purpose="xai.stream")
        return self._client

    def create_message(self, system_prompt: str, messages: Sequence[Message]) -> Iterator[StreamEvent]:
        """Stream one chat completion as :class:`TextDelta` / :class:`UsageTotal` events.

        Raises (on iteration): ``MissingCredentialError``, ``HttpError``,
        ``NoResponseBodyError``, ``ProviderError`` for connect failures, and
        ``TransportInterruptionError`` after already-yielded events when the
        connection drops mid-stream. Malformed lines are skipped.
        """
        model_id = self.get_model().id
        request = StreamRequest.build(model_id, system_prompt, messages)
        ctx = LogContext(provider=self.provider_name, model=model_id, call_id=new_call_id())
        metrics = StreamMetrics()

        def _on_error(err: FrameParseError) -> None:
            metrics.decode_errors += 1
            if self._on_decode_error is not None:
                self._on_decode_error(err)
            else:
                normalized_log_event(
                    self._logger,
                    "stream.decode_error",
                    ctx,
                    phase="mid_stream",
                    level=logging.WARNING,
                    error=str(err),
                    line=err.line,
                )

        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            messages=len(request.messages),
        )
        try:
            with open_stream(
                self._http_client(),
                request,
                self._api_key,
                formatter=self._formatter,
                provider=self.provider_name,
            ) as handle:
                for frame in iter_sse_frames(handle, on_error=_on_error):
                    for event in translate_frame(frame):
                        metrics.record(event)
                        yield event
        except GeneratorExit:
            metrics.finish()
            normalized_log_event(
                self._logger,
                "stream.abandoned",
                ctx,
                phase="mid_stream",
                emitted=metrics.emitted,
                tokens=metrics.tokens(),
            )
            raise
        except ProviderError as e:
            metrics.finish()
            normalized_log_event(
                self._logger,
                "stream.error",
                ctx,
                phase="mid_stream" if metrics.emitted else "start",
                level=logging.ERROR,
                error_code=e.code.value,
                emitted=metrics.emitted,
                tokens=metrics.tokens(),
                error=e.message,
                retryable=e.retryable,
            )
            raise
        metrics.finish()
        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=metrics.emitted,
            tokens=metrics.tokens(),
            metrics=metrics.to_dict(),
        )

    def build_retry_config(self, *, phase: str = "stream") -> RetryConfig:
        """Retry policy from configuration, logging each attempt as ``retry.attempt``."""
        retry_cfg = get_provider_config(XAI_PROVIDER_NAME).get("retry") or {}
        ctx = LogContext(provider=self.provider_name, model=self.get_model().id)

        def _attempt_logger(*, attempt: int, max_attempts: int, delay, error: ProviderError | None) -> None:
            normalized_log_event(
                self._logger,
                "retry.attempt",
                ctx,
                phase=phase,
                attempt=attempt,
                max_attempts=max_attempts,
                delay=delay,
                error_code=(error.code.value if error else None),
                will_retry=bool(error and delay is not None),
            )

        return RetryConfig(
            max_attempts=int(retry_cfg.get("max_attempts", RETRY_DEFAULT_MAX_ATTEMPTS)),
            base_delay=float(retry_cfg.get("base_delay", RETRY_DEFAULT_BASE_DELAY)),
            max_delay=float(retry_cfg.get("max_delay", RETRY_DEFAULT_MAX_DELAY)),
            attempt_logger=_attempt_logger,
        )


__all__ = ["XAIProvider"]
