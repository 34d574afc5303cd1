"""xai_streaming package

Streaming chat-completions client for the xAI (Grok) API. A call yields a
lazy sequence of normalized events (:class:`TextDelta`,
:class:`UsageTotal`) decoded from the provider's Server-Sent-Events body.

Typical use::

    from xai_streaming import XAIProvider, Message, with_retry

    provider = XAIProvider(api_key="...", model="grok-2-1212")
    stream = with_retry(provider.create_message, provider.build_retry_config())
    for event in stream("You are terse.", [Message(role="user", content="Hi")]):
        ...

Public API (re-exported):
    - Version: ``__version__``
    - Provider: :class:`XAIProvider`, :func:`resolve_model`
    - Events: :class:`TextDelta`, :class:`UsageTotal`, :func:`accumulate_events`
    - Messages: :class:`Message`, :class:`ContentPart`
    - Errors: :class:`ProviderError` and subclasses, :class:`ErrorCode`
    - Retry: :class:`RetryConfig`, :func:`with_retry`
"""

from .base.errors import (
    ErrorCode,
    HttpError,
    MissingCredentialError,
    NoResponseBodyError,
    ProviderError,
    TransportInterruptionError,
)
from .base.models import ContentPart, Message, ModelInfo, ModelSelection
from .base.resilience import RetryConfig, with_retry
from .base.streaming import StreamEvent, StreamSummary, TextDelta, UsageTotal, accumulate_events
from .xai import XAIProvider, resolve_model

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "XAIProvider",
    "resolve_model",
    "StreamEvent",
    "TextDelta",
    "UsageTotal",
    "StreamSummary",
    "accumulate_events",
    "Message",
    "ContentPart",
    "ModelInfo",
    "ModelSelection",
    "ErrorCode",
    "ProviderError",
    "MissingCredentialError",
    "HttpError",
    "NoResponseBodyError",
    "TransportInterruptionError",
    "RetryConfig",
    "with_retry",
]
