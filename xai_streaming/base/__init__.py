"""
Base package: provider-agnostic building blocks.

- Errors: normalized taxonomy and classification
- Models: request/message/model-catalog DTOs
- Streaming: SSE decoding, frame records, event normalization
- Resilience: retry policy
- HTTP/timeouts: pooled httpx clients
- Logging: structured JSON logging
"""

from .errors import (
    ErrorCode,
    FrameParseError,
    HttpError,
    MissingCredentialError,
    NoResponseBodyError,
    ProviderError,
    TransportInterruptionError,
    classify_exception,
)
from .models import (
    ContentPart,
    ContentPartType,
    Message,
    ModelInfo,
    ModelSelection,
    Role,
    StreamRequest,
)
from .resilience import RetryConfig, retry, retry_stream, with_retry
from .streaming import (
    StreamEvent,
    StreamSummary,
    TextDelta,
    UsageTotal,
    accumulate_events,
    iter_sse_frames,
    translate_frame,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "MissingCredentialError",
    "HttpError",
    "NoResponseBodyError",
    "TransportInterruptionError",
    "FrameParseError",
    "classify_exception",
    # Models
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ModelInfo",
    "ModelSelection",
    "StreamRequest",
    # Resilience
    "RetryConfig",
    "retry",
    "retry_stream",
    "with_retry",
    # Streaming
    "StreamEvent",
    "StreamSummary",
    "TextDelta",
    "UsageTotal",
    "accumulate_events",
    "iter_sse_frames",
    "translate_frame",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
