"""
Domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``xai_streaming.base.models_parts``.
"""

from .models_parts import (
    STREAM_TEMPERATURE,
    ContentPart,
    ContentPartType,
    Message,
    MessageFormatter,
    ModelInfo,
    ModelSelection,
    Role,
    StreamRequest,
)

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ModelInfo",
    "ModelSelection",
    "StreamRequest",
    "MessageFormatter",
    "STREAM_TEMPERATURE",
]
