"""Models parts package public surface.

`xai_streaming.base.models` remains the primary stable import path.
"""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role
from .model_info import ModelInfo, ModelSelection
from .stream_request import STREAM_TEMPERATURE, MessageFormatter, StreamRequest

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
