"""xAI (Grok) provider: model catalog, transport and streaming client."""

from .client import XAIProvider
from .models import XAI_DEFAULT_MODEL_ID, XAI_MODELS, resolve_model
from .transport import ByteStreamHandle, open_stream

__all__ = [
    "XAIProvider",
    "XAI_MODELS",
    "XAI_DEFAULT_MODEL_ID",
    "resolve_model",
    "ByteStreamHandle",
    "open_stream",
]
