"""xAI model catalog and model resolution.

The catalog is static: context windows and USD prices per million tokens as
published for the Grok chat models. :func:`resolve_model` is pure and is
called once at the start of each streaming call.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..base.models import ModelInfo, ModelSelection
from ..config.defaults import XAI_DEFAULT_MODEL

XAI_MODELS: Mapping[str, ModelInfo] = MappingProxyType(
    {
        "grok-beta": ModelInfo(
            max_tokens=8192,
            context_window=131072,
            supports_images=False,
            supports_prompt_cache=False,
            input_price=5.0,
            output_price=15.0,
            description="X AI's Grok model - Beta version with 128K context window",
        ),
        "grok-vision-beta": ModelInfo(
            max_tokens=8192,
            context_window=8192,
            supports_images=True,
            supports_prompt_cache=False,
            input_price=5.0,
            output_price=15.0,
            description="X AI's Grok vision model - Beta version with 8K context window",
        ),
        "grok-2-1212": ModelInfo(
            max_tokens=8192,
            context_window=131072,
            supports_images=False,
            supports_prompt_cache=False,
            input_price=2.0,
            output_price=10.0,
            description="X AI's Grok-2 model with 128K context window",
        ),
        "grok-2-vision-1212": ModelInfo(
            max_tokens=8192,
            context_window=32768,
            supports_images=True,
            supports_prompt_cache=False,
            input_price=2.0,
            output_price=10.0,
            description="X AI's Grok-2 vision model with 32K context window",
        ),
    }
)

XAI_DEFAULT_MODEL_ID = XAI_DEFAULT_MODEL


def resolve_model(model_id: Optional[str] = None) -> ModelSelection:
    """Resolve the model for a call.

    Returns ``model_id`` when it names a catalog entry, otherwise the default
    model. Unknown ids fall back silently.
    """
    if model_id and model_id in XAI_MODELS:
        return ModelSelection(id=model_id, info=XAI_MODELS[model_id])
    return ModelSelection(id=XAI_DEFAULT_MODEL_ID, info=XAI_MODELS[XAI_DEFAULT_MODEL_ID])


__all__ = ["XAI_MODELS", "XAI_DEFAULT_MODEL_ID", "resolve_model"]
