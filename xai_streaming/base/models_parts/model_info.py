"""
Model catalog metadata and the resolved model selection.

``ModelInfo`` describes one entry of a provider's static model table (context
window, output cap, pricing per million tokens). ``ModelSelection`` pairs the
resolved model id with that metadata; it is computed once per call and read
only afterwards.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelInfo:
    """Static metadata for a single model.

    Attributes:
        context_window: Maximum prompt + completion tokens.
        max_tokens: Maximum completion tokens, when the provider documents one.
        supports_images: Whether image content parts are accepted.
        supports_prompt_cache: Whether the provider caches prompt prefixes.
        input_price: USD per million input tokens.
        output_price: USD per million output tokens.
        description: Short human-readable summary.
    """

    context_window: int
    max_tokens: Optional[int] = None
    supports_images: bool = False
    supports_prompt_cache: bool = False
    input_price: Optional[float] = None
    output_price: Optional[float] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ModelSelection:
    """Model id resolved for a call, with its catalog metadata."""

    id: str
    info: ModelInfo


__all__ = [
    "ModelInfo",
    "ModelSelection",
]
