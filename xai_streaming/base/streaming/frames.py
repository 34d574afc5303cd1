"""Typed records for decoded chat-completions stream payloads.

Each ``data:`` line of the SSE body carries one JSON object. Only two paths
matter to the client: ``choices[0].delta.content`` and ``usage``. They are
validated independently, so an off-shape ``usage`` never hides the text of
the same frame and vice versa. Unknown keys (``id``, ``created``,
``finish_reason`` ...) are ignored.

External dependencies: Pydantic / pydantic-core for parsing and validating
untrusted provider JSON.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from pydantic_core import from_json


def _lenient_count(value: Any) -> Optional[int]:
    """Token counts: ints pass, finite floats truncate, anything else is absent."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


TokenCount = Annotated[Optional[int], BeforeValidator(_lenient_count)]


class _FrameRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class FrameDelta(_FrameRecord):
    """Incremental message delta of one streamed choice."""

    content: Optional[str] = None


class FrameChoice(_FrameRecord):
    """One streamed choice; the client only reads the first."""

    delta: Optional[FrameDelta] = None


class FrameUsage(_FrameRecord):
    """Provider-reported token counts (either field may be omitted)."""

    prompt_tokens: TokenCount = None
    completion_tokens: TokenCount = None


def _first_choice(raw: Any) -> Optional[List[Optional[FrameChoice]]]:
    if not isinstance(raw, list):
        return None
    if not raw:
        return []
    try:
        return [FrameChoice.model_validate(raw[0])]
    except ValidationError:
        return [None]


def _usage(raw: Any) -> Optional[FrameUsage]:
    # Any truthy usage value counts as a report; missing counts read as zero.
    if not raw:
        return None
    if isinstance(raw, dict):
        return FrameUsage.model_validate(raw)
    return FrameUsage()


class RawFrame(_FrameRecord):
    """A single decoded SSE payload.

    Transient: exists only while one line is being normalized.
    """

    choices: Optional[List[Optional[FrameChoice]]] = None
    usage: Optional[FrameUsage] = None

    @classmethod
    def from_payload(cls, payload: str) -> "RawFrame":
        """Parse one ``data:`` payload.

        Raises ``ValueError`` only when the payload is not JSON. A JSON value
        that is not an object yields an empty frame.
        """
        data = from_json(payload)
        if not isinstance(data, dict):
            return cls()
        return cls(choices=_first_choice(data.get("choices")), usage=_usage(data.get("usage")))

    def delta_content(self) -> Optional[str]:
        """Return ``choices[0].delta.content`` or ``None`` when any step is absent."""
        if not self.choices:
            return None
        first = self.choices[0]
        if first is None or first.delta is None:
            return None
        return first.delta.content


__all__ = [
    "FrameDelta",
    "FrameChoice",
    "FrameUsage",
    "RawFrame",
    "TokenCount",
]
