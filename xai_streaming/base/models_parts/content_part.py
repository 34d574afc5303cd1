"""
Content part model for structured conversation messages.

A message's content may be split into parts: plain text, inline images, and
the tool-use / tool-result pairs of an agent loop. The message formatter maps
each part type onto the provider's chat-completions wire shape.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",         # plain text in ``text``
    "image",        # ``data`` = {"media_type": ..., "data": <base64>}
    "tool_use",     # ``data`` = {"id": ..., "name": ..., "input": {...}}
    "tool_result",  # ``data`` = {"tool_use_id": ..., "content": str | [parts]}
]


@dataclass
class ContentPart:
    """A single piece of structured message content.

    Attributes:
        type: The semantic kind of the part.
        text: Text for ``text`` parts (and an optional plain-text result body
            for ``tool_result`` parts).
        data: Payload for the non-text kinds; see ``ContentPartType``.
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
