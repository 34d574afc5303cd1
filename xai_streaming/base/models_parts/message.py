"""
Neutral conversation message used by callers of the streaming client.

The provider never sees this type directly: ``transform.openai_format``
converts a list of messages into the wire schema.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Union

from .content_part import ContentPart


Role = Literal["system", "user", "assistant"]


@dataclass
class Message:
    """A chat message whose content is plain text or a list of parts."""

    role: Role
    content: Union[str, List[ContentPart]]

    def is_structured(self) -> bool:
        """Return True if the message content is a list of parts."""
        return isinstance(self.content, list)

    def text_or_joined(self) -> str:
        """Return a flattened text view of the content.

        Text parts are joined with newlines; other parts are shown as
        bracketed type tokens (``[image]``).
        """
        if isinstance(self.content, str):
            return self.content
        return "\n".join(p.text if p.text else f"[{p.type}]" for p in self.content)


__all__ = [
    "Message",
    "Role",
]
