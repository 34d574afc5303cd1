"""
StreamRequest DTO: everything needed to open one streaming chat call.

Built fresh at call entry and discarded at call exit. The message history is
stored as a tuple so the request stays immutable once constructed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from .message import Message

# Sampling temperature sent with every streaming request.
STREAM_TEMPERATURE = 0

MessageFormatter = Callable[[Sequence[Message]], List[Dict[str, Any]]]


@dataclass(frozen=True)
class StreamRequest:
    """Immutable description of a streaming chat request.

    Attributes:
        model: Resolved model identifier.
        system_prompt: System prompt sent as the first wire message.
        messages: Ordered conversation history (neutral representation).
        temperature: Fixed sampling temperature.
    """

    model: str
    system_prompt: str
    messages: Tuple[Message, ...] = ()
    temperature: float = STREAM_TEMPERATURE

    @classmethod
    def build(cls, model: str, system_prompt: str, messages: Sequence[Message]) -> "StreamRequest":
        return cls(model=model, system_prompt=system_prompt, messages=tuple(messages))

    def to_payload(self, formatter: MessageFormatter) -> Dict[str, Any]:
        """Return the JSON body for the chat-completions endpoint.

        The system prompt is always the first message; ``formatter`` converts
        the remaining history into ``{role, content}`` objects.
        """
        return {
            "model": self.model,
            "messages": [{"role": "system", "content": self.system_prompt}, *formatter(self.messages)],
            "temperature": self.temperature,
            "stream": True,
        }


__all__ = [
    "StreamRequest",
    "MessageFormatter",
    "STREAM_TEMPERATURE",
]
