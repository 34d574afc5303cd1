"""Normalized stream events handed to callers.

A streaming call yields a lazy sequence of two event kinds:

* :class:`TextDelta` - a fragment of assistant output; fragments are
  concatenated in arrival order.
* :class:`UsageTotal` - token counts as reported by the provider. It may show
  up zero or more times, including after text; each report supersedes the
  previous one.

Both carry a ``type`` discriminator so consumers can branch without
``isinstance`` checks.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional, Union


@dataclass(frozen=True)
class TextDelta:
    text: str
    type: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True)
class UsageTotal:
    input_tokens: int
    output_tokens: int
    type: Literal["usage"] = field(default="usage", init=False)

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


StreamEvent = Union[TextDelta, UsageTotal]


@dataclass
class StreamSummary:
    """Result of draining a stream with :func:`accumulate_events`.

    Attributes:
        text: Concatenation of every text delta.
        input_tokens / output_tokens: Latest usage report, ``None`` when the
            provider reported none.
        events: Number of events consumed.
    """

    text: str = ""
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    events: int = 0


def accumulate_events(events: Iterable[StreamEvent]) -> StreamSummary:
    """Drain ``events`` into a :class:`StreamSummary`.

    Errors raised by the underlying stream propagate unchanged.
    """
    parts: List[str] = []
    summary = StreamSummary()
    for evt in events:
        summary.events += 1
        if isinstance(evt, TextDelta):
            parts.append(evt.text)
        elif isinstance(evt, UsageTotal):
            summary.input_tokens = evt.input_tokens
            summary.output_tokens = evt.output_tokens
    summary.text = "".join(parts)
    return summary


__all__ = [
    "TextDelta",
    "UsageTotal",
    "StreamEvent",
    "StreamSummary",
    "accumulate_events",
]
