"""Map decoded frames onto normalized stream events."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .events import StreamEvent, TextDelta, UsageTotal
from .frames import RawFrame


def translate_frame(frame: RawFrame) -> List[StreamEvent]:
    """Return the events carried by one frame (zero, one or two).

    - non-empty ``choices[0].delta.content`` -> :class:`TextDelta`
    - any ``usage`` object -> :class:`UsageTotal`, missing counts as ``0``

    Frames matching neither shape (heartbeats, role-only deltas, finish
    markers) produce nothing.
    """
    events: List[StreamEvent] = []
    content: Optional[str] = frame.delta_content()
    if content:
        events.append(TextDelta(text=content))
    if frame.usage is not None:
        events.append(
            UsageTotal(
                input_tokens=frame.usage.prompt_tokens or 0,
                output_tokens=frame.usage.completion_tokens or 0,
            )
        )
    return events


def translate_frames(frames: Iterable[RawFrame]) -> Iterator[StreamEvent]:
    """Flatten :func:`translate_frame` over a frame sequence, preserving order."""
    for frame in frames:
        yield from translate_frame(frame)


__all__ = ["translate_frame", "translate_frames"]
