"""Incremental Server-Sent-Events frame decoder.

Turns an unbounded iterable of raw byte chunks into a lazy, forward-only
sequence of :class:`RawFrame` records:

1. Each chunk is decoded with an incremental UTF-8 decoder and appended to a
   rolling text buffer, so neither a line nor a multi-byte character has to
   align with a chunk boundary.
2. Complete lines are cut at ``\\n``; the unterminated tail stays buffered.
3. Lines are trimmed; blank lines, SSE comments and non-``data:`` fields are
   skipped. The ``data: `` prefix is stripped and the rest parsed as a
   frame.
4. A line that fails to parse is reported to ``on_error`` as a
   :class:`FrameParseError` and skipped. It never aborts the stream.
5. At end of input any unterminated tail is dropped.

The buffer is private to one call and never escapes the generator.
"""
from __future__ import annotations

import codecs
from typing import Callable, Iterable, Iterator, List, Optional

from ..errors import FrameParseError
from .frames import RawFrame

DATA_PREFIX = "data: "

FrameErrorCallback = Callable[[FrameParseError], None]


class LineBuffer:
    """Rolling text buffer that yields only newline-terminated lines."""

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        # Pieces of the unterminated tail; joined only once a newline arrives.
        self._tail: List[str] = []

    def feed(self, chunk: bytes) -> List[str]:
        """Append ``chunk`` and return every line it completed (without ``\\n``)."""
        text = self._decoder.decode(chunk)
        if "\n" not in text:
            if text:
                self._tail.append(text)
            return []
        self._tail.append(text)
        *lines, rest = "".join(self._tail).split("\n")
        self._tail = [rest] if rest else []
        return lines

    @property
    def pending(self) -> str:
        """Unterminated text still waiting for its newline."""
        return "".join(self._tail)


def parse_data_line(line: str) -> Optional[RawFrame]:
    """Parse one raw SSE line.

    Returns ``None`` for lines that carry no data payload. Raises
    :class:`FrameParseError` when a ``data:`` payload is not JSON.
    """
    line = line.strip()
    if not line or not line.startswith(DATA_PREFIX):
        return None
    payload = line[len(DATA_PREFIX):]
    try:
        return RawFrame.from_payload(payload)
    except ValueError as e:
        raise FrameParseError(line, str(e)) from e


def iter_sse_frames(
    chunks: Iterable[bytes],
    on_error: Optional[FrameErrorCallback] = None,
) -> Iterator[RawFrame]:
    """Yield frames from ``chunks`` in arrival order.

    ``chunks`` is read exactly once, front to back. Exceptions raised while
    pulling a chunk (for example a dropped connection) propagate to the
    caller; parse failures of individual lines do not.
    """
    buffer = LineBuffer()
    for chunk in chunks:
        if not chunk:
            continue
        for line in buffer.feed(chunk):
            try:
                frame = parse_data_line(line)
            except FrameParseError as err:
                if on_error is not None:
                    on_error(err)
                continue
            if frame is not None:
                yield frame


__all__ = [
    "DATA_PREFIX",
    "FrameErrorCallback",
    "LineBuffer",
    "parse_data_line",
    "iter_sse_frames",
]
