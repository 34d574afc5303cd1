"""Streaming package: frame records, SSE decoding, normalization, metrics.

Exposes the streaming primitives under a single namespace.
"""

from .events import StreamEvent, StreamSummary, TextDelta, UsageTotal, accumulate_events
from .frames import FrameChoice, FrameDelta, FrameUsage, RawFrame
from .metrics import StreamMetrics
from .normalizer import translate_frame, translate_frames
from .sse import DATA_PREFIX, LineBuffer, iter_sse_frames, parse_data_line

__all__ = [
    "StreamEvent",
    "TextDelta",
    "UsageTotal",
    "StreamSummary",
    "accumulate_events",
    "RawFrame",
    "FrameChoice",
    "FrameDelta",
    "FrameUsage",
    "StreamMetrics",
    "translate_frame",
    "translate_frames",
    "DATA_PREFIX",
    "LineBuffer",
    "iter_sse_frames",
    "parse_data_line",
]
