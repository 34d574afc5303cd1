"""Per-call streaming metrics reported in the ``stream.end`` log event."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .events import StreamEvent, TextDelta, UsageTotal


@dataclass
class StreamMetrics:
    """Counters for a single streaming call.

    ``time_to_first_token_ms`` is measured to the first text delta, not the
    first usage report.
    """

    emitted: int = 0
    decode_errors: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    _t0: float = field(default_factory=time.perf_counter, repr=False)

    def record(self, event: StreamEvent) -> None:
        self.emitted += 1
        if isinstance(event, TextDelta) and self.time_to_first_token_ms is None:
            self.time_to_first_token_ms = (time.perf_counter() - self._t0) * 1000.0
        elif isinstance(event, UsageTotal):
            self.prompt_tokens = event.input_tokens
            self.completion_tokens = event.output_tokens

    def finish(self) -> None:
        self.total_duration_ms = (time.perf_counter() - self._t0) * 1000.0

    def tokens(self) -> Optional[Dict[str, Optional[int]]]:
        """Canonical token mapping, or ``None`` when no usage was reported."""
        if self.prompt_tokens is None and self.completion_tokens is None:
            return None
        total = None
        if self.prompt_tokens is not None and self.completion_tokens is not None:
            total = self.prompt_tokens + self.completion_tokens
        return {"prompt": self.prompt_tokens, "completion": self.completion_tokens, "total": total}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emitted": self.emitted,
            "decode_errors": self.decode_errors,
            "time_to_first_token_ms": self.time_to_first_token_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
