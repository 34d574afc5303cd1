"""Correlation fields merged into every stream log event."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


def new_call_id() -> str:
    """Short random id tying together the log events of one streaming call."""
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class LogContext:
    """Provider, model and call id of the stream being logged.

    ``extra`` entries are flattened into the payload; ``None`` values are
    omitted everywhere.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    call_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_extra(self, **fields: Any) -> "LogContext":
        return replace(self, extra={**self.extra, **fields})

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"provider": self.provider, "model": self.model, "call_id": self.call_id}
        out.update(self.extra)
        return {k: v for k, v in out.items() if v is not None}


__all__ = ["LogContext", "new_call_id"]
