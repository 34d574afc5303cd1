"""Auxiliary logging helpers (formatter, context) used by base.logging."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import LogContext, new_call_id

__all__ = ["JsonFormatter", "ISO", "LogContext", "new_call_id"]
