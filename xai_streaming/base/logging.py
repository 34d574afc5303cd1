"""Base structured logging utilities.

All loggers handed out by :func:`get_logger` are children of one shared
``xai_streaming`` logger that owns a single stderr handler with the JSON
formatter. The level comes from ``XAI_STREAMING_LOG_LEVEL`` when set.

``normalized_log_event`` wraps ``log_event`` and guarantees the canonical keys
``phase``, ``attempt``, ``emitted`` and ``tokens`` (plus ``error_code`` when an
error is being reported) so stream logs can be aggregated uniformly.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "xai_streaming"
LOG_LEVEL_ENV = "XAI_STREAMING_LOG_LEVEL"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_CONSOLE_HANDLER_ATTR = "_xai_console_handler"
_FILE_HANDLER_ATTR = "_xai_file_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name (DEBUG, INFO, WARN/WARNING, ERROR, CRITICAL).

    Unknown or empty values fall back to ``default``.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared base logger.

    On repeat calls the console handler is re-pointed at the current
    ``sys.stderr`` so stream swaps (pytest capture, CLI redirection) are
    honored.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    console = next((h for h in logger.handlers if getattr(h, _CONSOLE_HANDLER_ATTR, False)), None)
    env_level = os.getenv(LOG_LEVEL_ENV)
    # A level set through configure_logger survives later get_logger calls.
    if console is None or env_level:
        logger.setLevel(_parse_level(env_level, default=level))
    desired_level = logger.level
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        setattr(console, _CONSOLE_HANDLER_ATTR, True)
        logger.addHandler(console)
    elif isinstance(console, logging.StreamHandler) and console.stream is not sys.stderr:
        with contextlib.suppress(ValueError):
            console.setStream(sys.stderr)
    console.setLevel(desired_level)
    console.setFormatter(_formatter(json_mode))
    logger.propagate = False
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger that emits through the shared base logger."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        When given, a rotating file handler (10MB x 5) writes to this path,
        replacing any previously managed file handler. When ``None`` managed
        file handlers are removed.
    json_mode:
        JSON formatter (default) or the plain text format.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    for h in managed:
        if file_path is not None and getattr(h, "baseFilename", None) == os.path.abspath(os.path.expanduser(file_path)):
            h.setFormatter(_formatter(json_mode))
            h.setLevel(logger.level)
            return logger
        logger.removeHandler(h)
        h.close()
    if file_path is None:
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured log event as a JSON payload.

    ``None``-valued fields are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "emitted", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | int | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a log event carrying the canonical stream keys.

    ``error_code`` is only included when not ``None``. Extra fields never
    overwrite the canonical ones.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
