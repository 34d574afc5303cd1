"""Timeout configuration for the HTTP transport.

The streaming core enforces no deadline of its own: a call waits for the
response headers and then for each chunk as long as the transport allows.
This module only decides what the transport allows, i.e. the ``httpx``
timeouts of the pooled clients.

Environment overrides (seconds, positive floats; invalid values ignored):
    XAI_TIMEOUT_CONNECT_SECONDS   establishing the TCP/TLS connection
    XAI_TIMEOUT_READ_SECONDS      waiting for headers or the next chunk
    XAI_TIMEOUT_WRITE_SECONDS     sending the request body

Values are parsed on first use and cached until the environment changes.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized transport timeouts (seconds)."""

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: float = 300.0
    write_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.connect_timeout_seconds,
        )


_ENV_NAMES = (
    "XAI_TIMEOUT_CONNECT_SECONDS",
    "XAI_TIMEOUT_READ_SECONDS",
    "XAI_TIMEOUT_WRITE_SECONDS",
)

_CACHED: Optional[TimeoutConfig] = None
_CACHE_KEY: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the cached :class:`TimeoutConfig`, re-reading env on change."""
    global _CACHED, _CACHE_KEY  # noqa: PLW0603 - documented module cache
    key = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and key == _CACHE_KEY:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.read_timeout_seconds),
        write_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.write_timeout_seconds),
    )
    _CACHE_KEY = key
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
