"""Shared HTTP client pool.

Purpose:
    Keep one reusable ``httpx.Client`` per (base_url, purpose) so repeated
    streaming calls share connection pools instead of paying a TLS handshake
    each time. Each call still owns its own response object, so calls can run
    in parallel threads without coordination.

Timeouts:
    Taken from :func:`get_timeout_config` when a client is first created.

Lifecycle:
    All clients are closed at interpreter exit; tests may call
    :func:`close_all_clients` directly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL set on the client so callers can use relative
            paths. ``None`` groups clients under a shared key.
        purpose: Short discriminator for separate pools (e.g. ``"xai.stream"``).
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().to_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and forget all pooled clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
