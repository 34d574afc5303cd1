"""Configuration layer for the streaming client.

Merge order (later wins):
    1. Built-in defaults (``defaults.py``)
    2. Optional JSON config file pointed to by ``XAI_STREAMING_CONFIG_FILE``
    3. Environment variables (``XAI_API_KEY``, ``XAI_MODEL``, ``XAI_BASE_URL``)
    4. In-code overrides passed to :func:`get_provider_config`

Config file example::

    {
      "xai": {
        "model": "grok-2-1212",
        "retry": {"max_attempts": 5, "base_delay": 0.5}
      }
    }

The streaming core itself reads none of this: it receives an API key and an
optional model id. ``XAIProvider.from_config`` is the bridge.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional
import os

from .defaults import (
    CONFIG_FILE_ENV,
    RETRY_DEFAULT_BASE_DELAY,
    RETRY_DEFAULT_MAX_ATTEMPTS,
    RETRY_DEFAULT_MAX_DELAY,
    XAI_DEFAULT_BASE_URL,
    XAI_PROVIDER_NAME,
)
from .env import env_overrides, resolve_provider_key


DEFAULTS: Dict[str, Dict[str, Any]] = {
    XAI_PROVIDER_NAME: {
        "base_url": XAI_DEFAULT_BASE_URL,
        "retry": {
            "max_attempts": RETRY_DEFAULT_MAX_ATTEMPTS,
            "base_delay": RETRY_DEFAULT_BASE_DELAY,
            "max_delay": RETRY_DEFAULT_MAX_DELAY,
        },
    },
}


class ConfigError(ValueError):
    """The config file exists but is not a JSON object."""


def load_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the JSON config file (``path`` or ``$XAI_STREAMING_CONFIG_FILE``).

    A missing variable or missing file yields ``{}``. Unparseable content
    raises :class:`ConfigError` naming the file.
    """
    path = path or os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{p}: invalid JSON ({e.msg} at line {e.lineno})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: top-level value must be an object")
    return data


def get_provider_config(provider: str = XAI_PROVIDER_NAME, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping for ``provider``.

    Keys: ``api_key`` (may be absent), ``model`` (may be absent),
    ``base_url`` and ``retry``. ``None`` values in ``overrides`` are ignored.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULTS.get(name, {}).items()}

    file_cfg = load_config_file().get(name)
    if isinstance(file_cfg, dict):
        for k, v in file_cfg.items():
            if k == "retry" and isinstance(v, dict):
                cfg.setdefault("retry", {}).update(v)
            else:
                cfg[k] = v

    cfg |= env_overrides(name)
    key, _ = resolve_provider_key(name)
    if key:
        cfg["api_key"] = key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str = XAI_PROVIDER_NAME) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "ConfigError",
    "DEFAULTS",
    "get_provider_config",
    "get_model",
    "load_config_file",
]
