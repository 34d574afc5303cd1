"""xai_streaming.config.env
=========================

Environment variable names for provider credentials and settings.

Helpers never raise on unknown providers or unset variables; callers decide
how to proceed (for the streaming client: ``MissingCredentialError`` at call
time).
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> API key env var
ENV_MAP: Dict[str, str] = {
    "xai": "XAI_API_KEY",
}

# Provider -> acceptable key env var names, canonical first
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "xai": ("XAI_API_KEY", "GROK_API_KEY"),
}

# Config field -> env var suffix; the prefix is the upper-cased provider name
ENV_FIELD_MAP: Dict[str, str] = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Case-insensitive: contains 'placeholder', 'changeme' or 'example', or
    starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical API key env var for ``provider`` (or None)."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key env var names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-placeholder key set.

    ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def env_overrides(provider: str) -> Dict[str, str]:
    """Collect ``<PROVIDER>_<FIELD>`` settings present in the environment."""
    prefix = (provider or "").upper()
    out: Dict[str, str] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "ENV_FIELD_MAP",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "env_overrides",
]
