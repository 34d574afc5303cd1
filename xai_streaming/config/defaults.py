"""xai_streaming.config.defaults
==============================

Small, stable default values used across the package. Environment variables
or a config file may override them (see ``xai_streaming.config``); this module
only holds constants and imports nothing from the rest of the package.
"""

from __future__ import annotations

# ---- xAI (Grok) ----
XAI_PROVIDER_NAME = "xai"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1"
# Model used when configuration names none, or names one outside the catalog.
XAI_DEFAULT_MODEL = "grok-beta"
XAI_CHAT_COMPLETIONS_PATH = "/chat/completions"

# ---- Retry (consumed by build_retry_config) ----
RETRY_DEFAULT_MAX_ATTEMPTS = 3
RETRY_DEFAULT_BASE_DELAY = 1.0
RETRY_DEFAULT_MAX_DELAY = 10.0

# ---- Config file ----
CONFIG_FILE_ENV = "XAI_STREAMING_CONFIG_FILE"


__all__ = [
    "XAI_PROVIDER_NAME",
    "XAI_DEFAULT_BASE_URL",
    "XAI_DEFAULT_MODEL",
    "XAI_CHAT_COMPLETIONS_PATH",
    "RETRY_DEFAULT_MAX_ATTEMPTS",
    "RETRY_DEFAULT_BASE_DELAY",
    "RETRY_DEFAULT_MAX_DELAY",
    "CONFIG_FILE_ENV",
]
