"""Configuration merge: defaults, JSON file, environment, overrides."""
from __future__ import annotations

import json

import pytest

from xai_streaming.config import ConfigError, get_model, get_provider_config, load_config_file
from xai_streaming.config.env import is_placeholder, resolve_provider_key


def test_defaults_only():
    cfg = get_provider_config("xai")
    assert cfg["base_url"] == "https://api.x.ai/v1"  # nosec B101
    assert cfg["retry"] == {"max_attempts": 3, "base_delay": 1.0, "max_delay": 10.0}  # nosec B101
    assert "api_key" not in cfg and get_model() is None  # nosec B101


def test_env_key_and_alias(monkeypatch):
    monkeypatch.setenv("GROK_API_KEY", "grok-secret")
    assert resolve_provider_key("xai") == ("grok-secret", "GROK_API_KEY")  # nosec B101
    monkeypatch.setenv("XAI_API_KEY", "xai-secret")
    assert get_provider_config("xai")["api_key"] == "xai-secret"  # nosec B101


def test_placeholder_keys_are_ignored(monkeypatch):
    monkeypatch.setenv("XAI_API_KEY", "changeme")
    assert is_placeholder("changeme")  # nosec B101
    assert "api_key" not in get_provider_config("xai")  # nosec B101


def test_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"xai": {"model": "grok-2-1212", "base_url": "https://file.local/v1", "retry": {"max_attempts": 5}}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("XAI_STREAMING_CONFIG_FILE", str(path))
    monkeypatch.setenv("XAI_BASE_URL", "https://env.local/v1")
    cfg = get_provider_config("xai", {"model": "grok-vision-beta", "api_key": None})
    assert cfg["model"] == "grok-vision-beta"  # nosec B101
    assert cfg["base_url"] == "https://env.local/v1"  # nosec B101
    assert cfg["retry"] == {"max_attempts": 5, "base_delay": 1.0, "max_delay": 10.0}  # nosec B101
    assert "api_key" not in cfg  # nosec B101


def test_missing_file_is_empty(tmp_path):
    assert load_config_file(str(tmp_path / "absent.json")) == {}  # nosec B101


def test_invalid_file_raises(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(str(bad))
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(str(bad))
