"""Tests for environment configuration."""

from __future__ import annotations

import pytest
from fathom_mcp_server.config import AppConfig, load_config
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "FATHOM_API_KEY",
        "FATHOM_API_BASE",
        "FATHOM_TIMEZONE",
        "FATHOM_ENABLE_ELICITATION",
        "FATHOM_SUMMARY_TIMEOUT_SECONDS",
        "FATHOM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the test
    monkeypatch.chdir(tmp_path)


def test_defaults():
    cfg = load_config()
    assert cfg.api_key is None
    assert cfg.api_key_value is None
    assert cfg.api_base == "https://api.fathom.ai/external/v1"
    assert cfg.summary_timeout_seconds == 15
    assert cfg.enable_elicitation is True
    assert cfg.timezone == "UTC"
    assert cfg.log_level == "INFO"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FATHOM_API_KEY", "abc123")
    monkeypatch.setenv("FATHOM_ENABLE_ELICITATION", "false")
    monkeypatch.setenv("FATHOM_TIMEZONE", "Europe/London")
    monkeypatch.setenv("FATHOM_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.api_key_value == "abc123"
    assert cfg.enable_elicitation is False
    assert cfg.tzinfo.key == "Europe/London"
    assert cfg.log_level == "DEBUG"


def test_api_key_hidden_in_repr(monkeypatch):
    monkeypatch.setenv("FATHOM_API_KEY", "abc123")
    assert "abc123" not in repr(load_config())


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("FATHOM_API_KEY=from-file\n", encoding="utf-8")
    assert load_config().api_key_value == "from-file"


def test_trailing_slash_removed():
    cfg = AppConfig(api_base="https://example.test/v1/")
    assert cfg.api_base == "https://example.test/v1"


def test_unknown_timezone_rejected():
    with pytest.raises(ValidationError):
        AppConfig(timezone="Mars/Olympus")


def test_config_is_frozen():
    cfg = AppConfig()
    with pytest.raises(ValidationError):
        cfg.enable_elicitation = False
