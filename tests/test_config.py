"""Settings tests — env-driven defaults and log format normalization."""

from session_titles.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.cors_origins == ["http://localhost:5173"]


def test_unknown_log_format_falls_back_to_text(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "pretty")
    assert Settings(_env_file=None).log_format == "text"


def test_log_format_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", " JSON ")
    assert Settings(_env_file=None).log_format == "json"
