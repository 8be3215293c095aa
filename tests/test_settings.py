import logging
from datetime import timezone
from zoneinfo import ZoneInfo

from utils import settings


def test_default_timezone_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_TIMEZONE", " Europe/Paris ")
    assert settings.resolve_default_timezone() == ZoneInfo("Europe/Paris")


def test_default_timezone_falls_back_to_utc(monkeypatch, caplog):
    monkeypatch.delenv("DEFAULT_TIMEZONE", raising=False)
    assert settings.resolve_default_timezone() is timezone.utc

    monkeypatch.setenv("DEFAULT_TIMEZONE", "Nowhere/Atlantis")
    caplog.set_level(logging.WARNING)
    assert settings.resolve_default_timezone() is timezone.utc
    assert "DEFAULT_TIMEZONE" in caplog.text


def test_nudge_to_past_values(monkeypatch, caplog):
    monkeypatch.delenv("NUDGE_TO_PAST", raising=False)
    assert settings.resolve_nudge_to_past() is True
    monkeypatch.setenv("NUDGE_TO_PAST", "off")
    assert settings.resolve_nudge_to_past() is False
    monkeypatch.setenv("NUDGE_TO_PAST", "YES")
    assert settings.resolve_nudge_to_past(default=False) is True

    monkeypatch.setenv("NUDGE_TO_PAST", "peut-etre")
    caplog.set_level(logging.WARNING)
    assert settings.resolve_nudge_to_past(default=False) is False
    assert "NUDGE_TO_PAST" in caplog.text


def test_command_prefix(monkeypatch):
    monkeypatch.delenv("COMMAND_PREFIX", raising=False)
    assert settings.resolve_command_prefix() == "!"
    monkeypatch.setenv("COMMAND_PREFIX", "pk;")
    assert settings.resolve_command_prefix() == "pk;"


def test_log_level(monkeypatch, caplog):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert settings.resolve_log_level() == logging.DEBUG
    monkeypatch.setenv("LOG_LEVEL", "loud")
    caplog.set_level(logging.WARNING)
    assert settings.resolve_log_level() == logging.INFO
    assert "LOG_LEVEL" in caplog.text
