"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from cobsframe.config import Settings


def test_settings_defaults():
    """Settings should have sensible defaults."""
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.SERVICE_NAME == "cobsframe"
    assert s.STRICT_DECODE is False
    assert s.IO_FORMAT == "raw"


def test_settings_from_env(monkeypatch):
    """Fields are read from COBS_-prefixed environment variables."""
    monkeypatch.setenv("COBS_STRICT_DECODE", "true")
    monkeypatch.setenv("COBS_IO_FORMAT", "hex")
    monkeypatch.setenv("COBS_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.STRICT_DECODE is True
    assert s.IO_FORMAT == "hex"
    assert s.LOG_LEVEL == "DEBUG"


def test_unprefixed_env_ignored(monkeypatch):
    monkeypatch.setenv("IO_FORMAT", "hex")
    s = Settings(_env_file=None)
    assert s.IO_FORMAT == "raw"


def test_io_format_normalized():
    s = Settings(IO_FORMAT="HEX", _env_file=None)
    assert s.IO_FORMAT == "hex"


def test_io_format_invalid():
    """Invalid IO_FORMAT raises validation error."""
    with pytest.raises(ValidationError, match="IO_FORMAT"):
        Settings(IO_FORMAT="base64", _env_file=None)


def test_log_level_invalid():
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(LOG_LEVEL="LOUD", _env_file=None)
