"""Tests for logging settings."""

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from sdk_add.utils.settings import LoggingSettings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_PATH"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    """Settings default to INFO level JSON output on stderr."""
    settings = LoggingSettings(_env_file=None)  # type: ignore[call-arg]

    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.log_file_path is None


def test_values_are_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override defaults and are normalised."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "CONSOLE")
    monkeypatch.setenv("LOG_FILE_PATH", "/tmp/sdk_add.log")

    settings = LoggingSettings(_env_file=None)  # type: ignore[call-arg]

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "console"
    assert settings.log_file_path == "/tmp/sdk_add.log"


@pytest.mark.parametrize(
    ("key", "value"),
    [("LOG_LEVEL", "verbose"), ("LOG_FORMAT", "xml")],
)
def test_invalid_values_raise(
    monkeypatch: pytest.MonkeyPatch,
    key: str,
    value: str,
) -> None:
    """Unknown levels and formats are rejected."""
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        LoggingSettings(_env_file=None)  # type: ignore[call-arg]


def test_get_settings_is_cached_until_reset() -> None:
    """The global accessor returns one instance until reset."""
    first = get_settings()

    assert get_settings() is first

    reset_settings()

    assert get_settings() is not first
