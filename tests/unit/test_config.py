"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gh_activity.config import ActivitySettings


def test_settings_defaults() -> None:
    """Test default values when no environment variables are set."""
    settings = ActivitySettings()

    assert settings.github_base_url == "https://api.github.com"
    assert settings.request_timeout == 30.0
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_BASE_URL", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GH_ACTIVITY_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = ActivitySettings()

    assert settings.github_base_url == "https://ghe.example.com/api/v3"
    assert settings.request_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_settings_ignore_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")

    assert ActivitySettings().log_level == "WARNING"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("GH_ACTIVITY_TIMEOUT", "0"),
        ("GH_ACTIVITY_TIMEOUT", "soon"),
        ("GH_ACTIVITY_TIMEOUT", "inf"),
        ("GH_ACTIVITY_TIMEOUT", "nan"),
        ("LOG_LEVEL", "chatty"),
        ("GITHUB_BASE_URL", "   "),
    ],
)
def test_settings_reject_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        ActivitySettings()
