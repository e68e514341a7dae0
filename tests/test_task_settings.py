"""Tests for task_settings.py - environment driven settings."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from task_settings import (
    DEFAULT_NOTIFY_TIMEOUT,
    DEFAULT_STORE_FILE,
    DEFAULT_STORE_KEY,
    load_settings,
    parse_log_level,
)

ENV_VARS = (
    "DAILY_TASKS_STORE_FILE",
    "DAILY_TASKS_STORE_KEY",
    "DAILY_TASKS_LOG_DIR",
    "DAILY_TASKS_LOG_LEVEL",
    "DAILY_TASKS_NOTIFY_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings.store_file == DEFAULT_STORE_FILE
        assert settings.store_key == DEFAULT_STORE_KEY == "tasks"
        assert settings.log_level == logging.INFO
        assert settings.notify_timeout == DEFAULT_NOTIFY_TIMEOUT

    def test_reads_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAILY_TASKS_STORE_FILE", str(tmp_path / "s.json"))
        monkeypatch.setenv("DAILY_TASKS_STORE_KEY", "work")
        monkeypatch.setenv("DAILY_TASKS_LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("DAILY_TASKS_LOG_LEVEL", "debug")
        monkeypatch.setenv("DAILY_TASKS_NOTIFY_TIMEOUT", "5")

        settings = load_settings()

        assert settings.store_file == tmp_path / "s.json"
        assert settings.store_key == "work"
        assert settings.log_dir == tmp_path / "logs"
        assert settings.log_level == logging.DEBUG
        assert settings.notify_timeout == 5.0

    def test_blank_and_invalid_values_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAILY_TASKS_STORE_KEY", "  ")
        monkeypatch.setenv("DAILY_TASKS_NOTIFY_TIMEOUT", "soon")

        settings = load_settings()

        assert settings.store_key == DEFAULT_STORE_KEY
        assert settings.notify_timeout == DEFAULT_NOTIFY_TIMEOUT


class TestParseLogLevel:
    """Tests for parse_log_level."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("30", 30),
            (None, logging.INFO),
            ("", logging.INFO),
            ("chatty", logging.INFO),
        ],
    )
    def test_levels(self, raw: str | None, expected: int) -> None:
        assert parse_log_level(raw) == expected
