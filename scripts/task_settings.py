"""Settings for the Daily Task Manager, read from environment variables.

Every value has a default, so nothing needs to be set to run the app.
Command line flags in daily_tasks.py override what is read here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "DAILY_TASKS"

DEFAULT_STORE_FILE = Path("~/.local/share/daily-tasks/store.json").expanduser()
DEFAULT_LOG_DIR = Path("~/.local/state/daily-tasks").expanduser()
DEFAULT_STORE_KEY = "tasks"
DEFAULT_NOTIFY_TIMEOUT = 2.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_log_level(raw: str | None, default: int = logging.INFO) -> int:
    """Map 'debug'/'INFO'/'20' style strings to a logging level."""
    if not raw:
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    store_file: Path = DEFAULT_STORE_FILE
    store_key: str = DEFAULT_STORE_KEY
    log_dir: Path = DEFAULT_LOG_DIR
    log_level: int = logging.INFO
    notify_timeout: float = DEFAULT_NOTIFY_TIMEOUT


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        store_file=_env_path(_k("STORE_FILE"), DEFAULT_STORE_FILE),
        store_key=_env(_k("STORE_KEY"), DEFAULT_STORE_KEY),
        log_dir=_env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR),
        log_level=parse_log_level(os.getenv(_k("LOG_LEVEL"))),
        notify_timeout=_env_float(_k("NOTIFY_TIMEOUT"), DEFAULT_NOTIFY_TIMEOUT),
    )
