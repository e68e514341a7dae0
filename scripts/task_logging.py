"""Logging setup for the Daily Task Manager.

The TUI owns the terminal while it runs, so diagnostics (notably failed
saves and unreadable stores) go to a log file. Non-interactive runs
(--once, --json) can also log warnings to stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "daily-tasks.log"


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records on the console; third-party ones only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(("tasks_tui", "task_", "daily_tasks")):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path,
    file_level: int = logging.INFO,
    console: bool = False,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Configure the root logger:
    - File handler under `log_dir`, always installed
    - stderr handler, only when `console` is set (never while the TUI runs)

    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(file_level, console_level) if console else file_level)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleNoiseFilter())
        root.addHandler(ch)

    logging.captureWarnings(True)
    return log_file
