#!/usr/bin/env python3
"""
Daily Task Manager

Single-screen to-do list for the terminal. Tasks are saved as a JSON array
of strings under one key of a small key-value file.

Usage:
    daily_tasks.py                 Launch interactive TUI
    daily_tasks.py --once          Print saved tasks once and exit (no TUI)
    daily_tasks.py --json          Print saved tasks as JSON and exit
    daily_tasks.py --ephemeral     Launch TUI without saving anything

Environment:
    DAILY_TASKS_STORE_FILE, DAILY_TASKS_STORE_KEY, DAILY_TASKS_LOG_DIR,
    DAILY_TASKS_LOG_LEVEL, DAILY_TASKS_NOTIFY_TIMEOUT
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from task_logging import setup_logging  # noqa: E402
from task_settings import Settings, load_settings, parse_log_level  # noqa: E402
from tasks_tui.store_provider import (  # noqa: E402
    FileKeyValueStore,
    KeyValueTaskGateway,
    MemoryKeyValueStore,
)

logger = logging.getLogger(__name__)


def build_gateway(settings: Settings, ephemeral: bool = False) -> KeyValueTaskGateway:
    """Wire the task gateway to the configured store."""
    if ephemeral:
        return KeyValueTaskGateway(MemoryKeyValueStore(), settings.store_key)
    return KeyValueTaskGateway(FileKeyValueStore(settings.store_file), settings.store_key)


def print_tasks_once(gateway: KeyValueTaskGateway) -> int:
    """Print saved tasks and exit."""
    tasks = gateway.load()

    if not tasks:
        print("No tasks saved.")
        print("Run 'daily-tasks' to add some.")
        return 1

    width = len(str(len(tasks)))
    for number, task in enumerate(tasks, start=1):
        print(f"{number:>{width}}. {task}")
    return 0


def print_tasks_json(gateway: KeyValueTaskGateway) -> int:
    """Print saved tasks as a JSON array and exit."""
    print(json.dumps(gateway.load(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Daily Task Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print saved tasks once and exit (no TUI)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print saved tasks as JSON and exit",
    )
    parser.add_argument(
        "--store-file",
        type=Path,
        help="Path to the key-value store file (default: ~/.local/share/daily-tasks/store.json)",
    )
    parser.add_argument(
        "--log-level",
        help="File log level, e.g. DEBUG or INFO",
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep tasks in memory only; nothing is saved",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    if args.store_file:
        settings = replace(settings, store_file=args.store_file.expanduser())
    if args.log_level:
        settings = replace(settings, log_level=parse_log_level(args.log_level, settings.log_level))

    interactive = not (args.json or args.once)
    log_file = setup_logging(
        log_dir=settings.log_dir,
        file_level=settings.log_level,
        console=not interactive,
    )
    logger.debug("Logging to %s, store %s", log_file, settings.store_file)

    gateway = build_gateway(settings, ephemeral=args.ephemeral)

    if args.json:
        return print_tasks_json(gateway)

    if args.once:
        return print_tasks_once(gateway)

    from tasks_tui.app import run

    run(gateway, notify_timeout=settings.notify_timeout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
