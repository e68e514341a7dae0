"""
Concrete key-value stores and the task persistence gateway.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from jsonschema import ValidationError, validate

from tasks_tui.providers import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"

TASK_LIST_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": {"type": "string"},
}


class FileKeyValueStore:
    """KeyValueStore backed by a JSON object file of string keys to string values."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Corrupt store file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self._path} is not a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Value under {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError:
            logger.warning("Overwriting unreadable store file %s", self._path)
            data = {}
        data[key] = value

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self._path}: {e}") from e


class MemoryKeyValueStore:
    """KeyValueStore kept in process memory; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


def parse_task_list(raw: str) -> list[str]:
    """Decode the stored JSON array of strings. Raises ValueError if invalid."""
    data = json.loads(raw)
    try:
        validate(instance=data, schema=TASK_LIST_SCHEMA)
    except ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        raise ValueError(f"Validation error at '{path}': {e.message}") from e
    return list(data)


class KeyValueTaskGateway:
    """TaskGateway that mirrors the task list into one key of a KeyValueStore."""

    def __init__(self, store: KeyValueStore, key: str = TASKS_KEY):
        self._store = store
        self._key = key

    def load(self) -> list[str]:
        """Load the saved task list; read failures fall back to an empty list."""
        try:
            raw = self._store.get(self._key)
        except StorageError as e:
            logger.error("Failed to load the tasks: %s", e)
            return []

        if raw is None:
            logger.info("No saved tasks under %r, starting with empty list", self._key)
            return []

        try:
            tasks = parse_task_list(raw)
        except ValueError as e:
            logger.error("Failed to load the tasks: %s", e)
            return []

        logger.info("Loaded %d task(s)", len(tasks))
        return tasks

    def save(self, tasks: list[str] | tuple[str, ...]) -> tuple[bool, str]:
        """Serialize and write the full task list. Failures are logged, not raised."""
        try:
            self._store.set(self._key, json.dumps(list(tasks)))
        except StorageError as e:
            logger.error("Failed to save the tasks: %s", e)
            return False, str(e)

        logger.debug("Saved %d task(s)", len(tasks))
        return True, f"Saved {len(tasks)} task(s)"
