"""
Storage providers for the TUI.

Protocols define the interface; implementations can be swapped
for testing or alternative storage backends.
"""

from typing import Protocol


class StorageError(Exception):
    """A key-value store could not be read or written."""


class KeyValueStore(Protocol):
    """Protocol for the persistent key-value slot the task list lives in."""

    def get(self, key: str) -> str | None:
        """Return the value stored under `key`, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`. Raises StorageError on failure."""
        ...


class TaskGateway(Protocol):
    """Protocol for loading and saving the whole task list."""

    def load(self) -> list[str]:
        """Load the saved task list; empty when nothing usable is stored."""
        ...

    def save(self, tasks: list[str] | tuple[str, ...]) -> tuple[bool, str]:
        """Write the full task list. Returns (success, message); never raises."""
        ...
