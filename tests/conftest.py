# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from tasks_tui.store_provider import KeyValueTaskGateway  # noqa: E402

from .fakes import CountingStore  # noqa: E402


@pytest.fixture()
def memory_store() -> CountingStore:
    return CountingStore()


@pytest.fixture()
def gateway(memory_store: CountingStore) -> KeyValueTaskGateway:
    return KeyValueTaskGateway(memory_store)
