"""Tests for tasks_tui/store_provider.py - key-value stores and the task gateway."""

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from tasks_tui.providers import StorageError
from tasks_tui.store_provider import (
    TASKS_KEY,
    FileKeyValueStore,
    KeyValueTaskGateway,
    MemoryKeyValueStore,
    parse_task_list,
)

from .fakes import FailingStore


class TestFileKeyValueStore:
    """Tests for the JSON file backed store."""

    def test_missing_file_reads_as_absent(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "store.json")

        assert store.get("tasks") is None

    def test_set_then_get(self, tmp_path: Path) -> None:
        store = FileKeyValueStore(tmp_path / "store.json")

        store.set("tasks", '["a"]')

        assert store.get("tasks") == '["a"]'
        assert json.loads((tmp_path / "store.json").read_text()) == {"tasks": '["a"]'}

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "deep" / "er" / "store.json"

        FileKeyValueStore(path).set("k", "v")

        assert path.exists()

    def test_keeps_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"theme": "dark"}))
        store = FileKeyValueStore(path)

        store.set("tasks", "[]")

        assert store.get("theme") == "dark"
        assert store.get("tasks") == "[]"

    def test_leaves_no_temp_file(self, tmp_path: Path) -> None:
        FileKeyValueStore(tmp_path / "store.json").set("k", "v")

        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_corrupt_file_raises_on_get(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{not json")

        with pytest.raises(StorageError):
            FileKeyValueStore(path).get("tasks")

    def test_non_object_file_raises_on_get(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]")

        with pytest.raises(StorageError):
            FileKeyValueStore(path).get("tasks")

    def test_non_string_value_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"tasks": ["a"]}))

        with pytest.raises(StorageError):
            FileKeyValueStore(path).get("tasks")

    def test_set_overwrites_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("garbage")
        store = FileKeyValueStore(path)

        store.set("tasks", "[]")

        assert store.get("tasks") == "[]"

    def test_undecodable_file_raises_on_get(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_bytes(b'{"tasks": "[\\"\xff\xfe\\"]"}')

        with pytest.raises(StorageError):
            FileKeyValueStore(path).get("tasks")

    def test_set_overwrites_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe garbage")
        store = FileKeyValueStore(path)

        store.set("tasks", '["a"]')

        assert store.get("tasks") == '["a"]'

    def test_failed_replace_removes_temp_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.mkdir()
        (path / "keep").write_text("x")

        with pytest.raises(StorageError):
            FileKeyValueStore(path).set("k", "v")

        assert not (tmp_path / "store.json.tmp").exists()

    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        with pytest.raises(StorageError):
            FileKeyValueStore(blocker / "store.json").set("k", "v")


class TestParseTaskList:
    """Tests for decoding the stored array."""

    def test_valid_array(self) -> None:
        assert parse_task_list('["a", "b"]') == ["a", "b"]

    @pytest.mark.parametrize("raw", ['{"a": 1}', '["a", 2]', '"a"', "null", "[[]]"])
    def test_wrong_shape_raises(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_task_list(raw)

    def test_bad_json_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_task_list("[unterminated")


class TestKeyValueTaskGateway:
    """Tests for load/save over a KeyValueStore."""

    @pytest.mark.parametrize(
        "tasks",
        [[], ["Buy milk"], ["a", "a", "b"], ["ünïcödé ✓", 'quote " inside', ""]],
    )
    def test_round_trip_in_fresh_gateway(self, tasks: list[str]) -> None:
        store = MemoryKeyValueStore()

        ok, _ = KeyValueTaskGateway(store).save(tasks)

        assert ok
        assert KeyValueTaskGateway(store).load() == tasks

    def test_round_trip_through_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"

        KeyValueTaskGateway(FileKeyValueStore(path)).save(("x", "y"))

        assert KeyValueTaskGateway(FileKeyValueStore(path)).load() == ["x", "y"]

    def test_writes_json_array_under_tasks_key(self) -> None:
        store = MemoryKeyValueStore()

        KeyValueTaskGateway(store).save(["a", "b"])

        assert json.loads(store.get(TASKS_KEY)) == ["a", "b"]

    def test_custom_key(self) -> None:
        store = MemoryKeyValueStore()

        KeyValueTaskGateway(store, key="work").save(["a"])

        assert store.get(TASKS_KEY) is None
        assert store.get("work") == '["a"]'

    def test_absent_key_loads_empty(self) -> None:
        assert KeyValueTaskGateway(MemoryKeyValueStore()).load() == []

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', '[1, 2]'])
    def test_unparseable_value_loads_empty(
        self, raw: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = MemoryKeyValueStore({TASKS_KEY: raw})

        with caplog.at_level(logging.ERROR):
            assert KeyValueTaskGateway(store).load() == []

        assert "Failed to load the tasks" in caplog.text

    def test_read_failure_loads_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR):
            assert KeyValueTaskGateway(FailingStore(fail_get=True)).load() == []

        assert "disk unavailable" in caplog.text

    def test_undecodable_file_loads_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe garbage")

        assert KeyValueTaskGateway(FileKeyValueStore(path)).load() == []

    def test_save_over_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe garbage")

        ok, _ = KeyValueTaskGateway(FileKeyValueStore(path)).save(["a"])

        assert ok is True
        assert KeyValueTaskGateway(FileKeyValueStore(path)).load() == ["a"]

    def test_write_failure_is_returned_not_raised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = FailingStore()

        with caplog.at_level(logging.ERROR):
            ok, message = KeyValueTaskGateway(store).save(["a"])

        assert ok is False
        assert message == "disk full"
        assert store.set_calls == 1
        assert "Failed to save the tasks" in caplog.text

    def test_successful_save_message(self) -> None:
        ok, message = KeyValueTaskGateway(MemoryKeyValueStore()).save(["a", "b"])

        assert ok is True
        assert message == "Saved 2 task(s)"
