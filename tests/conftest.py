"""Pytest configuration and fixtures for Greppy Filters tests."""

import pytest

from greppy_filters.filtering.presets import PresetStore
from greppy_filters.filtering.state import FilterEngine
from greppy_filters.storage import MemoryStorage, SqliteStorage


@pytest.fixture
def sample_symbols():
    """Symbol records as the backend returns them, including synonym fields."""
    return [
        {
            "id": "sym-1",
            "name": "parseQuery",
            "kind": "function",
            "path": "src/trace/parser.go",
            "line": 12,
            "refs": 8,
            "callers": 3,
            "callees": 2,
            "dead": False,
            "in_cycle": False,
            "entry": False,
        },
        {
            "id": "sym-2",
            "name": "TraceRunner",
            "type": "struct",
            "file": "src/trace/sub/runner.go",
            "line": 40,
            "references": 0,
            "caller_count": 0,
            "callee_count": 4,
            "dead": False,
            "inCycle": True,
        },
        {
            "id": "sym-3",
            "name": "main",
            "kind": "function",
            "path": "cmd/main.go",
            "line": 1,
            "refs": 0,
            "callers": 0,
            "callees": 6,
            "dead": False,
            "is_entry": True,
        },
        {
            "id": "sym-4",
            "name": "oldHelper",
            "kind": "Function",
            "path": "src/util/helpers.go",
            "line": 88,
            "refs": 2,
            "callers": 0,
            "callees": 0,
            "dead": True,
            "in_cycle": False,
        },
        {
            "id": "sym-5",
            "name": "Config",
            "kind": "class",
            "path": "src/config.py",
            "line": 5,
            "refs": 25,
            "callers": 10,
            "callees": 1,
            "dead": False,
            "in_cycle": True,
            "entry": True,
        },
    ]


@pytest.fixture
def memory_storage():
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def sqlite_storage(tmp_path):
    """SQLite storage in a temporary directory."""
    return SqliteStorage(tmp_path / "state.db")


@pytest.fixture
def engine(memory_storage):
    """Filter engine persisting to in-memory storage."""
    return FilterEngine(storage=memory_storage)


@pytest.fixture
def preset_store(memory_storage):
    """Preset store over in-memory storage."""
    return PresetStore(memory_storage)


class FailingStorage(MemoryStorage):
    """Storage whose every operation fails."""

    def get_item(self, key):
        from greppy_filters.exceptions import StorageError

        raise StorageError("disk unavailable")

    def set_item(self, key, value):
        from greppy_filters.exceptions import StorageError

        raise StorageError("disk unavailable")


@pytest.fixture
def failing_storage():
    """Storage that raises StorageError on every read and write."""
    return FailingStorage()
