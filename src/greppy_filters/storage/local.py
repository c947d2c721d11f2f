"""Durable local key-value storage.

Values are stored as JSON text under string keys. The SQLite backend keeps
the dashboard state and filter presets across sessions; the in-memory backend
is used for tests and throwaway sessions.
"""

import copy
import json
import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from greppy_filters.config import config, STATE_STORAGE_KEY, STATE_VERSION
from greppy_filters.config.logging_config import get_logger
from greppy_filters.exceptions import StorageError

logger = get_logger("storage")


class KeyValueStorage(ABC):
    """Minimal string key/value store."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the raw value stored under key, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key if present."""

    def get_json(self, key: str) -> Any:
        """
        Read and decode a JSON value.

        Returns:
            Decoded value, or None if the key is absent.

        Raises:
            StorageError: If the backend fails or the value is not valid JSON.
        """
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Corrupt value under '{key}': {e}") from e

    def set_json(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it."""
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for '{key}' is not JSON serializable: {e}") from e
        self.set_item(key, raw)


class MemoryStorage(KeyValueStorage):
    """Dictionary-backed storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class SqliteStorage(KeyValueStorage):
    """SQLite-backed storage, one row per key."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize storage.

        Args:
            db_path: Path to the SQLite file. Defaults to config setting.
        """
        self.db_path = Path(db_path) if db_path else config.storage.path
        self._initialized = False

    def _connect(self) -> sqlite3.Connection:
        """Open a connection, creating the table if needed."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            if not self._initialized:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                """)
                conn.commit()
                self._initialized = True
            return conn
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open storage at {self.db_path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", [key]
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e
        finally:
            conn.close()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        now = datetime.utcnow().isoformat() + "Z"
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                               updated_at = excluded.updated_at
                """,
                [key, value, now],
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM kv_store WHERE key = ?", [key])
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete '{key}': {e}") from e
        finally:
            conn.close()


# =============================================================================
# Dashboard state document
# =============================================================================

DEFAULT_STATE: Dict[str, Any] = {
    "version": STATE_VERSION,
    "filters": {
        "search": "",
        "kind": "all",
        "state": "all",
        "file": "",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_state(storage: KeyValueStorage) -> Dict[str, Any]:
    """
    Load the persisted dashboard state, merged over defaults.

    Absent or unreadable state yields the defaults; failures are logged.

    Args:
        storage: Storage backend.

    Returns:
        State dictionary.
    """
    try:
        saved = storage.get_json(STATE_STORAGE_KEY)
    except StorageError as e:
        logger.warning(f"Failed to load state: {e}")
        return copy.deepcopy(DEFAULT_STATE)

    if not isinstance(saved, dict):
        return copy.deepcopy(DEFAULT_STATE)

    if saved.get("version") != STATE_VERSION:
        logger.info(f"Migrating state from version {saved.get('version')} to {STATE_VERSION}")

    state = _deep_merge(DEFAULT_STATE, saved)
    state["version"] = STATE_VERSION
    return state


def update_nested_state(storage: KeyValueStorage, path: str, value: Any) -> Dict[str, Any]:
    """
    Set a value at a dotted path (e.g. 'filters' or 'sortState.list') and save.

    Args:
        storage: Storage backend.
        path: Dot-separated key path.
        value: New value.

    Returns:
        The updated state dictionary.

    Raises:
        StorageError: If the state cannot be written.
    """
    state = load_state(storage)
    keys = path.split(".")
    current = state
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value

    storage.set_json(STATE_STORAGE_KEY, state)
    return state
