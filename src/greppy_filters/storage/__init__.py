"""Durable local storage for dashboard state and presets."""

from .local import (
    KeyValueStorage,
    MemoryStorage,
    SqliteStorage,
    DEFAULT_STATE,
    load_state,
    update_nested_state,
)

__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "SqliteStorage",
    "DEFAULT_STATE",
    "load_state",
    "update_nested_state",
]
