"""Shared FastAPI dependencies."""

from functools import lru_cache
from typing import Iterator

from greppy_filters.api.config import get_settings
from greppy_filters.client.backend import BackendClient
from greppy_filters.filtering.presets import PresetStore
from greppy_filters.storage import KeyValueStorage, SqliteStorage


@lru_cache
def get_storage() -> KeyValueStorage:
    """Durable storage configured for the API process."""
    return SqliteStorage(get_settings().storage_path)


def get_preset_store() -> PresetStore:
    """Preset store backed by the API's storage."""
    return PresetStore(get_storage())


def get_backend_client() -> Iterator[BackendClient]:
    """Backend client scoped to one request."""
    client = BackendClient()
    try:
        yield client
    finally:
        client.close()
