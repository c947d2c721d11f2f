"""Pytest fixtures for API tests."""

import httpx
import pytest
from fastapi.testclient import TestClient

from greppy_filters.api.dependencies import (
    get_backend_client,
    get_preset_store,
    get_storage,
)
from greppy_filters.api.main import app
from greppy_filters.client.backend import BackendClient
from greppy_filters.filtering.presets import PresetStore
from greppy_filters.storage import SqliteStorage


@pytest.fixture
def api_storage(tmp_path):
    """Fresh SQLite storage for one test."""
    return SqliteStorage(tmp_path / "api_state.db")


@pytest.fixture
def backend_symbols(sample_symbols):
    """Records served by the mocked backend; tests may replace the list contents."""
    return list(sample_symbols)


@pytest.fixture
def backend_requests():
    """Requests received by the mocked backend."""
    return []


@pytest.fixture
def backend_status():
    """Status code returned by the mocked backend list endpoint."""
    return {"code": 200}


@pytest.fixture
def client(api_storage, backend_symbols, backend_requests, backend_status):
    """Create a TestClient with storage and backend overridden."""

    def handler(request):
        backend_requests.append(request)
        if backend_status["code"] != 200:
            return httpx.Response(backend_status["code"], text="backend error")
        return httpx.Response(200, json={"items": backend_symbols, "total": len(backend_symbols)})

    def backend_override():
        backend = BackendClient(
            base_url="http://greppy.test",
            retry_attempts=1,
            retry_backoff=0,
            transport=httpx.MockTransport(handler),
        )
        try:
            yield backend
        finally:
            backend.close()

    app.dependency_overrides[get_storage] = lambda: api_storage
    app.dependency_overrides[get_preset_store] = lambda: PresetStore(api_storage)
    app.dependency_overrides[get_backend_client] = backend_override

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
