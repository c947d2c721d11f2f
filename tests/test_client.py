"""Tests for the Greppy backend client."""

import httpx
import pytest

from greppy_filters.client import BackendClient
from greppy_filters.exceptions import BackendError
from greppy_filters.filtering.parser import parse_query


def make_client(handler, retry_attempts=3):
    return BackendClient(
        base_url="http://greppy.test",
        retry_attempts=retry_attempts,
        retry_backoff=0,
        transport=httpx.MockTransport(handler),
    )


class TestBackendClient:
    """Tests for BackendClient."""

    def test_fetch_list_forwards_coarse_filters(self):
        """Test that only kind, state and search are sent upstream."""
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"items": []})

        with make_client(handler) as client:
            client.fetch_list(parse_query("trace kind:function state:dead refs:>3"), limit=50)

        assert seen["path"] == "/api/list"
        assert seen["params"] == {
            "type": "function",
            "state": "dead",
            "search": "trace",
            "limit": "50",
        }

    def test_fetch_list_without_spec(self):
        """Test default parameters."""
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"items": []})

        with make_client(handler) as client:
            client.fetch_list()

        assert set(seen["params"]) == {"limit"}

    def test_fetch_symbols_returns_items(self, sample_symbols):
        """Test unwrapping the items array."""
        handler = lambda request: httpx.Response(200, json={"items": sample_symbols})

        with make_client(handler) as client:
            assert client.fetch_symbols() == sample_symbols

    def test_fetch_symbols_missing_items(self):
        """Test a list response without items."""
        handler = lambda request: httpx.Response(200, json={"total": 0})

        with make_client(handler) as client:
            assert client.fetch_symbols() == []

    def test_fetch_stats(self):
        """Test the stats endpoint."""
        handler = lambda request: httpx.Response(200, json={"symbols": 120, "dead": 7})

        with make_client(handler) as client:
            assert client.fetch_stats() == {"symbols": 120, "dead": 7}

    def test_error_status_raises(self):
        """Test that HTTP errors become BackendError with the status."""
        handler = lambda request: httpx.Response(500, text="boom")

        with make_client(handler) as client:
            with pytest.raises(BackendError) as exc_info:
                client.fetch_stats()

        assert exc_info.value.status_code == 500

    def test_invalid_json_raises(self):
        """Test a non-JSON body."""
        handler = lambda request: httpx.Response(200, text="<html>")

        with make_client(handler) as client:
            with pytest.raises(BackendError):
                client.fetch_stats()

    def test_retries_transport_errors(self):
        """Test that connection failures are retried."""
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) < 3:
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json={"ok": True})

        with make_client(handler, retry_attempts=3) as client:
            assert client.fetch_stats() == {"ok": True}

        assert len(calls) == 3

    def test_unreachable_after_retries(self):
        """Test that exhausted retries raise BackendError."""
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        with make_client(handler, retry_attempts=2) as client:
            with pytest.raises(BackendError, match="unreachable"):
                client.fetch_stats()

        assert len(calls) == 2

    def test_fetch_file_symbols_encodes_path(self):
        """Test the file endpoint with a path containing separators."""
        seen = {}

        def handler(request):
            seen["raw_path"] = request.url.raw_path
            return httpx.Response(200, json={"symbols": []})

        with make_client(handler) as client:
            assert client.fetch_file_symbols("src/trace/parser.go") == {"symbols": []}

        assert seen["raw_path"] == b"/api/file/src%2Ftrace%2Fparser.go"

    def test_fetch_file_symbols_not_found(self):
        """Test that unknown files give None."""
        handler = lambda request: httpx.Response(404)

        with make_client(handler) as client:
            assert client.fetch_file_symbols("missing.go") is None

    def test_fetch_file_symbols_invalid_json(self):
        """Test that a non-JSON file response raises BackendError."""
        handler = lambda request: httpx.Response(200, text="<html>")

        with make_client(handler) as client:
            with pytest.raises(BackendError, match="invalid JSON"):
                client.fetch_file_symbols("src/main.go")
