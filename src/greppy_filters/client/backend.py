"""HTTP client for the Greppy backend.

Supplies the symbol records the filter engine evaluates. Only the coarse
filters the backend understands (kind, state, search) are sent; the full
FilterSpec is applied locally with filter_records.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from greppy_filters.config import config
from greppy_filters.config.logging_config import get_logger
from greppy_filters.exceptions import BackendError
from greppy_filters.filtering.spec import FilterSpec

logger = get_logger("backend")


class BackendClient:
    """Client for the Greppy backend REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_attempts: Optional[int] = None,
        retry_backoff: float = 1.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend root URL. Defaults to config setting.
            timeout: Request timeout in seconds.
            retry_attempts: Attempts per request on connection errors.
            retry_backoff: Exponential backoff multiplier in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = (base_url or config.backend.base_url).rstrip("/")
        self.retry_attempts = retry_attempts or config.backend.retry_attempts
        self.retry_backoff = retry_backoff
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout or config.backend.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BackendClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        GET with retries on transport failures.

        Raises:
            BackendError: If the backend is unreachable after all attempts.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_backoff, max=30),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        logger.debug(f"GET {path} params={params}")
        try:
            for attempt in retrying:
                with attempt:
                    return self._client.get(path, params=params)
        except httpx.TransportError as e:
            raise BackendError(f"Backend unreachable at {self.base_url}: {e}") from e

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self._get(path, params)
        if response.status_code >= 400:
            raise BackendError(
                f"GET {path} failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return self._decode(path, response)

    @staticmethod
    def _decode(path: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"GET {path} returned invalid JSON: {e}") from e

    def fetch_stats(self) -> Dict[str, Any]:
        """Fetch codebase statistics."""
        return self._get_json("/api/stats")

    def fetch_list(self, spec: Optional[FilterSpec] = None, limit: Optional[int] = None) -> Dict[str, Any]:
        """
        Fetch the symbol list.

        Args:
            spec: Filters to forward (kind, state and search only).
            limit: Maximum symbols. Defaults to config setting.

        Returns:
            List response with an 'items' array.
        """
        params: Dict[str, Any] = {}
        if spec is not None:
            if spec.kind != "all":
                params["type"] = spec.kind
            if spec.state != "all":
                params["state"] = spec.state
            if spec.search:
                params["search"] = spec.search
        params["limit"] = str(limit or config.backend.list_limit)
        return self._get_json("/api/list", params)

    def fetch_symbols(self, spec: Optional[FilterSpec] = None) -> List[Dict[str, Any]]:
        """Symbol records from fetch_list."""
        return self.fetch_list(spec).get("items") or []

    def fetch_file_symbols(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Fetch symbols for one file.

        Returns:
            File symbols, or None if the backend does not know the file.
        """
        response = self._get(f"/api/file/{quote(path, safe='')}")
        if not response.is_success:
            logger.debug(f"No symbols for {path} (status {response.status_code})")
            return None
        return self._decode(path, response)
