"""Debounced search input.

Each keystroke cancels the pending timer and starts a new one; the query is
only parsed and applied once the input has been quiet for the debounce
period. Runs on the asyncio event loop of the calling thread.
"""

import asyncio
from typing import Optional

from greppy_filters.config import config
from greppy_filters.config.logging_config import get_logger
from greppy_filters.filtering.state import FilterEngine

logger = get_logger("debounce")


class SearchDebouncer:
    """Delays FilterEngine.apply_query until typing pauses."""

    def __init__(self, engine: FilterEngine, delay: Optional[float] = None):
        """
        Initialize the debouncer.

        Args:
            engine: Engine receiving the query.
            delay: Quiet period in seconds. Defaults to config setting.
        """
        self.engine = engine
        self.delay = config.search.debounce_seconds if delay is None else delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending_query: Optional[str] = None

    @property
    def pending(self) -> bool:
        """True while a query is waiting for the quiet period to pass."""
        return self._handle is not None

    def input(self, query: str) -> None:
        """Record a keystroke; must be called from within a running event loop."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._pending_query = query
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop any pending query without applying it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_query = None

    def flush(self) -> None:
        """Apply the pending query immediately (e.g. on Enter)."""
        if self._handle is not None:
            self._fire()

    def _fire(self) -> None:
        query = self._pending_query or ""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_query = None
        logger.debug(f"Applying search query {query!r}")
        self.engine.apply_query(query)
