"""Symbols API router.

Fetches symbols from the Greppy backend and applies the full filter query
locally; the backend only understands kind, state and search.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from greppy_filters.api.dependencies import get_backend_client
from greppy_filters.client.backend import BackendClient
from greppy_filters.config.logging_config import get_logger
from greppy_filters.exceptions import BackendError
from greppy_filters.filtering.parser import parse_query
from greppy_filters.filtering.predicate import filter_records, sort_records

router = APIRouter()
logger = get_logger("api.symbols")


@router.get("")
def list_symbols(
    q: str = Query("", description="Search query in filter syntax"),
    sort: Optional[str] = Query(None, description="Column to sort by"),
    direction: str = Query("asc", pattern="^(asc|desc)$"),
    client: BackendClient = Depends(get_backend_client),
):
    """List backend symbols matching a filter query."""
    spec = parse_query(q)
    try:
        records = client.fetch_symbols(spec)
    except BackendError as e:
        logger.error(f"Symbol fetch failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    items = filter_records(records, spec)
    if sort:
        items = sort_records(items, sort, direction)

    return {"query": q, "total": len(records), "matched": len(items), "items": items}
