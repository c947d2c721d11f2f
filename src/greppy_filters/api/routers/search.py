"""Search API router.

Parses filter queries and evaluates them against posted symbol records, so
non-browser consumers get exactly the dashboard's filter semantics.
"""

from fastapi import APIRouter, HTTPException

from greppy_filters.api.config import get_settings
from greppy_filters.api.schemas import (
    FilterRequest,
    FilterResponse,
    ParseRequest,
    ParseResponse,
)
from greppy_filters.config import KIND_OPTIONS, QUICK_FILTERS, REFS_OPTIONS, STATE_OPTIONS
from greppy_filters.filtering.parser import parse_query
from greppy_filters.filtering.predicate import filter_records, sort_records
from greppy_filters.filtering.spec import FilterSpec
from greppy_filters.filtering.state import FilterEngine

router = APIRouter()


@router.get("/options")
async def get_options():
    """Dropdown vocabularies and quick filters."""
    return {
        "kinds": [{"value": v, "label": label} for v, label in KIND_OPTIONS],
        "states": [{"value": v, "label": label} for v, label in STATE_OPTIONS],
        "refs": [{"value": v, "label": opt[2]} for v, opt in REFS_OPTIONS.items()],
        "quickFilters": [qf["label"] for qf in QUICK_FILTERS],
    }


@router.post("/parse", response_model=ParseResponse)
async def parse(request: ParseRequest):
    """Parse a query into its filter spec, canonical query and active chips."""
    engine = FilterEngine()
    engine.apply_query(request.query)
    return {
        "filters": engine.spec.to_dict(),
        "query": engine.to_query_string(),
        "hasActiveFilters": engine.has_active_filters(),
        "activeFilters": [
            {"key": f.key, "value": f.value, "label": f.label}
            for f in engine.get_active_filters_list()
        ],
    }


@router.post("/filter", response_model=FilterResponse)
async def filter_symbols(request: FilterRequest):
    """Filter posted records by an explicit spec or a query."""
    settings = get_settings()
    if len(request.records) > settings.max_filter_records:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_filter_records} records per request",
        )

    if request.filters is not None:
        spec = FilterSpec.from_dict(request.filters.model_dump())
    else:
        spec = parse_query(request.query or "")

    items = filter_records(request.records, spec)
    if request.sort:
        items = sort_records(items, request.sort, request.direction)

    return {
        "total": len(request.records),
        "matched": len(items),
        "filters": spec.to_dict(),
        "items": items,
    }
