"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Any, Optional


class FilterSpecModel(BaseModel):
    """Filter spec in wire format."""
    search: str = ""
    kind: str = "all"
    state: str = "all"
    file: str = ""
    minRefs: Optional[int] = None
    maxRefs: Optional[int] = None
    hasCallers: Optional[bool] = None
    hasCallees: Optional[bool] = None
    entry: Optional[bool] = None


class ActiveFilterModel(BaseModel):
    """One active-filter chip."""
    key: str
    value: Any
    label: str


class ParseRequest(BaseModel):
    """Query to parse."""
    query: str = Field("", description="Search query in filter syntax")


class ParseResponse(BaseModel):
    """Parsed query with its canonical form and chips."""
    filters: FilterSpecModel
    query: str
    hasActiveFilters: bool
    activeFilters: list[ActiveFilterModel]


class FilterRequest(BaseModel):
    """Records to filter. `filters` takes precedence over `query` when given."""
    query: Optional[str] = Field(None, description="Search query in filter syntax")
    filters: Optional[FilterSpecModel] = Field(None, description="Explicit filter spec")
    records: list[dict[str, Any]] = Field(default_factory=list, description="Symbol records")
    sort: Optional[str] = Field(None, description="Column to sort by")
    direction: str = Field("asc", pattern="^(asc|desc)$", description="Sort direction")


class FilterResponse(BaseModel):
    """Matching records."""
    total: int
    matched: int
    filters: FilterSpecModel
    items: list[dict[str, Any]]


class CreatePresetRequest(BaseModel):
    """New preset from an explicit query or from a filter spec."""
    name: str = Field(..., min_length=1)
    query: Optional[str] = None
    filters: Optional[FilterSpecModel] = None


class PresetResponse(BaseModel):
    """Saved preset."""
    id: str
    name: str
    query: str
