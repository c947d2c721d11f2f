"""Greppy Filters - search and filter engine for the Greppy dashboard."""

__version__ = "1.0.0"

from .filtering import (
    FilterSpec,
    FilterEngine,
    GlobMatcher,
    Preset,
    PresetStore,
    parse_query,
    to_query_string,
    matches,
    filter_records,
)

__all__ = [
    "FilterSpec",
    "FilterEngine",
    "GlobMatcher",
    "Preset",
    "PresetStore",
    "parse_query",
    "to_query_string",
    "matches",
    "filter_records",
]
