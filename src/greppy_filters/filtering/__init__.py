"""Search and filter engine for symbol records."""

from .spec import FilterSpec, DURABLE_FIELDS
from .glob import GlobMatcher, compile_glob, path_matches_glob
from .parser import parse_query
from .serializer import to_query_string
from .predicate import matches, filter_records, sort_records
from .presets import Preset, PresetStore, default_presets
from .state import FilterEngine, ActiveFilter
from .debounce import SearchDebouncer
from .index import RecordIndex

__all__ = [
    "FilterSpec",
    "DURABLE_FIELDS",
    "GlobMatcher",
    "compile_glob",
    "path_matches_glob",
    "parse_query",
    "to_query_string",
    "matches",
    "filter_records",
    "sort_records",
    "Preset",
    "PresetStore",
    "default_presets",
    "FilterEngine",
    "ActiveFilter",
    "SearchDebouncer",
    "RecordIndex",
]
