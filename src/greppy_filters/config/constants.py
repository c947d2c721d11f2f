"""Constants for the Greppy search and filter engine.

IMPORTANT: All filter defaults are "no constraint" sentinels ("all", "" or None).
An untouched filter shows every symbol.
"""

from typing import Dict, List, Tuple

# =============================================================================
# Vocabularies
# =============================================================================

# (value, label) pairs as shown in the kind dropdown
KIND_OPTIONS: List[Tuple[str, str]] = [
    ("all", "all kinds"),
    ("function", "functions"),
    ("method", "methods"),
    ("class", "classes"),
    ("struct", "structs"),
    ("enum", "enums"),
    ("interface", "interfaces"),
    ("type", "types"),
    ("variable", "variables"),
]

STATE_OPTIONS: List[Tuple[str, str]] = [
    ("all", "all states"),
    ("used", "used"),
    ("dead", "dead"),
    ("cycle", "in cycle"),
    ("entry", "entry points"),
]

KIND_VALUES = frozenset(value for value, _ in KIND_OPTIONS)
STATE_VALUES = frozenset(value for value, _ in STATE_OPTIONS if value != "all")

# Refs dropdown buckets: value -> (min_refs, max_refs, label)
REFS_OPTIONS: Dict[str, Tuple] = {
    "all": (None, None, "all refs"),
    "0": (0, 0, "0 refs"),
    "1-5": (1, 5, "1-5 refs"),
    "6-20": (6, 20, "6-20 refs"),
    "20+": (20, None, "20+ refs"),
}

# =============================================================================
# Quick filters
# =============================================================================

# Each quick filter is a label plus the FilterSpec fields it sets when active
QUICK_FILTERS: List[Dict] = [
    {"label": "functions", "filter": {"kind": "function"}},
    {"label": "structs", "filter": {"kind": "struct"}},
    {"label": "dead", "filter": {"state": "dead"}},
    {"label": "cycles", "filter": {"state": "cycle"}},
    {"label": "entry points", "filter": {"entry": True}},
    {"label": "no callers", "filter": {"has_callers": False}},
]

# =============================================================================
# Presets
# =============================================================================

DEFAULT_PRESETS: List[Dict[str, str]] = [
    {"id": "dead-functions", "name": "Dead Functions", "query": "kind:function state:dead"},
    {"id": "cycle-symbols", "name": "Cycle Symbols", "query": "state:cycle"},
    {"id": "entry-points", "name": "Entry Points", "query": "entry:true"},
    {"id": "no-callers", "name": "No Callers", "query": "callers:0"},
]

DEFAULT_PRESET_IDS = frozenset(p["id"] for p in DEFAULT_PRESETS)

# =============================================================================
# Storage keys
# =============================================================================

STATE_STORAGE_KEY = "greppy-state"
PRESETS_STORAGE_KEY = "greppy-filter-presets"
STATE_VERSION = 1

# =============================================================================
# Export
# =============================================================================

SYMBOL_CSV_COLUMNS = ["name", "kind", "file", "line", "refs", "dead", "in_cycle"]
