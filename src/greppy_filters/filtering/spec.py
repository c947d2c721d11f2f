"""Canonical filter model shared by the parser, engine and predicate."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

# attribute name -> wire name used by the dashboard and stored presets
WIRE_NAMES: Dict[str, str] = {
    "search": "search",
    "kind": "kind",
    "state": "state",
    "file": "file",
    "min_refs": "minRefs",
    "max_refs": "maxRefs",
    "has_callers": "hasCallers",
    "has_callees": "hasCallees",
    "entry": "entry",
}

ATTRIBUTE_NAMES: Dict[str, str] = {wire: attr for attr, wire in WIRE_NAMES.items()}

# Subset mirrored to durable storage; the rest is session-only
DURABLE_FIELDS = ("search", "kind", "state", "file")


@dataclass
class FilterSpec:
    """Current filter configuration. Every field defaults to "no constraint"."""

    search: str = ""
    kind: str = "all"
    state: str = "all"
    file: str = ""
    min_refs: Optional[int] = None
    max_refs: Optional[int] = None
    has_callers: Optional[bool] = None
    has_callees: Optional[bool] = None
    entry: Optional[bool] = None

    @property
    def is_empty(self) -> bool:
        """Check if all filters are at their defaults (showing all data)."""
        return self == FilterSpec()

    @property
    def active_filter_count(self) -> int:
        """Count of fields that differ from their default."""
        default = FilterSpec()
        return sum(
            1 for f in fields(self) if getattr(self, f.name) != getattr(default, f.name)
        )

    def copy(self) -> "FilterSpec":
        """Create a copy of this filter spec."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary keyed by wire names."""
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}

    def durable_dict(self) -> Dict[str, Any]:
        """The subset of fields persisted across sessions."""
        return {name: getattr(self, name) for name in DURABLE_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterSpec":
        """
        Create from a dictionary.

        Accepts both wire names (minRefs) and attribute names (min_refs);
        unknown keys are ignored.
        """
        spec = cls()
        spec.merge(data)
        return spec

    def merge(self, updates: Dict[str, Any]) -> None:
        """Apply known fields from updates in place; unknown keys are ignored."""
        for key, value in updates.items():
            attr = ATTRIBUTE_NAMES.get(key, key)
            if attr in WIRE_NAMES:
                setattr(self, attr, value)
