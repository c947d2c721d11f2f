"""Live filter state with change notification.

A FilterEngine owns one FilterSpec and an ordered list of subscribers. Views
are handed the same engine instance, subscribe to it, and re-run the
predicate over their records whenever it changes.

The durable subset of the filters (search, kind, state, file) is mirrored to
storage on every change so the dashboard reopens with the same filters.
Numeric and boolean refinements are session-only.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Iterable, List, Optional

from greppy_filters.config import KIND_VALUES, REFS_OPTIONS, STATE_VALUES
from greppy_filters.config.logging_config import get_logger
from greppy_filters.exceptions import StorageError
from greppy_filters.filtering.parser import parse_query
from greppy_filters.filtering.predicate import filter_records
from greppy_filters.filtering.presets import Preset, PresetStore
from greppy_filters.filtering.serializer import to_query_string
from greppy_filters.filtering.spec import ATTRIBUTE_NAMES, DURABLE_FIELDS, WIRE_NAMES, FilterSpec
from greppy_filters.storage import KeyValueStorage, load_state, update_nested_state

logger = get_logger("filters")

Listener = Callable[[FilterSpec], Any]

# Chip keys in display order
ACTIVE_FILTER_ORDER = (
    "kind",
    "state",
    "file",
    "minRefs",
    "maxRefs",
    "hasCallers",
    "hasCallees",
    "entry",
)


@dataclass(frozen=True)
class ActiveFilter:
    """One active-filter chip."""

    key: str
    value: Any
    label: str


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _chip_label(key: str, value: Any) -> str:
    if key in ("hasCallers", "hasCallees"):
        name = "callers" if key == "hasCallers" else "callees"
        return f"has:{name}" if value else f"{name}:0"
    return f"{key}:{_format_value(value)}"


def _valid_persisted(name: str, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if name == "kind":
        return value in KIND_VALUES
    if name == "state":
        return value == "all" or value in STATE_VALUES
    return True


class FilterEngine:
    """Current filter state for one dashboard session."""

    def __init__(self, storage: Optional[KeyValueStorage] = None):
        """
        Initialize with default filters.

        Args:
            storage: Durable storage for the persisted subset. None keeps the
                state in memory only.
        """
        self.storage = storage
        self._spec = FilterSpec()
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """
        Register a callback for filter changes.

        Callbacks run in registration order and receive a private copy of the
        spec. Registering the same callback twice has no effect.

        Args:
            callback: Called with the new FilterSpec after every change.

        Returns:
            Function that unsubscribes the callback.
        """
        if callback not in self._listeners:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback(self._spec.copy())
            except Exception:
                logger.exception(f"Filter listener {callback!r} failed")

    def _persist(self) -> None:
        if self.storage is None:
            return
        try:
            update_nested_state(self.storage, "filters", self._spec.durable_dict())
        except StorageError as e:
            logger.warning(f"Failed to persist filters: {e}")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @property
    def spec(self) -> FilterSpec:
        """Snapshot of the current spec; mutating it does not affect the engine."""
        return self._spec.copy()

    def update(self, partial: Optional[Dict[str, Any]] = None, **changes: Any) -> FilterSpec:
        """
        Merge field updates into the live spec, persist and notify.

        Fields may be given by attribute name (min_refs) or wire name
        (minRefs); unknown names are ignored.

        Returns:
            Snapshot of the updated spec.
        """
        updates = dict(partial or {})
        updates.update(changes)

        unknown = [k for k in updates if ATTRIBUTE_NAMES.get(k, k) not in WIRE_NAMES]
        if unknown:
            logger.debug(f"Ignoring unknown filter fields: {unknown}")

        self._spec.merge(updates)
        self._persist()
        self._notify()
        return self.spec

    def reset(self) -> FilterSpec:
        """Restore every field to its default, persist and notify."""
        self._spec = FilterSpec()
        self._persist()
        self._notify()
        return self.spec

    def apply_query(self, query: str) -> FilterSpec:
        """Replace the whole spec with the parse of query."""
        parsed = parse_query(query)
        return self.update({f.name: getattr(parsed, f.name) for f in fields(parsed)})

    def apply_preset(self, preset: Preset) -> FilterSpec:
        """Apply a saved preset by re-parsing its query."""
        logger.debug(f"Applying preset {preset.id} ({preset.name!r})")
        return self.apply_query(preset.query)

    def remove_filter(self, key: str) -> FilterSpec:
        """
        Clear the field behind one active-filter chip.

        Args:
            key: Chip key (kind, state, file, minRefs, maxRefs, hasCallers,
                hasCallees, entry). Unknown keys leave the spec unchanged.
        """
        attr = ATTRIBUTE_NAMES.get(key)
        if attr is not None and attr != "search":
            setattr(self._spec, attr, getattr(FilterSpec(), attr))
        self._persist()
        self._notify()
        return self.spec

    def load_persisted(self) -> FilterSpec:
        """
        Merge persisted filters into the current spec.

        Called once at startup; does not notify. Missing or corrupt storage
        leaves the defaults in place.
        """
        if self.storage is None:
            return self.spec

        persisted = load_state(self.storage).get("filters")
        if not isinstance(persisted, dict):
            return self.spec

        for name in DURABLE_FIELDS:
            value = persisted.get(name)
            if value is None:
                continue
            if not _valid_persisted(name, value):
                logger.warning(f"Ignoring invalid persisted filter {name}={value!r}")
                continue
            setattr(self._spec, name, value)
        return self.spec

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_active_filters(self) -> bool:
        """True if any field differs from its default."""
        return not self._spec.is_empty

    def get_active_filters_list(self) -> List[ActiveFilter]:
        """
        Active filters as display chips, in a fixed order.

        The free-text search is shown in the input box and is not a chip.
        """
        current = self._spec.to_dict()
        default = FilterSpec().to_dict()

        active = []
        for key in ACTIVE_FILTER_ORDER:
            value = current[key]
            if value == default[key]:
                continue
            # entry:false imposes no constraint and has no chip
            if key == "entry" and value is not True:
                continue
            active.append(ActiveFilter(key=key, value=value, label=_chip_label(key, value)))
        return active

    def to_query_string(self) -> str:
        """Current spec in canonical query syntax."""
        return to_query_string(self._spec)

    def filter(self, records: Optional[Iterable]) -> List[Any]:
        """Records that match the current spec."""
        return filter_records(records, self._spec)

    def save_current_as_preset(self, name: str, store: PresetStore) -> Optional[Preset]:
        """
        Save the current filters as a named preset.

        Returns:
            The new preset, or None if the name is blank or no filter is active.
        """
        query = self.to_query_string()
        if not query:
            logger.info("No active filters to save")
            return None
        if not name or not name.strip():
            return None
        return store.add(name.strip(), query)

    # ------------------------------------------------------------------
    # Quick filters and refs buckets
    # ------------------------------------------------------------------

    def is_quick_filter_active(self, quick_filter: Dict[str, Any]) -> bool:
        """True if every field the quick filter sets currently has its value."""
        wanted = quick_filter["filter"]
        return all(getattr(self._spec, attr) == value for attr, value in wanted.items())

    def toggle_quick_filter(self, quick_filter: Dict[str, Any]) -> FilterSpec:
        """Switch a quick filter on, or back to defaults if it is already on."""
        wanted = quick_filter["filter"]
        if self.is_quick_filter_active(quick_filter):
            default = FilterSpec()
            return self.update({attr: getattr(default, attr) for attr in wanted})
        return self.update(dict(wanted))

    def select_refs_range(self, value: str) -> FilterSpec:
        """
        Apply a refs dropdown bucket ('all', '0', '1-5', '6-20', '20+').

        Unknown values are ignored.
        """
        if value not in REFS_OPTIONS:
            logger.debug(f"Unknown refs range {value!r}")
            return self.spec
        min_refs, max_refs, _ = REFS_OPTIONS[value]
        return self.update(min_refs=min_refs, max_refs=max_refs)

    def refs_range_label(self) -> str:
        """Dropdown label for the current refs bounds, 'custom' if none fit."""
        for min_refs, max_refs, label in REFS_OPTIONS.values():
            if self._spec.min_refs == min_refs and self._spec.max_refs == max_refs:
                return label
        return "custom"
