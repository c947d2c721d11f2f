"""Evaluate symbol records against a FilterSpec.

Records come straight from the backend and are not normalized, so each
accessor accepts the synonymous field names the backend has used over time
(kind/type, refs/references, callers/caller_count, ...). Records may be
mappings or plain objects with matching attributes.
"""

from collections.abc import Iterable, Mapping
from typing import Any, List, Optional

from greppy_filters.filtering.glob import GlobMatcher
from greppy_filters.filtering.spec import FilterSpec


def record_field(record: Any, *names: str) -> Any:
    """First non-None value among names."""
    for name in names:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None:
            return value
    return None


def record_name(record: Any) -> str:
    return record_field(record, "name") or ""


def record_path(record: Any) -> str:
    return record_field(record, "path", "file") or ""


def record_kind(record: Any) -> str:
    return str(record_field(record, "kind", "type") or "")


def record_refs(record: Any) -> Optional[int]:
    """Reference count, or None when the record does not report one."""
    return record_field(record, "refs", "references")


def record_callers(record: Any) -> int:
    return record_field(record, "callers", "caller_count") or 0


def record_callees(record: Any) -> int:
    return record_field(record, "callees", "callee_count") or 0


def is_dead(record: Any) -> bool:
    return bool(record_field(record, "dead"))


def is_in_cycle(record: Any) -> bool:
    return bool(record_field(record, "in_cycle")) or bool(record_field(record, "inCycle"))


def is_entry(record: Any) -> bool:
    return bool(record_field(record, "entry")) or bool(record_field(record, "is_entry"))


def _matches_state(record: Any, state: str) -> bool:
    # dead and used are not complements: a record with refs == 0 that is not
    # flagged dead counts as dead, never as used.
    if state == "dead":
        return is_dead(record) or record_refs(record) == 0
    if state == "used":
        return not is_dead(record) and record_refs(record) != 0
    if state == "cycle":
        return is_in_cycle(record)
    if state == "entry":
        return is_entry(record)
    return True


def _matches_presence(count: int, wanted: Optional[bool]) -> bool:
    if wanted is True:
        return count > 0
    if wanted is False:
        return count == 0
    return True


def matches(record: Any, spec: FilterSpec) -> bool:
    """
    Check if a record satisfies every active constraint in spec.

    Args:
        record: Symbol record.
        spec: Filter spec.

    Returns:
        True if the record passes all filters.
    """
    if spec.search:
        needle = spec.search.lower()
        if needle not in record_name(record).lower() and needle not in record_path(record).lower():
            return False

    if spec.kind != "all" and record_kind(record).lower() != spec.kind.lower():
        return False

    if spec.state != "all" and not _matches_state(record, spec.state):
        return False

    if spec.file and not GlobMatcher.test(record_path(record), spec.file):
        return False

    refs = record_refs(record) or 0
    if spec.min_refs is not None and refs < spec.min_refs:
        return False
    if spec.max_refs is not None and refs > spec.max_refs:
        return False

    if not _matches_presence(record_callers(record), spec.has_callers):
        return False
    if not _matches_presence(record_callees(record), spec.has_callees):
        return False

    if spec.entry is True and not is_entry(record):
        return False

    return True


def filter_records(records: Optional[Iterable], spec: FilterSpec) -> List[Any]:
    """
    Filter records by spec, preserving order.

    Args:
        records: Symbol records. None yields an empty list.
        spec: Filter spec.

    Returns:
        Records satisfying spec.
    """
    if records is None or isinstance(records, (str, bytes, Mapping)):
        return []
    return [record for record in records if matches(record, spec)]


NUMERIC_SORT_COLUMNS = ("refs", "line")


def _sort_key(record: Any, column: str):
    value = record_field(record, column)
    if column in NUMERIC_SORT_COLUMNS:
        try:
            return float(value or 0)
        except (TypeError, ValueError):
            return 0.0
    return "" if value is None else str(value)


def sort_records(records: Iterable, column: str = "name", direction: str = "asc") -> List[Any]:
    """
    Sort records for the list view.

    refs and line sort numerically; every other column sorts as text with
    missing values treated as empty.

    Args:
        records: Records to sort.
        column: Field to sort by.
        direction: 'asc' or 'desc'.

    Returns:
        New sorted list.
    """
    ordered = sorted(records, key=lambda r: _sort_key(r, column))
    if direction == "desc":
        ordered.reverse()
    return ordered
