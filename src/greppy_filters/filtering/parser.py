"""Search query parsing.

Supported syntax:
    trace              - name or path contains "trace"
    kind:function      - only functions
    state:dead         - only dead symbols (also used, cycle, entry)
    file:src/trace/*   - path glob
    refs:>10           - at least 10 references
    refs:<5            - at most 5 references
    refs:3             - exactly 3 references
    callers:0          - no callers
    callees:>5         - has callees
    entry:true         - only entry points
    has:callers        - at least one caller
    has:callees        - at least one callee

Prefixes are case-insensitive. Tokens with a recognized prefix but an invalid
value are dropped; they never leak into the free-text search.
"""

import re
from typing import List, Optional

from greppy_filters.config import KIND_VALUES, STATE_VALUES
from greppy_filters.filtering.spec import FilterSpec

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: str) -> Optional[int]:
    """Read the leading integer of value ("10abc" -> 10), or None."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _parse_refs(value: str, spec: FilterSpec) -> None:
    if value.startswith(">"):
        num = parse_int(value[1:])
        if num is not None:
            spec.min_refs = num
    elif value.startswith("<"):
        num = parse_int(value[1:])
        if num is not None:
            spec.max_refs = num
    else:
        num = parse_int(value)
        if num is not None:
            spec.min_refs = num
            spec.max_refs = num


def _parse_presence(value: str) -> Optional[bool]:
    """callers:/callees: value -> False (none), True (some) or None (ignored)."""
    if value == "0":
        return False
    if value.startswith(">"):
        return True
    num = parse_int(value)
    if num == 0:
        return False
    if num is not None and num > 0:
        return True
    return None


def _apply_token(token: str, spec: FilterSpec) -> bool:
    """
    Apply a prefixed token to spec.

    Returns:
        True if the token carried a recognized prefix (whether or not its value
        was accepted), False if it is free text.
    """
    lower = token.lower()

    if lower.startswith("kind:"):
        value = token[5:]
        if value in KIND_VALUES:
            spec.kind = value
        return True

    if lower.startswith("state:"):
        value = token[6:]
        if value in STATE_VALUES:
            spec.state = value
        return True

    if lower.startswith("file:"):
        spec.file = token[5:]
        return True

    if lower.startswith("refs:"):
        _parse_refs(token[5:], spec)
        return True

    if lower.startswith("callers:"):
        presence = _parse_presence(token[8:])
        if presence is not None:
            spec.has_callers = presence
        return True

    if lower.startswith("callees:"):
        presence = _parse_presence(token[8:])
        if presence is not None:
            spec.has_callees = presence
        return True

    if lower.startswith("entry:"):
        spec.entry = token[6:].lower() == "true"
        return True

    if lower.startswith("has:"):
        value = token[4:].lower()
        if value == "callers":
            spec.has_callers = True
        elif value == "callees":
            spec.has_callees = True
        return True

    return False


def parse_query(query) -> FilterSpec:
    """
    Parse a search query into a FilterSpec.

    Later tokens overwrite earlier ones for the same field. Never raises.

    Args:
        query: Raw query string. Anything that is not a string yields the
            default spec.

    Returns:
        Parsed FilterSpec.
    """
    spec = FilterSpec()
    if not query or not isinstance(query, str):
        return spec

    text_parts: List[str] = []
    for token in query.split():
        if not _apply_token(token, spec):
            text_parts.append(token)

    spec.search = " ".join(text_parts)
    return spec
