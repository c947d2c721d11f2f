"""Convert a FilterSpec back into canonical query syntax."""

from typing import List

from greppy_filters.filtering.spec import FilterSpec


def _refs_tokens(spec: FilterSpec) -> List[str]:
    if spec.min_refs is not None and spec.min_refs == spec.max_refs:
        return [f"refs:{spec.min_refs}"]
    tokens = []
    if spec.min_refs is not None:
        tokens.append(f"refs:>{spec.min_refs}")
    if spec.max_refs is not None:
        tokens.append(f"refs:<{spec.max_refs}")
    return tokens


def _presence_token(name: str, value) -> List[str]:
    if value is True:
        return [f"has:{name}"]
    if value is False:
        return [f"{name}:0"]
    return []


def to_query_string(spec: FilterSpec) -> str:
    """
    Serialize spec as a query string.

    Tokens are emitted in a fixed order (search, kind, state, file, refs,
    callers, callees, entry) regardless of how the query was typed. Parsing
    the result yields the same effective constraints.

    Args:
        spec: Filter spec to serialize.

    Returns:
        Query string; empty when no filter is active.
    """
    parts: List[str] = []

    if spec.search:
        parts.append(spec.search)
    if spec.kind != "all":
        parts.append(f"kind:{spec.kind}")
    if spec.state != "all":
        parts.append(f"state:{spec.state}")
    if spec.file:
        parts.append(f"file:{spec.file}")
    parts.extend(_refs_tokens(spec))
    parts.extend(_presence_token("callers", spec.has_callers))
    parts.extend(_presence_token("callees", spec.has_callees))
    if spec.entry is True:
        parts.append("entry:true")

    return " ".join(parts)
