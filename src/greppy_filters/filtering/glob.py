"""Glob-style path matching for the file: filter.

Patterns are anchored at the start of the path only, so a plain directory
prefix such as "src/trace" matches everything below it. A pattern ending in a
"/*" is the exception: "src/trace/*" matches files directly inside
src/trace but not in its subdirectories, while "src/**" matches both.
Other trailing stars stay open, so "*" and "src/tr*" match nested paths.

    *   any run of characters except "/"
    **  any run of characters including "/"
    ?   exactly one character
"""

import re
from functools import lru_cache

_DOUBLESTAR = "\x00DOUBLESTAR\x00"

# Regex metacharacters other than * and ?
_SPECIAL_CHARS = re.compile(r"[.+^${}()|\[\]\\]")


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern:
    """
    Compile a glob pattern into a case-insensitive, start-anchored regex.

    Args:
        pattern: Glob pattern.

    Returns:
        Compiled regular expression; use with ``match`` (no end anchor).
    """
    expr = _SPECIAL_CHARS.sub(lambda m: "\\" + m.group(0), pattern)
    expr = expr.replace("**", _DOUBLESTAR)
    expr = expr.replace("*", "[^/]*")
    expr = expr.replace(_DOUBLESTAR, ".*")
    expr = expr.replace("?", ".")
    # A trailing "/*" covers one directory level and nothing below it
    if pattern.endswith("/*"):
        expr += "$"
    return re.compile(expr, re.IGNORECASE)


class GlobMatcher:
    """Tests record paths against file: glob patterns."""

    @staticmethod
    def test(path: str, pattern: str) -> bool:
        """Return True if path begins with a match for pattern."""
        return compile_glob(pattern).match(path or "") is not None


def path_matches_glob(path: str, pattern: str) -> bool:
    """Functional alias for GlobMatcher.test."""
    return GlobMatcher.test(path, pattern)
