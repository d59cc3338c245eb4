"""
Breakpoint resolution for responsive style blocks.

A breakpoint key inside ``"@media"`` is resolved in three tiers:

1. A named bucket from the breakpoint table (``mobile``, ``tablet``, ...)
2. A literal condition already wrapped in parentheses, used unchanged
3. Anything else is a raw width threshold: ``(min-width: {name})``
"""

from __future__ import annotations

import re
from collections.abc import Mapping

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "mobile": "(max-width: 640px)",
    "tablet": "(min-width: 641px) and (max-width: 1024px)",
    "desktop": "(min-width: 1025px) and (max-width: 1440px)",
    "wide": "(min-width: 1441px)",
    "print": "print",
}

_LENGTH_RE = re.compile(r"^-?(\d+\.?\d*|\.\d+)([a-zA-Z]+|%)?$")


def build_breakpoint_table(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default table with *overrides* added on top."""
    table = dict(DEFAULT_BREAKPOINTS)
    if overrides:
        table.update(overrides)
    return table


def is_literal_condition(name: str) -> bool:
    """Check whether *name* is a parenthesised media condition."""
    return name.startswith("(") and name.endswith(")")


def looks_like_length(name: str) -> bool:
    """Check whether *name* reads as a CSS length such as ``800px`` or ``48rem``."""
    return bool(_LENGTH_RE.match(name.strip()))


def is_known_breakpoint(name: str, breakpoints: Mapping[str, str] | None = None) -> bool:
    """
    Check whether *name* resolves without guessing.

    Named buckets, literal conditions and length thresholds are known; any
    other name still resolves but most likely hides a typo.
    """
    table = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints
    return name in table or is_literal_condition(name) or looks_like_length(name)


def resolve_breakpoint(name: str, breakpoints: Mapping[str, str] | None = None) -> str:
    """
    Resolve a breakpoint name to a media condition.

    Args:
        name: Named bucket, literal ``(...)`` condition, or width value
        breakpoints: Breakpoint table (defaults to DEFAULT_BREAKPOINTS)

    Returns:
        Media condition text for ``@media {condition} { ... }``
    """
    table = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints
    if name in table:
        return table[name]
    if is_literal_condition(name):
        return name
    return f"(min-width: {name})"
