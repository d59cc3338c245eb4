"""
Style description parser.

Turns a raw style description mapping into tagged ``StyleEntry`` values:

- keys starting with ``&`` become ``PseudoBlock`` entries
- the reserved ``"@media"`` key becomes a ``ResponsiveBlock``
- every other key becomes a ``Declaration``

Parsing is permissive. ``None`` values are dropped silently; values of the
wrong shape are dropped and, when a warning list is supplied, reported.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from styleforge.core.ir import (
    Declaration,
    PseudoBlock,
    ResponsiveBlock,
    StyleEntry,
    StyleWarning,
    WarningCode,
)

PSEUDO_MARKER = "&"
RESPONSIVE_KEY = "@media"


def is_pseudo_key(key: str) -> bool:
    return key.startswith(PSEUDO_MARKER)


def is_responsive_key(key: str) -> bool:
    return key == RESPONSIVE_KEY


def _warn(
    warnings: list[StyleWarning] | None,
    code: WarningCode,
    message: str,
    block: str | None,
    key: str,
) -> None:
    if warnings is not None:
        warnings.append(StyleWarning(code=code, message=message, block=block, key=key))


def _parse_declaration(
    key: str,
    value: Any,
    block: str | None,
    warnings: list[StyleWarning] | None,
) -> Declaration | None:
    if value is None:
        return None
    if isinstance(value, Mapping | list | tuple | set):
        _warn(
            warnings,
            WarningCode.INVALID_VALUE,
            f"expected a string or number, got {type(value).__name__}; declaration dropped",
            block,
            key,
        )
        return None
    if not isinstance(value, bool | int | float | str):
        value = str(value)
    return Declaration(name=key, value=value)


def _parse_pseudo(
    selector: str,
    nested: Mapping[Any, Any],
    block: str | None,
    warnings: list[StyleWarning] | None,
) -> PseudoBlock:
    declarations: list[Declaration] = []
    for raw_key, value in nested.items():
        key = str(raw_key)
        if is_pseudo_key(key) or is_responsive_key(key):
            if value is not None:
                _warn(
                    warnings,
                    WarningCode.NESTED_VARIANT_IGNORED,
                    f"variants nested inside {selector!r} are not expanded",
                    block,
                    f"{selector} {key}",
                )
            continue
        declaration = _parse_declaration(key, value, block, warnings)
        if declaration is not None:
            declarations.append(declaration)
    return PseudoBlock(selector=selector, declarations=tuple(declarations))


def _parse_responsive(
    table: Mapping[Any, Any],
    block: str | None,
    warnings: list[StyleWarning] | None,
) -> ResponsiveBlock:
    breakpoints: dict[str, tuple[StyleEntry, ...]] = {}
    for raw_name, nested in table.items():
        name = str(raw_name)
        if nested is None:
            continue
        if not isinstance(nested, Mapping):
            _warn(
                warnings,
                WarningCode.INVALID_VARIANT,
                f"breakpoint {name!r} must map to a style description",
                block,
                f"{RESPONSIVE_KEY} {name}",
            )
            continue
        breakpoints[name] = tuple(parse_description(nested, block=block, warnings=warnings))
    return ResponsiveBlock(breakpoints=breakpoints)


def parse_description(
    description: Mapping[Any, Any],
    *,
    block: str | None = None,
    warnings: list[StyleWarning] | None = None,
) -> list[StyleEntry]:
    """
    Parse a style description into tagged entries in source order.

    Args:
        description: Raw mapping of declaration, pseudo and ``@media`` keys
        block: Logical block name, used to label warnings
        warnings: List to append diagnostics to; ``None`` disables reporting

    Returns:
        Declarations, pseudo blocks and at most one responsive block
    """
    entries: list[StyleEntry] = []
    for raw_key, value in description.items():
        key = str(raw_key)
        if is_pseudo_key(key):
            if isinstance(value, Mapping):
                entries.append(_parse_pseudo(key, value, block, warnings))
            elif value is not None:
                _warn(
                    warnings,
                    WarningCode.INVALID_VARIANT,
                    "selector variants must map to a style description",
                    block,
                    key,
                )
        elif is_responsive_key(key):
            if isinstance(value, Mapping):
                entries.append(_parse_responsive(value, block, warnings))
            elif value is not None:
                _warn(
                    warnings,
                    WarningCode.INVALID_VARIANT,
                    f"{RESPONSIVE_KEY} must map breakpoint names to style descriptions",
                    block,
                    key,
                )
        else:
            declaration = _parse_declaration(key, value, block, warnings)
            if declaration is not None:
                entries.append(declaration)
    return entries
