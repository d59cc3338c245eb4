"""
Rule compiler: one style description to CSS rule text.

Output for a block is, in order and joined by single spaces:

1. ``.{class} { base declarations }`` when there are base declarations
2. one ``{selector} { declarations }`` rule per pseudo block, in key order
3. one ``@media {condition} { ... }`` block per breakpoint, in key order,
   whose body is the whole algorithm applied again to the nested entries

Pseudo blocks are one level deep: variants nested inside them are dropped by
the parser. Responsive blocks recurse without limit.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from styleforge.core.ir import (
    Declaration,
    PseudoBlock,
    ResponsiveBlock,
    StyleEntry,
    StyleWarning,
    WarningCode,
)

from .breakpoints import DEFAULT_BREAKPOINTS, is_known_breakpoint, resolve_breakpoint
from .formatter import DEFAULT_UNIT, format_declaration
from .parser import PSEUDO_MARKER, RESPONSIVE_KEY, parse_description


def _render_declarations(declarations: Sequence[Declaration], unit: str) -> str:
    return " ".join(format_declaration(d.name, d.value, unit=unit) for d in declarations)


def pseudo_selector(selector: str, class_name: str) -> str:
    """Substitute the class selector for every ``&`` in *selector*."""
    return selector.replace(PSEUDO_MARKER, f".{class_name}")


def render_entries(
    entries: Sequence[StyleEntry],
    class_name: str,
    *,
    unit: str = DEFAULT_UNIT,
    breakpoints: Mapping[str, str] | None = None,
    block: str | None = None,
    warnings: list[StyleWarning] | None = None,
) -> str:
    """
    Render parsed entries for one class.

    Args:
        entries: Parsed style entries
        class_name: Generated class name, without the leading dot
        unit: Unit for bare numbers
        breakpoints: Breakpoint table (defaults to DEFAULT_BREAKPOINTS)
        block: Logical block name, used to label warnings
        warnings: List to append diagnostics to; ``None`` disables reporting

    Returns:
        Rule text, or ``""`` if the entries produce no CSS
    """
    table = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints

    base: list[Declaration] = []
    pseudos: list[PseudoBlock] = []
    responsive: list[ResponsiveBlock] = []
    for entry in entries:
        if isinstance(entry, Declaration):
            base.append(entry)
        elif isinstance(entry, PseudoBlock):
            pseudos.append(entry)
        else:
            responsive.append(entry)

    rules: list[str] = []

    if base:
        rules.append(f".{class_name} {{ {_render_declarations(base, unit)} }}")

    for pseudo in pseudos:
        declarations = _render_declarations(pseudo.declarations, unit)
        if declarations:
            rules.append(f"{pseudo_selector(pseudo.selector, class_name)} {{ {declarations} }}")

    for block_entry in responsive:
        for name, nested in block_entry.breakpoints.items():
            if warnings is not None and not is_known_breakpoint(name, table):
                warnings.append(
                    StyleWarning(
                        code=WarningCode.UNKNOWN_BREAKPOINT,
                        message=(
                            f"{name!r} is not a named breakpoint or a length; "
                            f"treated as (min-width: {name})"
                        ),
                        block=block,
                        key=f"{RESPONSIVE_KEY} {name}",
                    )
                )
            inner = render_entries(
                nested,
                class_name,
                unit=unit,
                breakpoints=table,
                block=block,
                warnings=warnings,
            )
            if inner:
                rules.append(f"@media {resolve_breakpoint(name, table)} {{ {inner} }}")

    return " ".join(rules)


def compile_block(
    description: Mapping[Any, Any],
    class_name: str,
    *,
    unit: str = DEFAULT_UNIT,
    breakpoints: Mapping[str, str] | None = None,
    block: str | None = None,
    warnings: list[StyleWarning] | None = None,
) -> str:
    """
    Compile one raw style description into CSS rule text.

    Example:
        >>> compile_block({"padding": 16, "&:hover": {"color": "blue"}}, "card-1tafk")
        '.card-1tafk { padding: 16px; } .card-1tafk:hover { color: blue; }'
    """
    entries = parse_description(description, block=block, warnings=warnings)
    return render_entries(
        entries,
        class_name,
        unit=unit,
        breakpoints=breakpoints,
        block=block,
        warnings=warnings,
    )
