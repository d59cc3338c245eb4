"""
Value formatting for CSS declarations.

Converts property names to hyphen case and property values to CSS text.
Nothing here raises: unknown property names are hyphenated literally and
unexpected values are rendered with ``str()``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

DEFAULT_UNIT = "px"

# Properties whose numeric values are dimensionless
UNITLESS_PROPERTIES = frozenset(
    {
        "opacity",
        "flex-grow",
        "flex-shrink",
        "font-weight",
        "line-height",
        "order",
        "z-index",
        "animation-iteration-count",
    }
)

CUSTOM_PROPERTY_PREFIX = "--"

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def to_selector_case(property_name: str) -> str:
    """
    Convert a camelCase or snake_case identifier to hyphen case.

    Custom properties (``--brand-color``) are returned verbatim. The ``ms``
    vendor prefix is re-prefixed so ``msTransform`` becomes
    ``-ms-transform``.

    Examples:
        >>> to_selector_case("backgroundColor")
        'background-color'
        >>> to_selector_case("msFlexAlign")
        '-ms-flex-align'
    """
    if property_name.startswith(CUSTOM_PROPERTY_PREFIX):
        return property_name

    hyphenated = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", property_name).replace("_", "-")
    if hyphenated.startswith("ms-"):
        hyphenated = f"-{hyphenated}"
    return hyphenated.lower()


def format_number(value: int | float) -> str:
    """
    Render a number the way a browser prints it.

    Integral floats drop the fraction (``1.0`` -> ``"1"``). Exponent form
    is used below ``1e-6`` and from ``1e21`` up (``"1e-7"``, ``"1e+21"``),
    and non-finite floats print as ``Infinity``, ``-Infinity`` and ``NaN``.
    """
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    point = exponent + count

    if count <= point <= 21:
        text = digits + "0" * (point - count)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = f"0.{'0' * -point}{digits}"
    else:
        power = point - 1
        mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text


def format_scalar(value: Any) -> str:
    """Render a value without any unit handling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)


def is_unitless(property_name: str) -> bool:
    """Check whether numeric values of *property_name* stay bare."""
    return to_selector_case(property_name) in UNITLESS_PROPERTIES


def format_value(property_name: str, value: Any, *, unit: str = DEFAULT_UNIT) -> str:
    """
    Format a declaration value as CSS text.

    Args:
        property_name: Property name in any supported case
        value: Raw value; numbers get *unit* unless the property is unit-less
        unit: Length unit for bare numbers

    Returns:
        CSS value text
    """
    if isinstance(value, int | float) and not isinstance(value, bool):
        if is_unitless(property_name):
            return format_number(value)
        return f"{format_number(value)}{unit}"
    return format_scalar(value)


def format_declaration(property_name: str, value: Any, *, unit: str = DEFAULT_UNIT) -> str:
    """Format a full ``property: value;`` declaration."""
    return f"{to_selector_case(property_name)}: {format_value(property_name, value, unit=unit)};"
