"""
Theme token generation.

Turns a nested token table into CSS custom properties and ``var()``
references::

    theme = create_theme({"color": {"brand": "#123456"}, "space": {1: "0.25rem"}})
    theme.vars()                  # ':root { --color-brand: #123456; --space-1: 0.25rem; }'
    theme.token("color", "brand") # 'var(--color-brand)'

Variants (dark mode and friends) override tokens under a
``[data-theme="name"]`` selector and are emitted after the root rule.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from styleforge.styles.formatter import format_scalar

logger = logging.getLogger(__name__)

TokenTable = Mapping[str, Mapping[Any, Any]]


def variable_name(category: str, key: str | int) -> str:
    """Custom property name for a token: ``--{category}-{key}``."""
    return f"--{category}-{format_scalar(key)}"


def variant_selector(variant_name: str) -> str:
    """CSS selector scoping a theme variant."""
    return f'[data-theme="{variant_name}"]'


def _normalise_table(tokens: Mapping[Any, Any]) -> dict[str, dict[str, str]]:
    """Copy a token table with string keys and formatted values."""
    table: dict[str, dict[str, str]] = {}
    for category, values in tokens.items():
        if not isinstance(values, Mapping):
            logger.debug("Skipping token category %r: not a mapping", category)
            continue
        table[str(category)] = {
            format_scalar(key): format_scalar(value)
            for key, value in values.items()
            if value is not None
        }
    return table


def _declarations(table: Mapping[str, Mapping[str, str]]) -> str:
    return " ".join(
        f"{variable_name(category, key)}: {value};"
        for category, values in table.items()
        for key, value in values.items()
    )


class Theme:
    """
    A compiled token table.

    ``token()`` never checks its arguments against the table; use
    ``declared_paths`` or ``styleforge.themes.lint`` to find dangling
    references.
    """

    def __init__(
        self,
        tokens: TokenTable,
        *,
        selector: str = ":root",
        variants: Mapping[str, TokenTable] | None = None,
    ):
        self.selector = selector
        self._tokens = _normalise_table(tokens)
        self._variants = {
            str(name): _normalise_table(table) for name, table in (variants or {}).items()
        }

    def __repr__(self) -> str:
        return (
            f"Theme(categories={list(self._tokens)!r}, variants={list(self._variants)!r}, "
            f"selector={self.selector!r})"
        )

    @property
    def tokens(self) -> dict[str, dict[str, str]]:
        """Copy of the base token table with formatted values."""
        return {category: dict(values) for category, values in self._tokens.items()}

    @property
    def variant_names(self) -> list[str]:
        return list(self._variants)

    @property
    def declared_paths(self) -> frozenset[tuple[str, str]]:
        """Every ``(category, key)`` pair declared by the base table or a variant."""
        paths = {
            (category, key)
            for table in (self._tokens, *self._variants.values())
            for category, values in table.items()
            for key in values
        }
        return frozenset(paths)

    @property
    def declared_variables(self) -> frozenset[str]:
        """Every custom property name this theme declares."""
        return frozenset(variable_name(category, key) for category, key in self.declared_paths)

    def vars(self) -> str:
        """
        Custom property declarations for the whole theme.

        Returns:
            ``{selector} { --category-key: value; ... }`` followed by one
            ``[data-theme="name"] { ... }`` rule per variant, newline separated
        """
        rules = [f"{self.selector} {{ {_declarations(self._tokens)} }}"]
        for name, table in self._variants.items():
            rules.append(f"{variant_selector(name)} {{ {_declarations(table)} }}")
        return "\n".join(rules)

    def token(self, category: str, key: str | int) -> str:
        """Reference a token: ``var(--{category}-{key})``."""
        return f"var({variable_name(category, key)})"


def create_theme(
    tokens: TokenTable,
    *,
    selector: str = ":root",
    variants: Mapping[str, TokenTable] | None = None,
) -> Theme:
    """
    Create a theme from a token table.

    Args:
        tokens: Category -> key -> value. Non-mapping categories and
            ``None`` values are skipped.
        selector: Selector scoping the base declarations
        variants: Variant name -> partial token table

    Returns:
        Theme exposing ``vars()`` and ``token(category, key)``
    """
    theme = Theme(tokens, selector=selector, variants=variants)
    logger.debug("Created theme with %d tokens", len(theme.declared_paths))
    return theme
