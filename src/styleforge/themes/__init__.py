"""
Theme tokens for styleforge.

Usage:
    from styleforge.themes import create_theme, lint_token_references

    theme = create_theme({"color": {"brand": "#123456"}})
    theme.vars()                      # ':root { --color-brand: #123456; }'
    theme.token("color", "brand")     # 'var(--color-brand)'

    lint_token_references(result, theme)   # dangling var() references
"""

from .lint import find_token_references, lint_token_references
from .theme import Theme, create_theme, variable_name, variant_selector

__all__ = [
    "Theme",
    "create_theme",
    "variable_name",
    "variant_selector",
    # Lint
    "find_token_references",
    "lint_token_references",
]
