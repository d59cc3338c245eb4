"""
Dangling token detection.

``Theme.token()`` happily builds references to tokens that were never
declared; the browser then silently falls back to the inherited or initial
value. This optional pass cross-checks compiled CSS against a theme.
"""

from __future__ import annotations

import re

from styleforge.core.ir import CompileResult, StyleWarning, WarningCode

from .theme import Theme

_VAR_REFERENCE_RE = re.compile(r"var\(\s*(--[A-Za-z0-9_-]+)")
_LOCAL_DECLARATION_RE = re.compile(r"(?:^|[\s{;])(--[A-Za-z0-9_-]+)\s*:")


def find_token_references(text: str) -> list[str]:
    """Custom property names referenced through ``var()``, first occurrence order."""
    return list(dict.fromkeys(_VAR_REFERENCE_RE.findall(text)))


def find_local_declarations(text: str) -> set[str]:
    """Custom properties declared inside the CSS text itself."""
    return set(_LOCAL_DECLARATION_RE.findall(text))


def lint_token_references(source: str | CompileResult, theme: Theme) -> list[StyleWarning]:
    """
    Report ``var()`` references that neither the theme nor the CSS declares.

    Args:
        source: Compiled CSS text or a CompileResult
        theme: Theme whose declarations count as known

    Returns:
        One ``dangling-token`` warning per unknown variable
    """
    text = source.css if isinstance(source, CompileResult) else source
    known = theme.declared_variables | find_local_declarations(text)
    return [
        StyleWarning(
            code=WarningCode.DANGLING_TOKEN,
            message=f"var({name}) is not declared by the theme",
            key=name,
        )
        for name in find_token_references(text)
        if name not in known
    ]
