"""
styleforge - structured styles to CSS for server-rendered components.

Compiles mappings of logical style names to style descriptions into
generated class names plus CSS text, and theme token tables into CSS
custom properties.
"""

from __future__ import annotations

from ._version import get_version
from .core.config import NamingStrategy, StyleforgeConfig, load_config
from .core.errors import ConfigError, StyleforgeError, StyleSourceError
from .core.ir import CompileResult, StyleWarning, WarningCode
from .styles import (
    ClassNameRegistry,
    StyleCompiler,
    class_name_for,
    compile_block,
    compile_styles,
    compose_styles,
    css,
    format_value,
    resolve_breakpoint,
    responsive,
    should_inject_style,
    style_context,
    to_selector_case,
)
from .themes import Theme, create_theme, lint_token_references

__version__ = get_version()

__all__ = [
    "__version__",
    # Compilation
    "css",
    "compile_styles",
    "compile_block",
    "StyleCompiler",
    "CompileResult",
    "StyleWarning",
    "WarningCode",
    "ClassNameRegistry",
    "NamingStrategy",
    # Leaf operations
    "format_value",
    "to_selector_case",
    "class_name_for",
    "resolve_breakpoint",
    # Helpers
    "compose_styles",
    "responsive",
    "style_context",
    "should_inject_style",
    # Themes
    "Theme",
    "create_theme",
    "lint_token_references",
    # Configuration and errors
    "StyleforgeConfig",
    "load_config",
    "StyleforgeError",
    "ConfigError",
    "StyleSourceError",
]
