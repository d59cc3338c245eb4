"""
Style-object compiler.

Usage:
    from styleforge.styles import compile_styles, StyleCompiler

    result = compile_styles({"card": {"padding": 16}})
    result.class_map["card"]   # "card-1tafk"
    result.css                 # ".card-1tafk { padding: 16px; }"
"""

from .breakpoints import DEFAULT_BREAKPOINTS, resolve_breakpoint
from .compiler import StyleCompiler, compile_styles, css
from .formatter import UNITLESS_PROPERTIES, format_value, to_selector_case
from .helpers import (
    center,
    compose_styles,
    container,
    cover,
    reset_button,
    responsive,
    truncate,
    visually_hidden,
)
from .naming import ClassNameRegistry, class_name_for
from .parser import parse_description
from .registry import pop_style_context, push_style_context, should_inject_style, style_context
from .rule_compiler import compile_block

__all__ = [
    # Compilation
    "StyleCompiler",
    "compile_styles",
    "css",
    "compile_block",
    "parse_description",
    # Leaf operations
    "format_value",
    "to_selector_case",
    "UNITLESS_PROPERTIES",
    "resolve_breakpoint",
    "DEFAULT_BREAKPOINTS",
    "class_name_for",
    "ClassNameRegistry",
    # Helpers
    "center",
    "cover",
    "truncate",
    "visually_hidden",
    "reset_button",
    "container",
    "compose_styles",
    "responsive",
    # Per-render injection tracking
    "style_context",
    "push_style_context",
    "pop_style_context",
    "should_inject_style",
]
