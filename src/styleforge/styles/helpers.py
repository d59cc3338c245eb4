"""
Reusable style description fragments.

Each helper returns a fresh dict so callers can extend it freely::

    styles = {
        "overlay": compose_styles(cover(), {"background": "rgba(0, 0, 0, 0.5)"}),
        "title": compose_styles(truncate(), responsive(base={"fontSize": 16}, mobile={"fontSize": 14})),
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .parser import RESPONSIVE_KEY


def center() -> dict[str, Any]:
    """Center content using flexbox."""
    return {"display": "flex", "justifyContent": "center", "alignItems": "center"}


def cover() -> dict[str, Any]:
    """Absolutely positioned box covering its parent."""
    return {"position": "absolute", "top": 0, "right": 0, "bottom": 0, "left": 0}


def truncate() -> dict[str, Any]:
    """Single line of text cut off with an ellipsis."""
    return {"overflow": "hidden", "textOverflow": "ellipsis", "whiteSpace": "nowrap"}


def visually_hidden() -> dict[str, Any]:
    """Hide an element visually but keep it available to screen readers."""
    return {
        "position": "absolute",
        "width": "1px",
        "height": "1px",
        "padding": 0,
        "margin": "-1px",
        "overflow": "hidden",
        "clip": "rect(0, 0, 0, 0)",
        "whiteSpace": "nowrap",
        "border": 0,
    }


def reset_button() -> dict[str, Any]:
    """Strip native button styling."""
    return {
        "background": "none",
        "border": "none",
        "padding": 0,
        "margin": 0,
        "font": "inherit",
        "color": "inherit",
        "cursor": "pointer",
    }


def container(max_width: str = "1200px") -> dict[str, Any]:
    """Centered container with horizontal padding."""
    return {
        "width": "100%",
        "maxWidth": max_width,
        "marginLeft": "auto",
        "marginRight": "auto",
        "paddingLeft": "1rem",
        "paddingRight": "1rem",
    }


def compose_styles(*styles: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow-merge descriptions left to right, skipping ``None``."""
    composed: dict[str, Any] = {}
    for style in styles:
        if style:
            composed.update(style)
    return composed


def responsive(
    base: Mapping[str, Any] | None = None,
    **breakpoints: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Build a description with per-breakpoint overrides.

    Example:
        >>> responsive(base={"fontSize": 16}, mobile={"fontSize": 14})
        {'fontSize': 16, '@media': {'mobile': {'fontSize': 14}}}
    """
    result: dict[str, Any] = dict(base) if base else {}
    variants = {name: dict(style) for name, style in breakpoints.items() if style is not None}
    if variants:
        result[RESPONSIVE_KEY] = variants
    return result
