"""
Per-render style injection tracking.

A page render often includes the same component several times; its CSS
should reach the page once. Wrap a render in ``style_context()`` and ask
``should_inject_style(key)`` before emitting a component's style block::

    with style_context():
        for card in cards:
            if should_inject_style("card"):
                parts.append(f"<style>{card_styles.css}</style>")
            parts.append(render_card(card))

Contexts nest, and live in a ``ContextVar`` so concurrent requests (threads
or asyncio tasks) never see each other's state.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_style_stack: ContextVar[tuple[set[str], ...]] = ContextVar("styleforge_style_stack", default=())


def push_style_context() -> None:
    """Start tracking injected styles for a new render."""
    _style_stack.set((*_style_stack.get(), set()))


def pop_style_context() -> None:
    """Stop tracking the innermost render. No-op without an active context."""
    stack = _style_stack.get()
    if stack:
        _style_stack.set(stack[:-1])


def should_inject_style(key: str) -> bool:
    """
    Check whether the style for *key* still needs emitting.

    Marks *key* as injected for the rest of the innermost context. Without
    an active context every call returns True.
    """
    stack = _style_stack.get()
    if not stack:
        return True
    injected = stack[-1]
    if key in injected:
        return False
    injected.add(key)
    return True


@contextmanager
def style_context() -> Iterator[None]:
    """Track injected styles for the duration of a ``with`` block."""
    token = _style_stack.set((*_style_stack.get(), set()))
    try:
        yield
    finally:
        _style_stack.reset(token)
