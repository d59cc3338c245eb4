"""Tests for per-render style injection tracking."""

import asyncio

from styleforge.styles.registry import (
    pop_style_context,
    push_style_context,
    should_inject_style,
    style_context,
)


class TestStyleContext:
    def test_no_context_always_injects(self) -> None:
        assert should_inject_style("card")
        assert should_inject_style("card")

    def test_dedupes_within_context(self) -> None:
        with style_context():
            assert should_inject_style("card")
            assert not should_inject_style("card")
            assert should_inject_style("btn")
        assert should_inject_style("card")

    def test_nested_contexts_are_independent(self) -> None:
        with style_context():
            assert should_inject_style("card")
            with style_context():
                assert should_inject_style("card")
            assert not should_inject_style("card")

    def test_push_and_pop(self) -> None:
        push_style_context()
        try:
            assert should_inject_style("card")
            assert not should_inject_style("card")
        finally:
            pop_style_context()
        assert should_inject_style("card")

    def test_pop_without_context_is_noop(self) -> None:
        pop_style_context()
        assert should_inject_style("card")

    def test_concurrent_renders_isolated(self) -> None:
        """Each asyncio task renders with its own context."""

        async def render() -> list[bool]:
            with style_context():
                seen = [should_inject_style("card")]
                await asyncio.sleep(0)
                seen.append(should_inject_style("card"))
                return seen

        async def main() -> list[list[bool]]:
            return await asyncio.gather(render(), render())

        assert asyncio.run(main()) == [[True, False], [True, False]]
