"""Tests for breakpoint resolution."""

import pytest

from styleforge.styles.breakpoints import (
    DEFAULT_BREAKPOINTS,
    build_breakpoint_table,
    is_known_breakpoint,
    looks_like_length,
    resolve_breakpoint,
)


class TestResolveBreakpoint:
    """Tests for the three-tier fallback."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("mobile", "(max-width: 640px)"),
            ("tablet", "(min-width: 641px) and (max-width: 1024px)"),
            ("desktop", "(min-width: 1025px) and (max-width: 1440px)"),
            ("wide", "(min-width: 1441px)"),
            ("print", "print"),
        ],
    )
    def test_named_buckets(self, name, expected) -> None:
        assert resolve_breakpoint(name) == expected

    def test_literal_condition_unchanged(self) -> None:
        assert resolve_breakpoint("(max-width: 500px)") == "(max-width: 500px)"
        assert resolve_breakpoint("(orientation: landscape)") == "(orientation: landscape)"

    def test_raw_width_becomes_min_width(self) -> None:
        assert resolve_breakpoint("800px") == "(min-width: 800px)"
        assert resolve_breakpoint("48rem") == "(min-width: 48rem)"

    def test_unknown_name_falls_back_to_min_width(self) -> None:
        assert resolve_breakpoint("tablte") == "(min-width: tablte)"

    def test_custom_table(self) -> None:
        table = build_breakpoint_table({"tablet": "(min-width: 700px)", "tv": "(min-width: 1920px)"})
        assert resolve_breakpoint("tablet", table) == "(min-width: 700px)"
        assert resolve_breakpoint("tv", table) == "(min-width: 1920px)"
        assert resolve_breakpoint("mobile", table) == DEFAULT_BREAKPOINTS["mobile"]

    def test_build_table_does_not_mutate_defaults(self) -> None:
        build_breakpoint_table({"mobile": "(max-width: 1px)"})
        assert DEFAULT_BREAKPOINTS["mobile"] == "(max-width: 640px)"


class TestKnownBreakpoints:
    """Tests for the typo detection used by strict mode."""

    @pytest.mark.parametrize("name", ["800px", "48rem", "0.5em", "100%", "1200"])
    def test_lengths(self, name) -> None:
        assert looks_like_length(name)

    @pytest.mark.parametrize("name", ["tablte", "px", "big-screen", ""])
    def test_not_lengths(self, name) -> None:
        assert not looks_like_length(name)

    def test_known(self) -> None:
        assert is_known_breakpoint("tablet")
        assert is_known_breakpoint("(min-width: 1px)")
        assert is_known_breakpoint("640px")
        assert not is_known_breakpoint("tablte")
