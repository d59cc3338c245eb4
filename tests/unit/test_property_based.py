"""
Property-based tests using Hypothesis.

These tests check the compiler's invariants over generated style maps,
property names, numbers and breakpoint names.
"""

import string
from typing import Any

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from styleforge.core.ir import CompileResult
from styleforge.styles.breakpoints import DEFAULT_BREAKPOINTS, resolve_breakpoint
from styleforge.styles.compiler import StyleCompiler
from styleforge.styles.formatter import (
    UNITLESS_PROPERTIES,
    format_number,
    format_value,
    is_unitless,
)
from styleforge.styles.naming import class_name_for

# =============================================================================
# Strategies
# =============================================================================

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(),
    st.text(max_size=20),
)

style_keys = st.one_of(
    st.text(max_size=12),
    st.sampled_from(
        ["color", "padding", "zIndex", "&:hover", "& > &", "@media", "mobile", "(min-width: 1px)"]
    ),
)

# Arbitrarily nested input, including wrong shapes under every key kind
nested_values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.dictionaries(style_keys, children, max_size=4),
        st.lists(children, max_size=3),
    ),
    max_leaves=20,
)

arbitrary_style_maps = st.dictionaries(st.text(max_size=12), nested_values, max_size=5)

property_names = st.text(alphabet=string.ascii_letters + "-_", min_size=1, max_size=20)

declarations = st.dictionaries(
    property_names,
    st.one_of(st.integers(), st.text(max_size=10)),
    max_size=4,
)

descriptions = st.fixed_dictionaries(
    {},
    optional={
        "color": st.text(max_size=10),
        "margin": st.integers(),
        "&:hover": declarations,
        "@media": st.dictionaries(st.sampled_from(sorted(DEFAULT_BREAKPOINTS)), declarations),
    },
)

style_maps = st.dictionaries(st.text(min_size=1, max_size=12), descriptions, max_size=5)


# =============================================================================
# Compiler Properties
# =============================================================================


class TestCompilerProperties:
    """Invariants of compiling whole style maps."""

    @given(style_maps)
    @settings(max_examples=100, deadline=None)
    def test_compile_is_deterministic(self, style_map: dict[str, Any]) -> None:
        """Invariant: two fresh compilers give identical results."""
        first = StyleCompiler(strict=True).compile(style_map)
        second = StyleCompiler(strict=True).compile(style_map)
        assert first == second

    @given(st.text(min_size=1, max_size=30), descriptions, descriptions)
    @settings(max_examples=100, deadline=None)
    def test_class_name_ignores_content(self, name: str, one: dict, other: dict) -> None:
        """Invariant: a block's class depends only on its logical name."""
        first = StyleCompiler().compile({name: one})
        second = StyleCompiler().compile({name: other})
        assert first.class_map[name] == second.class_map[name] == class_name_for(name)

    @given(style_maps)
    @settings(max_examples=100, deadline=None)
    def test_every_block_gets_a_class(self, style_map: dict[str, Any]) -> None:
        """Invariant: class_map has one distinct class per logical name."""
        result = StyleCompiler().compile(style_map)
        assert list(result.class_map) == list(style_map)
        assert len(set(result.class_map.values())) == len(style_map)

    @given(arbitrary_style_maps)
    @settings(max_examples=200, deadline=None)
    def test_compile_never_raises(self, style_map: dict[str, Any]) -> None:
        """Invariant: malformed input degrades to warnings, never exceptions."""
        result = StyleCompiler(strict=True).compile(style_map)
        assert isinstance(result, CompileResult)
        assert StyleCompiler().compile(style_map).css == result.css

    @given(arbitrary_style_maps)
    @settings(max_examples=100, deadline=None)
    def test_cache_matches_fresh_compile(self, style_map: dict[str, Any]) -> None:
        """Invariant: a cached compiler returns what a fresh one would."""
        compiler = StyleCompiler(cache_size=8, strict=True)
        compiler.compile(style_map)
        assert compiler.compile(style_map) == StyleCompiler(strict=True).compile(style_map)


# =============================================================================
# Unit Policy Properties
# =============================================================================


class TestUnitPolicyProperties:
    """Invariants of numeric value formatting."""

    @given(st.sampled_from(sorted(UNITLESS_PROPERTIES)), st.integers())
    @settings(max_examples=100)
    def test_unitless_properties_stay_bare(self, prop: str, value: int) -> None:
        assert format_value(prop, value) == str(value)

    @given(property_names, st.integers())
    @settings(max_examples=100)
    def test_other_properties_get_the_unit(self, prop: str, value: int) -> None:
        assume(not is_unitless(prop))
        assert format_value(prop, value) == f"{value}px"
        assert format_value(prop, value, unit="rem") == f"{value}rem"

    @given(property_names, st.floats(allow_nan=False, allow_infinity=False))
    @settings(max_examples=100)
    def test_float_values_follow_the_same_policy(self, prop: str, value: float) -> None:
        expected = format_number(value) if is_unitless(prop) else f"{format_number(value)}px"
        assert format_value(prop, value) == expected

    @given(st.integers(min_value=-(10**15), max_value=10**15))
    def test_integral_floats_print_as_integers(self, value: int) -> None:
        assert format_number(float(value)) == str(value)

    @given(st.floats(allow_nan=False, allow_infinity=False))
    @settings(max_examples=200)
    def test_number_text_round_trips(self, value: float) -> None:
        """Invariant: the printed number parses back to the same float."""
        assert float(format_number(value)) == value


# =============================================================================
# Breakpoint Properties
# =============================================================================


class TestBreakpointProperties:
    """Invariants of the breakpoint fallback."""

    @given(st.text(min_size=1, max_size=20))
    @settings(max_examples=100)
    def test_unnamed_breakpoints_become_min_width(self, name: str) -> None:
        assume(name not in DEFAULT_BREAKPOINTS)
        assume(not (name.startswith("(") and name.endswith(")")))
        assert resolve_breakpoint(name) == f"(min-width: {name})"

    @given(st.text(max_size=20))
    @settings(max_examples=100)
    def test_parenthesised_conditions_pass_through(self, inner: str) -> None:
        condition = f"({inner})"
        assert resolve_breakpoint(condition) == condition
