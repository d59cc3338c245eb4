"""
Style compiler: a whole style map to ``CompileResult``.

Usage::

    from styleforge import css

    result = css({
        "card": {"padding": 16, "color": "red"},
        "btn": {"&:hover": {"color": "blue"}},
    })
    result.class_map["card"]   # "card-1tafk"
    result.css                 # ".card-1tafk { padding: 16px; color: red; }\\n..."

For repeated compiles in a server loop, keep one ``StyleCompiler`` around
with ``cache_size`` set; cache hits return the same result a fresh compile
would.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

from styleforge.core.config import NamingStrategy, StyleforgeConfig
from styleforge.core.ir import CompileResult, StyleWarning, WarningCode

from .breakpoints import build_breakpoint_table
from .formatter import DEFAULT_UNIT
from .naming import ClassNameRegistry
from .rule_compiler import compile_block

logger = logging.getLogger(__name__)


class StyleCompiler:
    """
    Compiles style maps with fixed settings.

    Args:
        unit: Unit appended to bare numbers
        breakpoints: Named breakpoints added to or overriding the defaults
        naming: Class naming strategy (ignored when *registry* is given)
        strict: Collect ``StyleWarning``s alongside the output
        cache_size: Number of results kept in the LRU cache; 0 disables it
        registry: Class name registry to share between compilers
    """

    def __init__(
        self,
        *,
        unit: str = DEFAULT_UNIT,
        breakpoints: Mapping[str, str] | None = None,
        naming: NamingStrategy | str = NamingStrategy.HASH,
        strict: bool = False,
        cache_size: int = 0,
        registry: ClassNameRegistry | None = None,
    ):
        self.unit = unit
        self.breakpoints = build_breakpoint_table(breakpoints)
        self.strict = strict
        self.cache_size = max(cache_size, 0)
        self.registry = registry if registry is not None else ClassNameRegistry(naming)
        self.cache_hits = 0
        self.cache_misses = 0
        self._cache: OrderedDict[str, CompileResult] = OrderedDict()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: StyleforgeConfig) -> StyleCompiler:
        """Build a compiler from a loaded configuration."""
        return cls(
            unit=config.styles.default_unit,
            breakpoints=config.breakpoints,
            naming=config.styles.naming,
            strict=config.styles.strict,
            cache_size=config.styles.cache_size,
        )

    def compile(self, style_map: Mapping[Any, Any]) -> CompileResult:
        """
        Compile every block of *style_map* in input order.

        Every block gets a ``class_map`` entry; only blocks that produce CSS
        contribute a line to ``css``.
        """
        key = self._fingerprint(style_map) if self.cache_size else None
        if key is not None:
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
                    self.cache_hits += 1
                    logger.debug("Style cache hit (%s)", key[:12])
                    return cached.model_copy(deep=True)
                self.cache_misses += 1

        result = self._compile(style_map)

        if key is not None:
            with self._lock:
                self._cache[key] = result
                self._cache.move_to_end(key)
                while len(self._cache) > self.cache_size:
                    self._cache.popitem(last=False)
            return result.model_copy(deep=True)
        return result

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _compile(self, style_map: Mapping[Any, Any]) -> CompileResult:
        warnings: list[StyleWarning] | None = [] if self.strict else None
        class_map: dict[str, str] = {}
        blocks: list[str] = []

        for raw_name, description in style_map.items():
            name = str(raw_name)
            class_name = self.registry.class_name(name)
            class_map[name] = class_name

            if description is None:
                description = {}
            elif not isinstance(description, Mapping):
                if warnings is not None:
                    warnings.append(
                        StyleWarning(
                            code=WarningCode.INVALID_VALUE,
                            message=(
                                "style block must be a mapping, "
                                f"got {type(description).__name__}; block left empty"
                            ),
                            block=name,
                        )
                    )
                description = {}

            rule_text = compile_block(
                description,
                class_name,
                unit=self.unit,
                breakpoints=self.breakpoints,
                block=name,
                warnings=warnings,
            )
            if rule_text:
                blocks.append(rule_text)
            elif warnings is not None:
                warnings.append(
                    StyleWarning(
                        code=WarningCode.EMPTY_BLOCK,
                        message=f"block produced no CSS; class {class_name} is unused",
                        block=name,
                    )
                )

        css_text = "\n".join(blocks)
        logger.debug(
            "Compiled %d style blocks into %d rules (%d chars)",
            len(class_map),
            len(blocks),
            len(css_text),
        )
        if warnings:
            logger.debug("Style compile produced %d warnings", len(warnings))

        return CompileResult(class_map=class_map, css=css_text, warnings=tuple(warnings or ()))

    def _fingerprint(self, style_map: Mapping[Any, Any]) -> str | None:
        """
        Stable key for a style map and this compiler's settings.

        Key order is kept because it drives output order. Keys are taken
        through ``str()`` as the compiler sees them, and every value is
        tagged with its kind so that inputs which compile differently
        never share a key. Returns None for maps that cannot be
        serialised, which then bypass the cache.
        """
        try:
            payload = json.dumps(
                [self.unit, self.breakpoints, self.strict, _cache_form(style_map)],
                ensure_ascii=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError):
            return None
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _cache_form(value: Any, active: frozenset[int] = frozenset()) -> list[Any]:
    """Tagged, JSON-safe rendering of a style value for cache keys."""
    if value is None:
        return ["none"]
    if isinstance(value, Mapping):
        if id(value) in active:
            raise ValueError("circular style description")
        inner = active | {id(value)}
        return ["map", [[str(key), _cache_form(item, inner)] for key, item in value.items()]]
    if isinstance(value, bool):
        return ["bool", value]
    if isinstance(value, int):
        return ["int", str(value)]
    if isinstance(value, float):
        return ["float", repr(value)]
    if isinstance(value, str):
        return ["str", value]
    # Sequences and other objects are dropped or stringified by the parser;
    # their type name appears in strict warnings.
    return ["obj", type(value).__name__, str(value)]


def compile_styles(
    style_map: Mapping[Any, Any],
    *,
    unit: str = DEFAULT_UNIT,
    breakpoints: Mapping[str, str] | None = None,
    naming: NamingStrategy | str = NamingStrategy.HASH,
    strict: bool = False,
) -> CompileResult:
    """
    Compile a style map with a fresh compiler.

    Args:
        style_map: Logical block name -> style description
        unit: Unit appended to bare numbers
        breakpoints: Named breakpoints added to or overriding the defaults
        naming: Class naming strategy
        strict: Collect warnings alongside the output

    Returns:
        CompileResult with ``class_map``, ``css`` and ``warnings``
    """
    compiler = StyleCompiler(unit=unit, breakpoints=breakpoints, naming=naming, strict=strict)
    return compiler.compile(style_map)


css = compile_styles
