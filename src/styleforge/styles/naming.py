"""
Class name generation.

A class name is ``{hyphenated-logical-name}-{suffix}``. The suffix depends on
the logical name only, never on the style content, so a block keeps its class
when its declarations change.

Strategies:
    hash     32-bit rolling hash, base-36, first 5 characters
    wide     64-bit FNV-1a over UTF-8, full base-36
    counter  base-36 sequence number in first-seen order

``ClassNameRegistry`` remembers what it has handed out and disambiguates the
rare clash between two logical names, so class names it produces are unique
by construction.
"""

from __future__ import annotations

import threading

from styleforge.core.config import NamingStrategy

from .formatter import to_selector_case

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

HASH_SUFFIX_LENGTH = 5

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF
_FNV_OFFSET_64 = 0xCBF29CE484222325
_FNV_PRIME_64 = 0x100000001B3


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if number == 0:
        return "0"
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def rolling_hash(text: str) -> int:
    """
    ``h = h * 31 + c`` over UTF-16 code units, wrapped to signed 32-bit.

    Code units rather than code points keep suffixes identical to those
    produced by JavaScript-side tooling for names outside the BMP.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & _MASK_32
    if value & 0x80000000:
        value -= 1 << 32
    return value


def fnv1a_64(text: str) -> int:
    """64-bit FNV-1a over the UTF-8 bytes of *text*."""
    value = _FNV_OFFSET_64
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME_64) & _MASK_64
    return value


def hash_suffix(logical_name: str) -> str:
    """Short suffix from the 32-bit rolling hash."""
    return to_base36(abs(rolling_hash(logical_name)))[:HASH_SUFFIX_LENGTH]


def wide_suffix(logical_name: str) -> str:
    """Full base-36 suffix from the 64-bit FNV-1a hash."""
    return to_base36(fnv1a_64(logical_name))


def class_name_for(logical_name: str) -> str:
    """
    Derive the class name for a logical block name.

    Examples:
        >>> class_name_for("card")
        'card-1tafk'
    """
    return f"{to_selector_case(logical_name)}-{hash_suffix(logical_name)}"


class ClassNameRegistry:
    """
    Hands out class names and remembers them.

    A logical name always maps to the class it was first given. When two
    distinct logical names would produce the same class, the later one gets
    ``-2``, ``-3``, ... appended.

    Thread-safe; one registry may back a compiler shared between requests.
    """

    def __init__(self, strategy: NamingStrategy | str = NamingStrategy.HASH):
        self.strategy = NamingStrategy(strategy)
        self._by_name: dict[str, str] = {}
        self._taken: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, logical_name: object) -> bool:
        return logical_name in self._by_name

    def snapshot(self) -> dict[str, str]:
        """Copy of every logical name -> class name assigned so far."""
        with self._lock:
            return dict(self._by_name)

    def class_name(self, logical_name: str) -> str:
        """Return the class for *logical_name*, assigning one if needed."""
        with self._lock:
            existing = self._by_name.get(logical_name)
            if existing is not None:
                return existing

            candidate = self._generate(logical_name)
            unique = candidate
            attempt = 2
            while unique in self._taken:
                unique = f"{candidate}-{attempt}"
                attempt += 1

            self._by_name[logical_name] = unique
            self._taken.add(unique)
            return unique

    def _generate(self, logical_name: str) -> str:
        base = to_selector_case(logical_name)
        if self.strategy is NamingStrategy.WIDE:
            return f"{base}-{wide_suffix(logical_name)}"
        if self.strategy is NamingStrategy.COUNTER:
            return f"{base}-{to_base36(len(self._by_name) + 1)}"
        return f"{base}-{hash_suffix(logical_name)}"
