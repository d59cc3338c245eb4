"""
Intermediate representation for style descriptions and compile results.

A raw style description is a plain mapping whose keys are told apart by
shape (``"&:hover"``, ``"@media"``, ``"paddingTop"``). The parser turns it
into a closed set of tagged entries so the rule compiler dispatches on
``kind`` instead of sniffing key prefixes:

    Declaration(name, value)
    PseudoBlock(selector, declarations)
    ResponsiveBlock(breakpoints)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# Scalar values accepted in declarations. bool comes first so pydantic keeps
# True/False from being coerced to 1/0.
ScalarValue = bool | int | float | str


# =============================================================================
# Style entries
# =============================================================================


class Declaration(BaseModel):
    """A single ``property: value`` pair."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["declaration"] = "declaration"
    name: str = Field(description="Property name as written by the caller")
    value: ScalarValue = Field(description="Unformatted value")


class PseudoBlock(BaseModel):
    """
    Declarations scoped to a selector fragment relative to the block's class.

    Every ``&`` in ``selector`` stands for the generated class selector, so
    ``"&:hover"`` compiles to ``.card-1tafk:hover``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["pseudo"] = "pseudo"
    selector: str
    declarations: tuple[Declaration, ...] = ()


class ResponsiveBlock(BaseModel):
    """Nested entries keyed by breakpoint name or raw media condition."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["responsive"] = "responsive"
    breakpoints: dict[str, tuple[StyleEntry, ...]] = Field(default_factory=dict)


StyleEntry = Annotated[
    Declaration | PseudoBlock | ResponsiveBlock,
    Field(discriminator="kind"),
]

ResponsiveBlock.model_rebuild()


# =============================================================================
# Diagnostics
# =============================================================================


class WarningCode(StrEnum):
    """Kinds of problems reported in strict mode."""

    INVALID_VALUE = "invalid-value"
    INVALID_VARIANT = "invalid-variant"
    NESTED_VARIANT_IGNORED = "nested-variant-ignored"
    UNKNOWN_BREAKPOINT = "unknown-breakpoint"
    EMPTY_BLOCK = "empty-block"
    DANGLING_TOKEN = "dangling-token"


class StyleWarning(BaseModel):
    """A non-fatal problem found while compiling or linting styles."""

    model_config = ConfigDict(frozen=True)

    code: WarningCode
    message: str
    block: str | None = Field(default=None, description="Logical style block name")
    key: str | None = Field(default=None, description="Offending key or token")

    def format(self) -> str:
        """Format as ``block.key: [code] message``."""
        location = ".".join(part for part in (self.block, self.key) if part)
        prefix = f"{location}: " if location else ""
        return f"{prefix}[{self.code.value}] {self.message}"


# =============================================================================
# Results
# =============================================================================


class CompileResult(BaseModel):
    """
    Output of compiling a style map.

    Attributes:
        class_map: Logical block name -> generated class name
        css: All emitted rules, one line per block that produced CSS
        warnings: Strict-mode diagnostics (empty unless strict)
    """

    model_config = ConfigDict(frozen=True)

    class_map: dict[str, str] = Field(default_factory=dict)
    css: str = ""
    warnings: tuple[StyleWarning, ...] = ()

    def class_name(self, name: str) -> str:
        """Return the generated class for *name*, or ``""`` if unknown."""
        return self.class_map.get(name, "")
