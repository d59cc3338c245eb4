"""Core types, configuration and source loading for styleforge."""

from .config import NamingStrategy, StyleforgeConfig, load_config
from .errors import ConfigError, StyleforgeError, StyleSourceError
from .ir import (
    CompileResult,
    Declaration,
    PseudoBlock,
    ResponsiveBlock,
    StyleEntry,
    StyleWarning,
    WarningCode,
)

__all__ = [
    # Configuration
    "NamingStrategy",
    "StyleforgeConfig",
    "load_config",
    # Errors
    "StyleforgeError",
    "ConfigError",
    "StyleSourceError",
    # IR
    "CompileResult",
    "Declaration",
    "PseudoBlock",
    "ResponsiveBlock",
    "StyleEntry",
    "StyleWarning",
    "WarningCode",
]
