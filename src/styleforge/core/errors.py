"""
Error types for styleforge.

The compiler itself never raises on malformed style input; these exceptions
only cover the I/O edges (configuration files and style/token sources).
"""

from __future__ import annotations

from pathlib import Path


class StyleforgeError(Exception):
    """Base exception for all styleforge errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the source path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigError(StyleforgeError):
    """
    Raised when a styleforge.toml file cannot be used.

    Examples:
    - Invalid TOML syntax
    - Unknown naming strategy
    - Breakpoint table with non-string conditions
    """

    pass


class StyleSourceError(StyleforgeError):
    """
    Raised when a style map or token table file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid YAML/JSON
    - Top-level document is not a mapping
    """

    pass
