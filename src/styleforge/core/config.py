"""
Project configuration for styleforge.

Settings live in ``styleforge.toml``::

    [styles]
    default_unit = "px"
    naming = "hash"        # hash | wide | counter
    strict = false
    cache_size = 0

    [breakpoints]
    tablet = "(min-width: 700px)"

    [theme]
    selector = ":root"

Lookup order for ``load_config()``: explicit path, ``$STYLEFORGE_CONFIG``,
``./styleforge.toml``, built-in defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "styleforge.toml"
CONFIG_ENV_VAR = "STYLEFORGE_CONFIG"


class NamingStrategy(StrEnum):
    """How logical block names become class names."""

    HASH = "hash"
    WIDE = "wide"
    COUNTER = "counter"


class StylesConfig(BaseModel):
    """The ``[styles]`` section."""

    model_config = ConfigDict(frozen=True)

    default_unit: str = Field(default="px", description="Unit appended to bare numbers")
    naming: NamingStrategy = Field(default=NamingStrategy.HASH)
    strict: bool = Field(default=False, description="Collect warnings while compiling")
    cache_size: int = Field(default=0, ge=0, description="LRU entries; 0 disables caching")


class ThemeConfig(BaseModel):
    """The ``[theme]`` section."""

    model_config = ConfigDict(frozen=True)

    selector: str = ":root"


class StyleforgeConfig(BaseModel):
    """Complete styleforge configuration."""

    model_config = ConfigDict(frozen=True)

    styles: StylesConfig = Field(default_factory=StylesConfig)
    breakpoints: dict[str, str] = Field(
        default_factory=dict, description="Named breakpoints added to or overriding the defaults"
    )
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    source: Path | None = Field(default=None, description="File the config was read from")


def _parse_config_data(data: dict[str, Any], source: Path | None = None) -> StyleforgeConfig:
    """Validate raw TOML data into a StyleforgeConfig."""
    try:
        return StyleforgeConfig(
            styles=StylesConfig(**data.get("styles", {})),
            breakpoints=data.get("breakpoints", {}),
            theme=ThemeConfig(**data.get("theme", {})),
            source=source,
        )
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid configuration: {e}", path=source) from e


def _find_config_file(path: Path | None) -> Path | None:
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    local = Path.cwd() / CONFIG_FILE
    if local.exists():
        return local
    return None


def load_config(path: Path | None = None) -> StyleforgeConfig:
    """
    Load styleforge configuration.

    Args:
        path: Explicit config file. When given (or set through the
            environment) the file must exist.

    Returns:
        Parsed configuration, or defaults when no file is found.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    config_path = _find_config_file(path)
    if config_path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return StyleforgeConfig()

    if not config_path.exists():
        raise ConfigError("Config file not found", path=config_path)

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", path=config_path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config: {e}", path=config_path) from e

    logger.debug("Loaded configuration from %s", config_path)
    return _parse_config_data(data, source=config_path)
