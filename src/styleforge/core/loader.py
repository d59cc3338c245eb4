"""
Style map and token table loading.

Both sources are YAML documents (JSON works too, being a YAML subset) whose
top level is a mapping. Style maps are mappings of logical block name to
style description; token tables are mappings of category to key/value pairs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import StyleSourceError

logger = logging.getLogger(__name__)


def _load_mapping(path: Path, what: str) -> dict[str, Any]:
    if not path.exists():
        raise StyleSourceError(f"{what} not found", path=path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise StyleSourceError(f"Invalid YAML: {e}", path=path) from e
    except OSError as e:
        raise StyleSourceError(f"Cannot read {what.lower()}: {e}", path=path) from e

    if data is None:
        logger.warning("Empty %s at %s", what.lower(), path)
        return {}
    if not isinstance(data, dict):
        raise StyleSourceError(
            f"{what} must be a mapping, got {type(data).__name__}", path=path
        )
    return data


def load_style_map(path: Path) -> dict[str, Any]:
    """
    Load a style map from a YAML or JSON file.

    Block order in the file is preserved and drives CSS output order.

    Raises:
        StyleSourceError: If the file is missing, invalid, or not a mapping.
    """
    styles = _load_mapping(path, "Style map")
    for name, description in styles.items():
        if description is not None and not isinstance(description, dict):
            raise StyleSourceError(
                f"Style block {name!r} must be a mapping, got {type(description).__name__}",
                path=path,
            )
    return {name: description or {} for name, description in styles.items()}


def load_token_table(path: Path) -> dict[str, Any]:
    """
    Load a token table from a YAML or JSON file.

    Raises:
        StyleSourceError: If the file is missing, invalid, or not a mapping.
    """
    return _load_mapping(path, "Token table")
