"""Package version lookup."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "styleforge"
UNKNOWN_VERSION = "0.0.0+unknown"

# src/styleforge/_version.py -> repository root
_SOURCE_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_checkout_version(pyproject: Path) -> str | None:
    """Read ``[project].version`` when running from an uninstalled checkout."""
    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project")
    if not isinstance(project, dict) or project.get("name") != DISTRIBUTION:
        return None
    found = project.get("version")
    return found if isinstance(found, str) else None


def get_version() -> str:
    """Return the installed distribution version, or the checkout's."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return _source_checkout_version(_SOURCE_PYPROJECT) or UNKNOWN_VERSION
