"""Shared pytest fixtures for styleforge tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def card_styles() -> dict[str, Any]:
    """A small style map exercising every key kind."""
    return {
        "card": {"padding": 16, "color": "red"},
        "btn": {"&:hover": {"color": "blue"}},
        "box": {"@media": {"tablet": {"display": "none"}}},
    }


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no styleforge config in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STYLEFORGE_CONFIG", raising=False)
    return tmp_path
