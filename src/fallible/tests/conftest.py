"""Shared fixtures: isolate settings from the developer's environment."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from fallible.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Drop FALLIBLE_* variables, hide any local .env, and reset cached settings."""
    for key in [k for k in os.environ if k.startswith("FALLIBLE_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()
