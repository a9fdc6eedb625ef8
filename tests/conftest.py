# tests/conftest.py
"""Shared fixtures: isolate env-driven config and tracing between tests."""

from __future__ import annotations

import pytest

from palette_styler.general.utils import clear_config_cache, reload_topics
from palette_styler.taxonomy.color.logic.classification import get_hue_table

_ENV_VARS = (
    "PALETTE_STYLER_DATA_DIR",
    "DATA_DIR",
    "PALETTE_DEBUG_TOPICS",
    "PALETTE_TRACK_OPACITY",
    "PALETTE_HEX_CASE",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Does: Start every test from the bundled data dir with tracing off."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    get_hue_table.cache_clear()
    reload_topics()
    yield
    clear_config_cache()
    get_hue_table.cache_clear()


@pytest.fixture
def settings():
    return {"track_opacity": True, "level_step": 100, "hex_case": "lower"}
