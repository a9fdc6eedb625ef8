"""
settings.py.

Does: Resolve run settings from the bundled `palette.json` plus environment
      overrides (PALETTE_TRACK_OPACITY, PALETTE_HEX_CASE).
Returns: get_settings() → PaletteSettings.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from palette_styler.general.utils import load_config
from palette_styler.taxonomy.color import DEFAULT_LEVEL_STEP
from palette_styler.taxonomy.types import PaletteSettings

__all__ = ["SETTINGS_FILE", "validate_settings", "get_settings"]

logger = logging.getLogger(__name__)

SETTINGS_FILE = "palette"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(raw: Any, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValueError(f"{key}: expected a boolean, got {raw!r}")


def validate_settings(data: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce and check raw settings; unknown keys are dropped."""
    step = int(data.get("level_step", DEFAULT_LEVEL_STEP))
    if step <= 0:
        raise ValueError(f"level_step must be positive, got {step}")
    hex_case = str(data.get("hex_case", "lower")).lower()
    if hex_case not in ("lower", "upper"):
        raise ValueError(f"hex_case must be 'lower' or 'upper', got {hex_case!r}")
    return {
        "track_opacity": _parse_bool(data.get("track_opacity", True), "track_opacity"),
        "level_step": step,
        "hex_case": hex_case,
    }


def get_settings(**overrides: Any) -> PaletteSettings:
    """
    Does: Merge file defaults < environment < keyword overrides, then validate.
    Raises: ConfigParseError (bad file), ValueError (bad env/override values).
    """
    merged: Dict[str, Any] = dict(load_config(SETTINGS_FILE, mode="validated_dict"))

    env_opacity: Optional[str] = os.getenv("PALETTE_TRACK_OPACITY")
    if env_opacity:
        merged["track_opacity"] = env_opacity
    env_case: Optional[str] = os.getenv("PALETTE_HEX_CASE")
    if env_case:
        merged["hex_case"] = env_case

    merged.update({k: v for k, v in overrides.items() if v is not None})
    settings = validate_settings(merged)
    logger.debug("Palette settings: %s", settings)
    return settings  # type: ignore[return-value]
