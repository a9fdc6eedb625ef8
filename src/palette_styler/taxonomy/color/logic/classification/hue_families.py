"""
hue_families.py

Does:
    Assign an HSL color to a named hue family. Low-saturation colors go to the
    neutral bucket first; chromatic colors are matched against half-open hue
    ranges [lo, hi) read from the bundled `hue_families.json` table.
Returns:
    classify() → family name; get_hue_table() → validated, cached table.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple, TypedDict

from palette_styler.general.utils import debug, load_config
from palette_styler.taxonomy.color import NEUTRAL, NEUTRAL_MAX_SATURATION, OTHER
from palette_styler.taxonomy.color.utils import to_hsl
from palette_styler.taxonomy.types import ColorEntity, ColorSample

__all__ = [
    "HueFamily",
    "HueTable",
    "HUE_TABLE_FILE",
    "validate_hue_table",
    "get_hue_table",
    "classify",
    "classify_colors",
]

logger = logging.getLogger(__name__)

HUE_TABLE_FILE = "hue_families"


class HueFamily(TypedDict):
    name: str
    ranges: List[Tuple[float, float]]


class HueTable(TypedDict):
    neutral: str
    neutral_max_saturation: float
    fallback: str
    families: List[HueFamily]


# ── Config validation ────────────────────────────────────────────────────────
def _as_range(raw: Any, family: str) -> Tuple[float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"family {family!r}: range must be [lo, hi], got {raw!r}")
    lo, hi = float(raw[0]), float(raw[1])
    if not 0 <= lo < hi <= 360:
        raise ValueError(f"family {family!r}: range [{lo}, {hi}) outside [0, 360)")
    return lo, hi


def validate_hue_table(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Does:
        Check and normalize a raw hue table: ranges become float tuples,
        names must be non-empty and unique, the saturation gate must sit in [0, 1].
        Missing top-level keys fall back to the built-in defaults.
    """
    threshold = float(data.get("neutral_max_saturation", NEUTRAL_MAX_SATURATION))
    if not 0 <= threshold <= 1:
        raise ValueError(f"neutral_max_saturation must be in [0, 1], got {threshold}")

    families: List[HueFamily] = []
    names = set()
    for entry in data["families"]:
        if not isinstance(entry, dict):
            raise ValueError(f"family entry must be an object, got {entry!r}")
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"family entry without a name: {entry!r}")
        if name in names:
            raise ValueError(f"duplicate family {name!r}")
        names.add(name)
        families.append(
            {"name": name, "ranges": [_as_range(r, name) for r in entry["ranges"]]}
        )

    return {
        "neutral": str(data.get("neutral", NEUTRAL)),
        "neutral_max_saturation": threshold,
        "fallback": str(data.get("fallback", OTHER)),
        "families": families,
    }


@lru_cache(maxsize=1)
def get_hue_table() -> HueTable:
    """Load the hue table once per process (call `get_hue_table.cache_clear()` to reload)."""
    table = load_config(HUE_TABLE_FILE, mode="validated_dict", validator=validate_hue_table)
    logger.debug("Hue table loaded: %d families", len(table["families"]))
    return table  # type: ignore[return-value]


# ── Core API ─────────────────────────────────────────────────────────────────
def classify(
    h: float,
    s: float,
    l: Optional[float] = None,
    *,
    table: Optional[HueTable] = None,
) -> str:
    """
    Does:
        First match wins: saturation below the gate → neutral; otherwise the
        first family whose [lo, hi) range holds the hue; otherwise the fallback.
        Lightness plays no part today and is accepted for signature symmetry.
    Returns:
        Family name.
    """
    tbl = table if table is not None else get_hue_table()

    if s < tbl["neutral_max_saturation"]:
        return tbl["neutral"]

    for family in tbl["families"]:
        for lo, hi in family["ranges"]:
            if lo <= h < hi:
                return family["name"]

    debug(f"hue {h:.2f} matched no family → {tbl['fallback']}", topic="classify")
    return tbl["fallback"]


def classify_colors(
    color_map: Dict[str, ColorSample],
    *,
    table: Optional[HueTable] = None,
) -> Dict[str, ColorEntity]:
    """
    Does:
        Derive HSL and a family for every deduplicated color, creating one
        entity per id. ``order`` records the id's position in ``color_map``.
    Returns:
        {canonical_id: ColorEntity}, same order as ``color_map``.
    """
    tbl = table if table is not None else get_hue_table()
    entities: Dict[str, ColorEntity] = {}
    for order, (cid, sample) in enumerate(color_map.items()):
        hsl = to_hsl(*sample.rgb)
        family = classify(hsl.h, hsl.s, hsl.l, table=tbl)
        debug(
            f"{cid}: h={hsl.h:.1f} s={hsl.s:.3f} l={hsl.l:.3f} → {family}",
            topic="classify",
        )
        entities[cid] = ColorEntity(
            color_id=cid, sample=sample, hsl=hsl, family=family, order=order
        )
    logger.debug("Classified %d colors", len(entities))
    return entities
