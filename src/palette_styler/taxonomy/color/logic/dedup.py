"""
dedup.py

Does:
    Collapse an ordered stream of solid color samples into one representative
    sample per canonical color id.
Returns:
    deduplicate() → {canonical_id: ColorSample}, keyed in first-seen order.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from palette_styler.general.utils import debug
from palette_styler.taxonomy.color.utils import canonical_id
from palette_styler.taxonomy.types import ColorSample

__all__ = ["deduplicate"]

logger = logging.getLogger(__name__)


def deduplicate(
    samples: Iterable[ColorSample],
    *,
    track_opacity: bool = True,
) -> Dict[str, ColorSample]:
    """
    Does:
        Key every sample by its canonical id; on collision the later sample
        replaces the stored one (last write wins). The key keeps the position
        where the id was first seen, so dict order is first-arrival order.
    Returns:
        Mapping canonical id → representative sample. Empty input gives {}.
    """
    color_map: Dict[str, ColorSample] = {}
    seen = 0
    for sample in samples:
        seen += 1
        cid = canonical_id(sample.rgb, sample.opacity, track_opacity=track_opacity)
        if cid in color_map:
            debug(f"{cid}: later sample replaces earlier representative", topic="dedup")
        color_map[cid] = sample

    logger.debug("Deduplicated %d samples into %d colors", seen, len(color_map))
    return color_map
