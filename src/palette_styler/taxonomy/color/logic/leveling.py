"""
leveling.py

Does:
    Group classified entities by family and rank each family from lightest to
    darkest, attaching tonal levels 100, 200, 300, ... (a lone member gets 100).
Returns:
    assign_levels() → {family: [entities, lightest first]}.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from palette_styler.general.utils import debug
from palette_styler.taxonomy.color import DEFAULT_LEVEL_STEP
from palette_styler.taxonomy.types import ColorEntity

__all__ = ["group_by_family", "level_for", "assign_levels"]

logger = logging.getLogger(__name__)


def group_by_family(entities: Iterable[ColorEntity]) -> Dict[str, List[ColorEntity]]:
    """Bucket entities by family, keeping arrival order inside each bucket."""
    buckets: Dict[str, List[ColorEntity]] = {}
    for entity in entities:
        buckets.setdefault(entity.family, []).append(entity)
    return buckets


def level_for(rank: int, bucket_size: int, *, step: int = DEFAULT_LEVEL_STEP) -> int:
    """Level of the ``rank``-th lightest member (0-based) of a bucket."""
    if bucket_size == 1:
        return step
    return (rank + 1) * step


def assign_levels(
    entities: Iterable[ColorEntity],
    *,
    step: int = DEFAULT_LEVEL_STEP,
) -> Dict[str, List[ColorEntity]]:
    """
    Does:
        Sort each family bucket by lightness, descending. The sort is stable,
        so equal lightness keeps arrival order. Sets ``entity.level`` in place.
    Returns:
        The buckets, each ordered lightest → darkest.
    """
    buckets = group_by_family(entities)
    for family, members in buckets.items():
        members.sort(key=lambda e: -e.lightness)
        total = len(members)
        for rank, entity in enumerate(members):
            entity.level = level_for(rank, total, step=step)
            debug(
                f"{family}: {entity.color_id} l={entity.lightness:.3f} → {entity.level}",
                topic="level",
            )

    logger.debug(
        "Leveled %d families: %s",
        len(buckets),
        ", ".join(f"{k}={len(v)}" for k, v in buckets.items()),
    )
    return buckets
