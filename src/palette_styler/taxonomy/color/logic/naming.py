"""
naming.py

Does:
    Turn (family, level) into display names like "Blue / 200" and order names
    and entities: family alphabetically (case-sensitive), then level numerically.
Returns:
    display_name(), name_key(), sort_names(), sort_entities(), attach_names().
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple, Union

from palette_styler.general.utils import debug
from palette_styler.taxonomy.color import NAME_SEPARATOR
from palette_styler.taxonomy.types import ColorEntity

__all__ = [
    "display_name",
    "name_key",
    "sort_names",
    "sort_entities",
    "attach_names",
]

_DIGITS_RE = re.compile(r"(\d+)")


def display_name(family: str, level: int) -> str:
    """'<Family> / <Level>'."""
    return f"{family}{NAME_SEPARATOR}{level}"


def name_key(name: str) -> Tuple[Union[str, int], ...]:
    """
    Natural sort key: digit runs compare as integers, the rest as plain
    strings, so "Red / 200" sorts before "Red / 1000".
    """
    # re.split with a capture group alternates text/digits, so positions
    # of equal index always hold the same type across keys.
    parts = _DIGITS_RE.split(name)
    return tuple(int(p) if i % 2 else p for i, p in enumerate(parts))


def sort_names(names: Iterable[str]) -> List[str]:
    return sorted(names, key=name_key)


def sort_entities(entities: Iterable[ColorEntity]) -> List[ColorEntity]:
    """Stable sort by (family, level); entities must already carry a level."""
    return sorted(entities, key=lambda e: (e.family, e.level))


def attach_names(entities: Iterable[ColorEntity]) -> None:
    for entity in entities:
        if entity.level is None:
            raise ValueError(f"{entity.color_id} has no tonal level yet")
        entity.name = display_name(entity.family, entity.level)
        debug(f"{entity.color_id} → {entity.name}", topic="naming")
