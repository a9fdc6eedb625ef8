"""
color.
=====

Does: Aggregate the color-domain constants shared by the codec and the
      classification/leveling/naming stages.
Used By: taxonomy.color.utils, taxonomy.color.logic, orchestrator.
"""

from .constants import (
    CHROMATIC_FAMILIES,
    DEFAULT_LEVEL_STEP,
    DEFAULT_OPACITY,
    EMPTY_SELECTION_MESSAGE,
    FAMILY_NAMES,
    NAME_SEPARATOR,
    NEUTRAL,
    NEUTRAL_MAX_SATURATION,
    OTHER,
    PAINT_ARRAYS,
    SOLID_PAINT,
    STYLES_CREATED_MESSAGE,
)

__all__ = [
    "NEUTRAL",
    "OTHER",
    "CHROMATIC_FAMILIES",
    "FAMILY_NAMES",
    "NEUTRAL_MAX_SATURATION",
    "SOLID_PAINT",
    "PAINT_ARRAYS",
    "DEFAULT_OPACITY",
    "DEFAULT_LEVEL_STEP",
    "NAME_SEPARATOR",
    "EMPTY_SELECTION_MESSAGE",
    "STYLES_CREATED_MESSAGE",
]
