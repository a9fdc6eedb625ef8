"""
classification
==============

Hue-family classification of HSL colors.
"""

from .hue_families import (
    HUE_TABLE_FILE,
    HueFamily,
    HueTable,
    classify,
    classify_colors,
    get_hue_table,
    validate_hue_table,
)

__all__ = [
    "HUE_TABLE_FILE",
    "HueFamily",
    "HueTable",
    "classify",
    "classify_colors",
    "get_hue_table",
    "validate_hue_table",
]
