"""
palette_styler
==============

Does: Root package for the palette taxonomy engine (dedup, hue families,
      tonal levels, naming) and its style-materialization glue.
Returns: Re-exports the high-level entry points from `taxonomy`.
Used by: The `palette-styler` CLI and host-tool integrations.
"""

from .taxonomy import (
    EmptyInputError,
    PaletteRun,
    create_styles,
    extract_palette,
)

__all__: list[str] = [
    "PaletteRun",
    "extract_palette",
    "create_styles",
    "EmptyInputError",
]
__version__ = "0.3.0"
__docformat__ = "google"
