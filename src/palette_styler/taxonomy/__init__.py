"""
taxonomy
========

Does: Color taxonomy and naming engine: canonical color ids, hue families,
      tonal levels, display names, and style-materialization requests.
Returns: Re-exports of the stable entry points.
Example:
    run = PaletteRun.from_scene(nodes); run.generate_styles(ids, sink)
"""

from __future__ import annotations

from .errors import (
    EmptyInputError,
    InvalidColorIdError,
    PaletteError,
    UnresolvedSelectionWarning,
)
from .orchestrator import PaletteRun, create_styles, extract_palette
from .sources import iter_scene_samples, iter_solid_samples
from .styles import InMemoryStyleLibrary
from .types import ColorEntity, ColorSample, StyleSink

__all__ = [
    "PaletteRun",
    "extract_palette",
    "create_styles",
    "iter_scene_samples",
    "iter_solid_samples",
    "InMemoryStyleLibrary",
    "ColorSample",
    "ColorEntity",
    "StyleSink",
    "PaletteError",
    "EmptyInputError",
    "InvalidColorIdError",
    "UnresolvedSelectionWarning",
]

__docformat__ = "google"
