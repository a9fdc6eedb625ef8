"""
color_codec.py
==============

Does: Quantize float RGB/opacity to 8-bit, encode hex strings and canonical
      color ids, parse them back, and derive HSL.
Used By: Sample deduplication, hue classification, presentation payloads.
Returns: Hex strings (no leading '#'), 8-bit channel tuples, HSL triples.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence, Tuple

import webcolors

from palette_styler.taxonomy.errors import InvalidColorIdError
from palette_styler.taxonomy.types import HSL

# Public surface
__all__ = [
    "quantize_channel",
    "to_hex",
    "alpha_suffix",
    "canonical_id",
    "normalize_color_id",
    "parse_hex",
    "to_hsl",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_COLOR_ID_RE = re.compile(r"^[0-9a-f]{6}(?:[0-9a-f]{2})?$")


# =============================================================================
# 1) QUANTIZATION & HEX
# =============================================================================

def quantize_channel(value: float) -> int:
    """Does: Map a [0,1] channel to 0..255, rounding half up and clamping.

    Half steps round up (0.5 → 128), not to even. Values past either end
    (e.g. 1.0000001) clamp to 0 or 255.
    """
    if math.isnan(value):
        raise ValueError("Channel value is NaN")
    return min(255, max(0, int(math.floor(value * 255 + 0.5))))


def to_hex(rgb: Sequence[float], *, upper: bool = False) -> str:
    """Does: Encode a float RGB triple as 6 hex digits (no '#')."""
    r, g, b = rgb
    hx = webcolors.rgb_to_hex(
        (quantize_channel(r), quantize_channel(g), quantize_channel(b))
    )[1:]
    return hx.upper() if upper else hx


def alpha_suffix(opacity: float) -> str:
    """Does: Encode opacity as the 2-digit alpha byte of an 8-digit hex."""
    return f"{quantize_channel(opacity):02x}"


def canonical_id(
    rgb: Sequence[float], opacity: float = 1.0, *, track_opacity: bool = True
) -> str:
    """Does: Build the lowercase deduplication key (RRGGBB or RRGGBBAA)."""
    cid = to_hex(rgb)
    if track_opacity:
        cid += alpha_suffix(opacity)
    return cid


# =============================================================================
# 2) PARSING
# =============================================================================

def normalize_color_id(text: str) -> str:
    """Does: Lowercase and strip '#' from a user-supplied id; validate its shape."""
    if not isinstance(text, str):
        raise InvalidColorIdError(f"Color id must be a string, got {type(text).__name__}")
    cid = text.strip().lstrip("#").lower()
    if not _COLOR_ID_RE.match(cid):
        raise InvalidColorIdError(f"Not a 6- or 8-digit hex color id: {text!r}")
    return cid


def parse_hex(text: str) -> Tuple[int, ...]:
    """Does: Parse an id back into 8-bit channels.

    Returns: (r, g, b) for 6 digits, (r, g, b, a) for 8 digits.
    """
    cid = normalize_color_id(text)
    channels: Tuple[int, ...] = tuple(webcolors.hex_to_rgb(f"#{cid[:6]}"))
    if len(cid) == 8:
        channels += (int(cid[6:], 16),)
    return channels


# =============================================================================
# 3) HSL
# =============================================================================

def to_hsl(r: float, g: float, b: float) -> HSL:
    """Does: Convert float RGB to HSL with the max/min-channel algorithm.

    Achromatic inputs (max == min) get hue 0 and saturation 0. Hue ties
    between channels resolve in r, g, b order.
    """
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2
    if mx == mn:
        return HSL(0.0, 0.0, l)

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h *= 60
    if h < 0:
        h += 360
    if h >= 360:  # float residue from the +6 wrap
        h -= 360
    return HSL(h, s, l)
