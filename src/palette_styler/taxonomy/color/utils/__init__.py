"""
utils package.
=============

Does: Color encoding helpers (quantization, hex ids, HSL) shared by the
      pipeline stages.
"""

from .color_codec import (
    alpha_suffix,
    canonical_id,
    normalize_color_id,
    parse_hex,
    quantize_channel,
    to_hex,
    to_hsl,
)

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
