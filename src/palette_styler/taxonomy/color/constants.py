# constants.py
# ============

"""
constants.
=========

Does: Define the fixed vocabulary of the palette taxonomy (family names, paint
      kinds, naming separator, level step, user-facing messages).
Used By: Codec, classifier, leveler, naming engine, orchestrator, CLI.
Returns: Pure data only (no side effects).
"""

# ── 1) Hue families ──────────────────────────────────────────────────────────
NEUTRAL = "Neutral"
OTHER = "Other"

# Chromatic families in hue-circle order (the bundled hue table follows it)
CHROMATIC_FAMILIES: tuple[str, ...] = (
    "Red",
    "Orange",
    "Yellow",
    "Green",
    "Blue",
    "Purple",
    "Pink",
)
FAMILY_NAMES = frozenset({NEUTRAL, OTHER, *CHROMATIC_FAMILIES})

NEUTRAL_MAX_SATURATION = 0.10


# ── 2) Paints ────────────────────────────────────────────────────────────────
SOLID_PAINT = "SOLID"
PAINT_ARRAYS: tuple[str, ...] = ("fills", "strokes")
DEFAULT_OPACITY = 1.0


# ── 3) Levels & names ────────────────────────────────────────────────────────
DEFAULT_LEVEL_STEP = 100
NAME_SEPARATOR = " / "


# ── 4) Messages ──────────────────────────────────────────────────────────────
EMPTY_SELECTION_MESSAGE = "Please select at least one frame or group."
STYLES_CREATED_MESSAGE = "{count} color styles created!"
