"""
errors.py.

Does: Domain exceptions and warnings raised/recorded by the palette pipeline.
Used by: orchestrator, codec, CLI.
"""

from __future__ import annotations

from .color.constants import EMPTY_SELECTION_MESSAGE

__all__ = [
    "PaletteError",
    "EmptyInputError",
    "InvalidColorIdError",
    "UnresolvedSelectionWarning",
]


class PaletteError(ValueError):
    """Base class for palette pipeline failures."""


class EmptyInputError(PaletteError):
    """No samples were supplied; the run is aborted before any stage runs."""

    def __init__(self, message: str = EMPTY_SELECTION_MESSAGE):
        super().__init__(message)


class InvalidColorIdError(PaletteError):
    """A string is not a 6- or 8-digit hex color id."""


class UnresolvedSelectionWarning(UserWarning):
    """A selected color id is not part of the current run; the entry was skipped."""

    def __init__(self, color_id: str):
        super().__init__(f"Color id {color_id!r} is not in this palette; skipped.")
        self.color_id = color_id
