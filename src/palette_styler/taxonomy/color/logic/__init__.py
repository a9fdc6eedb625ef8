"""
logic
=====

Namespace for the pipeline stages: dedup → classification → leveling → naming.
- No eager imports: stages load on first attribute access (PEP 562).
- TYPE_CHECKING imports keep IDEs/static analyzers aware of the symbols.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .classification.hue_families import classify, classify_colors
    from .dedup import deduplicate
    from .leveling import assign_levels
    from .naming import attach_names, display_name, name_key, sort_entities, sort_names

_EXPORTS = {
    "deduplicate": ".dedup",
    "classify": ".classification.hue_families",
    "classify_colors": ".classification.hue_families",
    "assign_levels": ".leveling",
    "attach_names": ".naming",
    "display_name": ".naming",
    "name_key": ".naming",
    "sort_entities": ".naming",
    "sort_names": ".naming",
}


def __getattr__(name: str):
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(name)
    return getattr(import_module(module, __name__), name)


__all__ = list(_EXPORTS)

__docformat__ = "google"
