"""
styles.py.

Does: Reference StyleSink that keeps materialized styles in memory, in the
      order they were issued. Stands in for the host style library in the CLI
      and in tests.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from palette_styler.taxonomy.types import StyleRequest

__all__ = ["InMemoryStyleLibrary"]

logger = logging.getLogger(__name__)


class InMemoryStyleLibrary:
    """Append-only list of created paint styles."""

    def __init__(self) -> None:
        self.styles: List[StyleRequest] = []

    def create_paint_style(self, request: StyleRequest) -> StyleRequest:
        style: StyleRequest = {
            "name": request["name"],
            "description": request["description"],
            "paint": request["paint"],
        }
        self.styles.append(style)
        logger.debug("Style created: %s (%s)", style["name"], style["description"])
        return style

    def names(self) -> List[str]:
        return [s["name"] for s in self.styles]

    def as_records(self) -> List[Dict[str, str]]:
        """Name/description pairs, JSON-ready (paints are host objects)."""
        return [{"name": s["name"], "description": s["description"]} for s in self.styles]

    def __len__(self) -> int:
        return len(self.styles)
