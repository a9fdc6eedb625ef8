"""
sources.py
==========

Does: Turn host scene nodes and paint arrays into an ordered stream of solid
      ColorSamples for the pipeline. Nodes and paints may be plain mappings
      (JSON exports) or attribute objects (host API proxies).
Returns:
  - iter_solid_samples(paints) -> Iterator[ColorSample]
  - iter_scene_samples(nodes)  -> Iterator[ColorSample]
Used by: The CLI and host integrations that feed PaletteRun.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional

from palette_styler.general.utils import debug
from palette_styler.taxonomy.color import DEFAULT_OPACITY, PAINT_ARRAYS, SOLID_PAINT
from palette_styler.taxonomy.types import ColorSample

logger = logging.getLogger(__name__)

__all__ = ["iter_solid_samples", "iter_scene_samples", "sample_from_paint"]


# =============================================================================
# Helpers
# =============================================================================


def _field(obj: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping or an attribute object."""
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def _paint_array(node: Any, key: str) -> List[Any]:
    # hosts report mixed/unset paints with a sentinel instead of a list
    value = _field(node, key)
    return list(value) if isinstance(value, (list, tuple)) else []


def sample_from_paint(paint: Any) -> Optional[ColorSample]:
    """Build a sample from a SOLID paint; any other kind gives None."""
    if _field(paint, "type") != SOLID_PAINT:
        return None
    color = _field(paint, "color")
    if color is None:
        return None
    rgb = (
        float(_field(color, "r", 0.0)),
        float(_field(color, "g", 0.0)),
        float(_field(color, "b", 0.0)),
    )
    opacity = _field(paint, "opacity")
    return ColorSample(
        rgb=rgb,
        opacity=DEFAULT_OPACITY if opacity is None else float(opacity),
        paint=paint,
    )


def _is_skipped(node: Any) -> bool:
    return _field(node, "visible", True) is False or _field(node, "locked", False) is True


# =============================================================================
# Public APIs
# =============================================================================


def iter_solid_samples(paints: Iterable[Any]) -> Iterator[ColorSample]:
    """Yield samples for SOLID paints in order; gradients/images are dropped quietly."""
    for paint in paints:
        sample = sample_from_paint(paint)
        if sample is not None:
            yield sample


def iter_scene_samples(nodes: Iterable[Any]) -> Iterator[ColorSample]:
    """Walk node trees depth-first and yield their solid paint samples.

    Parents come before children and earlier siblings before later ones. A
    hidden (``visible`` False) or locked node is skipped along with its whole
    subtree. Each node contributes its ``fills`` then its ``strokes``.
    """
    stack: List[Any] = list(reversed(list(nodes)))
    visited = skipped = 0
    while stack:
        node = stack.pop()
        if _is_skipped(node):
            skipped += 1
            debug(f"skip node {_field(node, 'name', '?')!r}", topic="sources")
            continue
        visited += 1
        for key in PAINT_ARRAYS:
            yield from iter_solid_samples(_paint_array(node, key))
        children = _field(node, "children")
        if isinstance(children, (list, tuple)):
            stack.extend(reversed(children))

    logger.debug("Scene walk: %d nodes visited, %d subtrees skipped", visited, skipped)
