# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Run the palette pipeline end to end for one invocation
      (dedup → classify → level → name/sort), expose the presentation
      payload, and issue style-materialization requests for a selection.
Returns:
  - PaletteRun(samples).swatches() -> [{id, hex, full_hex, name, family, level, opacity_percent}, ...]
  - PaletteRun(samples).generate_styles(ids, sink) -> {requested, created, styles, warnings, message}
  - extract_palette(samples) / create_styles(samples, ids, sink): one-shot helpers
Used by: The CLI and host-tool integrations.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from palette_styler.general.utils import debug
from palette_styler.taxonomy.color import STYLES_CREATED_MESSAGE
from palette_styler.taxonomy.color.logic.classification import HueTable, classify_colors
from palette_styler.taxonomy.color.logic.dedup import deduplicate
from palette_styler.taxonomy.color.logic.leveling import assign_levels
from palette_styler.taxonomy.color.logic.naming import attach_names, sort_entities
from palette_styler.taxonomy.color.utils import normalize_color_id, to_hex
from palette_styler.taxonomy.errors import (
    EmptyInputError,
    InvalidColorIdError,
    UnresolvedSelectionWarning,
)
from palette_styler.taxonomy.settings import get_settings
from palette_styler.taxonomy.sources import iter_scene_samples
from palette_styler.taxonomy.types import (
    ColorEntity,
    ColorSample,
    PaletteSettings,
    StyleReport,
    StyleRequest,
    StyleSink,
    SwatchPayload,
)

logger = logging.getLogger(__name__)

__all__ = [
    "PaletteRun",
    "extract_palette",
    "create_styles",
]


# =============================================================================
# Helpers
# =============================================================================


def _percent(opacity: float) -> int:
    return int(math.floor(opacity * 100 + 0.5))


def _swatch(entity: ColorEntity, upper: bool) -> SwatchPayload:
    full = entity.color_id.upper() if upper else entity.color_id
    return {
        "id": entity.color_id,
        "hex": "#" + to_hex(entity.sample.rgb, upper=upper),
        "full_hex": "#" + full,
        "name": entity.name or "",
        "family": entity.family,
        "level": entity.level or 0,
        "opacity_percent": _percent(entity.sample.opacity),
    }


def _style_request(entity: ColorEntity) -> StyleRequest:
    return {
        "name": entity.name or "",
        "description": "#" + entity.color_id.upper(),
        "paint": entity.sample.paint,
    }


# =============================================================================
# Pipeline run
# =============================================================================


class PaletteRun:
    """All state for one pass over a sample set.

    Built fresh per invocation; nothing here outlives the object. The
    constructor runs every stage, so a constructed run is fully named and
    ordered.
    """

    def __init__(
        self,
        samples: Iterable[ColorSample],
        *,
        settings: Optional[PaletteSettings] = None,
        hue_table: Optional[HueTable] = None,
    ) -> None:
        sample_list = list(samples)
        if not sample_list:
            raise EmptyInputError()

        self.settings: PaletteSettings = settings if settings is not None else get_settings()
        self.hue_table = hue_table
        self.sample_count = len(sample_list)

        self.color_map: Dict[str, ColorSample] = deduplicate(
            sample_list, track_opacity=self.settings["track_opacity"]
        )
        self.entities: Dict[str, ColorEntity] = self._build(self.color_map)
        self.ordered: List[ColorEntity] = sort_entities(self.entities.values())

        logger.info(
            "Palette run: %d samples → %d colors in %d families",
            self.sample_count,
            len(self.entities),
            len({e.family for e in self.ordered}),
        )

    @classmethod
    def from_scene(cls, nodes: Iterable[Any], **kwargs: Any) -> PaletteRun:
        """Build a run from host scene nodes (see `sources.iter_scene_samples`)."""
        return cls(iter_scene_samples(nodes), **kwargs)

    def _build(self, color_map: Dict[str, ColorSample]) -> Dict[str, ColorEntity]:
        entities = classify_colors(color_map, table=self.hue_table)
        assign_levels(entities.values(), step=self.settings["level_step"])
        attach_names(entities.values())
        return entities

    # ── Presentation ─────────────────────────────────────────────────────────
    def names(self) -> List[str]:
        return [e.name or "" for e in self.ordered]

    def swatches(self) -> List[SwatchPayload]:
        upper = self.settings["hex_case"] == "upper"
        return [_swatch(e, upper) for e in self.ordered]

    # ── Selection & materialization ──────────────────────────────────────────
    def resolve(
        self, selected_ids: Iterable[str]
    ) -> Tuple[List[str], List[UnresolvedSelectionWarning]]:
        """
        Normalize selected ids and split them into known ids (first occurrence
        kept) and warnings for ids this run does not contain.
        """
        known: List[str] = []
        warnings: List[UnresolvedSelectionWarning] = []
        for raw in selected_ids:
            try:
                cid = normalize_color_id(raw)
            except InvalidColorIdError:
                cid = str(raw)
            if cid not in self.entities:
                warnings.append(UnresolvedSelectionWarning(cid))
                debug(f"selection {raw!r} not in palette; skipped", topic="styles")
                continue
            if cid not in known:
                known.append(cid)
        return known, warnings

    def style_requests(
        self, selected_ids: Iterable[str], *, relevel: bool = False
    ) -> Tuple[List[StyleRequest], List[UnresolvedSelectionWarning]]:
        """
        Build one request per resolved selection, in final sort order.

        With ``relevel`` the selected colors are leveled among themselves only
        (a family with one selected color gets level 100 again); otherwise
        they keep the names shown in the presentation payload.
        """
        known, warnings = self.resolve(selected_ids)
        wanted = set(known)
        if relevel:
            subset = {cid: s for cid, s in self.color_map.items() if cid in wanted}
            chosen = sort_entities(self._build(subset).values())
        else:
            chosen = [e for e in self.ordered if e.color_id in wanted]
        return [_style_request(e) for e in chosen], warnings

    def generate_styles(
        self,
        selected_ids: Iterable[str],
        sink: StyleSink,
        *,
        relevel: bool = False,
    ) -> StyleReport:
        """
        Issue `create_paint_style` on ``sink`` for each resolved selection.

        A request the host rejects is logged and left out of ``created``; the
        remaining requests still go out. Nothing is rolled back.
        """
        requests, warnings = self.style_requests(selected_ids, relevel=relevel)
        styles: List[str] = []
        for request in requests:
            try:
                sink.create_paint_style(request)
            except Exception as e:  # host-side failure: count it, keep going
                logger.warning("Style %r was not created: %s", request["name"], e)
                continue
            styles.append(request["name"])

        message = STYLES_CREATED_MESSAGE.format(count=len(styles))
        logger.info(
            "%s (%d requested, %d unresolved)", message, len(requests), len(warnings)
        )
        return {
            "requested": len(requests),
            "created": len(styles),
            "styles": styles,
            "warnings": warnings,
            "message": message,
        }


# =============================================================================
# Public one-shot APIs
# =============================================================================


def extract_palette(
    samples: Iterable[ColorSample],
    *,
    settings: Optional[PaletteSettings] = None,
) -> List[SwatchPayload]:
    """Presentation payload for ``samples``; raises EmptyInputError when empty."""
    return PaletteRun(samples, settings=settings).swatches()


def create_styles(
    samples: Iterable[ColorSample],
    selected_ids: Iterable[str],
    sink: StyleSink,
    *,
    settings: Optional[PaletteSettings] = None,
    relevel: bool = False,
) -> StyleReport:
    """Run the pipeline and materialize ``selected_ids`` on ``sink``."""
    run = PaletteRun(samples, settings=settings)
    return run.generate_styles(selected_ids, sink, relevel=relevel)
