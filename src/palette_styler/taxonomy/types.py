# palette_styler/taxonomy/types.py
"""
types.py.

Does: Define the records flowing through the palette pipeline (samples,
      entities, payloads) and the structural Protocol for the style host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    List,
    Literal,
    NamedTuple,
    Optional,
    Protocol,
    Tuple,
    TypedDict,
    runtime_checkable,
)

from .errors import UnresolvedSelectionWarning

RGBFloat = Tuple[float, float, float]

__all__ = [
    "RGBFloat",
    "HSL",
    "ColorSample",
    "ColorEntity",
    "PaletteSettings",
    "SwatchPayload",
    "StyleRequest",
    "StyleReport",
    "StyleSink",
]


class HSL(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    l: float  # [0, 1]


@dataclass(frozen=True)
class ColorSample:
    """One solid paint observed during traversal.

    ``paint`` is the host's own paint object; it is never inspected here, only
    handed back when the color gets materialized as a style.
    """

    rgb: RGBFloat
    opacity: float = 1.0
    paint: Any = None


@dataclass
class ColorEntity:
    """One distinct canonical color within a run.

    ``level`` and ``name`` stay unset until the leveling stage attaches them.
    """

    color_id: str
    sample: ColorSample
    hsl: HSL
    family: str
    order: int
    level: Optional[int] = None
    name: Optional[str] = None

    @property
    def lightness(self) -> float:
        return self.hsl.l


class PaletteSettings(TypedDict):
    track_opacity: bool
    level_step: int
    hex_case: Literal["lower", "upper"]


class SwatchPayload(TypedDict):
    id: str
    hex: str
    full_hex: str
    name: str
    family: str
    level: int
    opacity_percent: int


class StyleRequest(TypedDict):
    name: str
    description: str
    paint: Any


class StyleReport(TypedDict):
    requested: int
    created: int
    styles: List[str]
    warnings: List[UnresolvedSelectionWarning]
    message: str


@runtime_checkable
class StyleSink(Protocol):
    """Host capability that persists one named paint style per request."""

    def create_paint_style(self, request: StyleRequest) -> Any: ...
