from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from .font import FontSpec
from .glyph_widths import GLYPH_ADVANCE_WIDTHS


SYMBOL_RANGE_START = 0xE000
SYMBOL_RANGE_END = 0xF8FF
STAFF_SPACES_PER_EM = 4.0
UNKNOWN_SYMBOL_WIDTH_RATIO = 0.25


@dataclass(frozen=True)
class FamilyMetrics:
    avg_char_width: float
    ascent: float
    descent: float
    symbolic: bool = False


FAMILY_METRICS: Mapping[str, FamilyMetrics] = {
    "bravura": FamilyMetrics(0.25, 0.8, 0.2, symbolic=True),
    "petaluma": FamilyMetrics(0.25, 0.8, 0.2, symbolic=True),
    "gonville": FamilyMetrics(0.25, 0.8, 0.2, symbolic=True),
    "leland": FamilyMetrics(0.25, 0.8, 0.2, symbolic=True),
    "academico": FamilyMetrics(0.55, 0.8, 0.2),
    "arial": FamilyMetrics(0.52, 0.76, 0.24),
    "times new roman": FamilyMetrics(0.48, 0.78, 0.22),
    "serif": FamilyMetrics(0.5, 0.78, 0.22),
    "sans-serif": FamilyMetrics(0.52, 0.76, 0.24),
}
DEFAULT_FAMILY_METRICS = FamilyMetrics(0.55, 0.8, 0.2)


@dataclass(frozen=True)
class TextMetrics:
    """Canvas-style text metrics; all distances in pixels from the baseline."""

    width: float = 0.0
    actual_bounding_box_left: float = 0.0
    actual_bounding_box_right: float = 0.0
    actual_bounding_box_ascent: float = 0.0
    actual_bounding_box_descent: float = 0.0
    font_bounding_box_ascent: float = 0.0
    font_bounding_box_descent: float = 0.0
    alphabetic_baseline: float = 0.0
    em_height_ascent: float = 0.0
    em_height_descent: float = 0.0


@dataclass(frozen=True)
class TextMeasure:
    """Bounding rectangle relative to the text origin on the baseline."""

    x: float
    y: float
    width: float
    height: float


class TextMeasurer(Protocol):
    def measure(self, text: str, font: FontSpec) -> TextMetrics:
        ...


def family_key(family: str) -> str:
    return family.lower().split(",")[0].strip().strip("\"'")


def text_box(metrics: TextMetrics) -> TextMeasure:
    return TextMeasure(
        x=0.0,
        y=-metrics.font_bounding_box_ascent,
        width=metrics.width,
        height=metrics.font_bounding_box_ascent + metrics.font_bounding_box_descent,
    )


def is_symbol_char(char: str) -> bool:
    return SYMBOL_RANGE_START <= ord(char) <= SYMBOL_RANGE_END


def symbol_advance_px(char: str, size_px: float) -> float:
    advance = GLYPH_ADVANCE_WIDTHS.get(ord(char))
    if advance is None:
        return UNKNOWN_SYMBOL_WIDTH_RATIO * size_px
    return advance * (size_px / STAFF_SPACES_PER_EM)


class GlyphMetricsEstimator:
    """Approximate text metrics without a font rasterizer.

    Symbolic fonts whose text opens with a private-use glyph are measured per
    glyph from the advance-width table; everything else is character count
    times the family's average width. The result only has to be consistent for
    layout decisions, not pixel exact.
    """

    def __init__(
        self,
        families: Mapping[str, FamilyMetrics] | None = None,
        fallback: FamilyMetrics = DEFAULT_FAMILY_METRICS,
    ) -> None:
        self._families = dict(FAMILY_METRICS if families is None else families)
        self._fallback = fallback

    def family_metrics(self, family: str) -> FamilyMetrics:
        return self._families.get(family_key(family), self._fallback)

    def measure(self, text: str, font: FontSpec) -> TextMetrics:
        if not text:
            return TextMetrics()
        size_px = font.size_px
        metrics = self.family_metrics(font.family)
        if metrics.symbolic and is_symbol_char(text[0]):
            width = self._measure_symbols(text, size_px)
        else:
            width = len(text) * size_px * metrics.avg_char_width
        ascent = size_px * metrics.ascent
        descent = size_px * metrics.descent
        return TextMetrics(
            width=width,
            actual_bounding_box_left=0.0,
            actual_bounding_box_right=width,
            actual_bounding_box_ascent=ascent,
            actual_bounding_box_descent=descent,
            font_bounding_box_ascent=ascent,
            font_bounding_box_descent=descent,
            alphabetic_baseline=0.0,
            em_height_ascent=ascent,
            em_height_descent=descent,
        )

    def _measure_symbols(self, text: str, size_px: float) -> float:
        total = 0.0
        for char in text:
            if is_symbol_char(char):
                total += symbol_advance_px(char, size_px)
            else:
                total += self._fallback.avg_char_width * size_px
        return total
