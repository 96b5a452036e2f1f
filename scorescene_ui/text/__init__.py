"""Font descriptions and glyph-aware text measurement."""

from .catalog import (
    DEFAULT_MUSIC_FONT,
    DEFAULT_TEXT_FONT,
    MUSIC_FONTS,
    TEXT_FONTS,
    FontSelection,
    available_music_fonts,
    available_text_fonts,
)
from .font import (
    FontDescription,
    FontFields,
    FontShorthand,
    FontSpec,
    describe_font,
    normalize_font,
    parse_font_size_px,
    parse_font_string,
)
from .metrics import (
    FAMILY_METRICS,
    FamilyMetrics,
    GlyphMetricsEstimator,
    TextMeasure,
    TextMeasurer,
    TextMetrics,
    text_box,
)
from .canvas import (
    MeasurementCanvas,
    MeasurementContext,
    get_text_measurement_canvas,
    initialize_text_measurement,
    is_text_measurement_initialized,
    reset_text_measurement,
)

__all__ = [
    "DEFAULT_MUSIC_FONT",
    "DEFAULT_TEXT_FONT",
    "FAMILY_METRICS",
    "FamilyMetrics",
    "FontDescription",
    "FontFields",
    "FontSelection",
    "FontShorthand",
    "FontSpec",
    "GlyphMetricsEstimator",
    "MUSIC_FONTS",
    "MeasurementCanvas",
    "MeasurementContext",
    "TEXT_FONTS",
    "TextMeasure",
    "TextMeasurer",
    "TextMetrics",
    "available_music_fonts",
    "available_text_fonts",
    "describe_font",
    "get_text_measurement_canvas",
    "initialize_text_measurement",
    "is_text_measurement_initialized",
    "normalize_font",
    "parse_font_size_px",
    "parse_font_string",
    "reset_text_measurement",
    "text_box",
]
