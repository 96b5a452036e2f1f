"""Text, font and presentation contracts for scorescene."""

from .text import (
    DEFAULT_MUSIC_FONT,
    DEFAULT_TEXT_FONT,
    FontSelection,
    FontSpec,
    GlyphMetricsEstimator,
    MeasurementCanvas,
    TextMeasure,
    TextMeasurer,
    TextMetrics,
    available_music_fonts,
    available_text_fonts,
    initialize_text_measurement,
    parse_font_string,
)
from .controls import SceneElement, SceneRenderer, build_scene_elements, render_scene

__all__ = [
    "DEFAULT_MUSIC_FONT",
    "DEFAULT_TEXT_FONT",
    "FontSelection",
    "FontSpec",
    "GlyphMetricsEstimator",
    "MeasurementCanvas",
    "SceneElement",
    "SceneRenderer",
    "TextMeasure",
    "TextMeasurer",
    "TextMetrics",
    "available_music_fonts",
    "available_text_fonts",
    "build_scene_elements",
    "initialize_text_measurement",
    "parse_font_string",
    "render_scene",
]
