from __future__ import annotations

from .font import FontSpec, parse_font_string
from .metrics import GlyphMetricsEstimator, TextMeasurer, TextMetrics


DEFAULT_CANVAS_FONT = "10pt serif"
_MEASURE_DEFAULTS = FontSpec(family="serif")


class MeasurementContext:
    """Stand-in for a 2D drawing context that only answers `measure_text`."""

    def __init__(self, measurer: TextMeasurer | None = None) -> None:
        self._measurer = measurer or GlyphMetricsEstimator()
        self._font = DEFAULT_CANVAS_FONT
        self._spec = parse_font_string(self._font, defaults=_MEASURE_DEFAULTS)

    @property
    def font(self) -> str:
        return self._font

    @font.setter
    def font(self, css: str) -> None:
        self._spec = parse_font_string(css, defaults=_MEASURE_DEFAULTS)
        self._font = css

    @property
    def font_spec(self) -> FontSpec:
        return self._spec

    def measure_text(self, text: str) -> TextMetrics:
        return self._measurer.measure(text, self._spec)


class MeasurementCanvas:
    def __init__(self, measurer: TextMeasurer | None = None) -> None:
        self._context = MeasurementContext(measurer)

    def get_context(self, context_id: str) -> MeasurementContext | None:
        if context_id == "2d":
            return self._context
        return None


_shared_canvas: MeasurementCanvas | None = None


def initialize_text_measurement() -> MeasurementCanvas:
    """Create the shared measurement canvas once and return it.

    Layout code that expects a canvas for text measurement should be handed
    this object before the first drawing pass.
    """

    global _shared_canvas
    if _shared_canvas is None:
        _shared_canvas = MeasurementCanvas()
    return _shared_canvas


def get_text_measurement_canvas() -> MeasurementCanvas | None:
    return _shared_canvas


def is_text_measurement_initialized() -> bool:
    return _shared_canvas is not None


def reset_text_measurement() -> None:
    global _shared_canvas
    _shared_canvas = None
