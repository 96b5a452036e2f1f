from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from scorescene_core.render.path import PathBuilder, Pen, format_number, round_to_precision
from scorescene_core.render.scene import AttrValue, SceneNode, SceneRegistry, namespaced
from scorescene_ui.text.font import FontSpec, describe_font, normalize_font
from scorescene_ui.text.metrics import GlyphMetricsEstimator, TextMeasure, TextMeasurer, text_box

from .config import ContextConfig
from .state import GroupStack, PaintState, PaintStateStack, elide_inherited


LOGGER = logging.getLogger(__name__)


class SceneRenderContext:
    """Immediate-mode drawing context that records a persistent scene tree.

    Every drawing call either changes paint state, extends the pending path,
    or appends a finished node under the innermost open group. The tree and
    its id/category registry are read by a presentation layer once a drawing
    pass is done. Not thread-safe; one context per drawing surface.
    """

    def __init__(
        self,
        width: float | None = None,
        height: float | None = None,
        *,
        config: ContextConfig | None = None,
        measurer: TextMeasurer | None = None,
    ) -> None:
        self._config = config or ContextConfig()
        self._width = self._config.width if width is None else width
        self._height = self._config.height if height is None else height
        self._places = self._config.precision_places
        self._label_prefix = self._config.label_prefix
        self._background_fill = self._config.background_fill
        self._measurer = measurer or GlyphMetricsEstimator()

        self._default_font = FontSpec(family=self._config.font_family, size=self._config.font_size)
        attributes: dict[str, AttrValue] = {
            "stroke-width": 1.0,
            "stroke-dasharray": "none",
            "fill": "black",
            "stroke": "black",
            **self._default_font.as_attributes(),
        }
        self._state = PaintState(attributes=attributes, font=self._default_font)
        self._saved = PaintStateStack()
        self._path = PathBuilder(self._places)

        self._root_effective = dict(attributes)
        self._root = SceneNode(
            "svg",
            attributes={
                "width": self._width,
                "height": self._height,
                "pointer-events": "box-none",
                **self._root_effective,
            },
        )
        self._groups = GroupStack(self._root, self._root_effective)
        self._registry = SceneRegistry()

    # -- surface ---------------------------------------------------------

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def root(self) -> SceneNode:
        return self._root

    @property
    def view_box(self) -> str | None:
        value = self._root.attributes.get("viewBox")
        return None if value is None else str(value)

    def set_view_box(self, x: float, y: float, width: float, height: float) -> None:
        self._root.attributes["viewBox"] = " ".join(format_number(v) for v in (x, y, width, height))

    def scale(self, x: float, y: float) -> "SceneRenderContext":
        self._state.scale_x *= x
        self._state.scale_y *= y
        self._update_view_box()
        return self

    def resize(self, width: float, height: float) -> "SceneRenderContext":
        self._width = width
        self._height = height
        self._root.attributes["width"] = width
        self._root.attributes["height"] = height
        if "viewBox" in self._root.attributes:
            self._update_view_box()
        return self

    def clear(self) -> None:
        if self._root.children:
            LOGGER.debug("clearing scene tree with %d top-level nodes", len(self._root.children))
        self._root.children.clear()
        self._registry.clear()
        self._path.reset()
        self._groups.reset(self._root, self._root_effective)

    # -- registry --------------------------------------------------------

    @property
    def registry(self) -> SceneRegistry:
        return self._registry

    @property
    def element_registry(self) -> Mapping[str, SceneNode]:
        return self._registry.by_id

    def get_element_by_id(self, node_id: str) -> SceneNode | None:
        return self._registry.get(namespaced(node_id, self._label_prefix))

    def get_elements_by_class_name(self, category: str) -> list[SceneNode]:
        return self._registry.category(namespaced(category, self._label_prefix))

    # -- paint state -----------------------------------------------------

    @property
    def paint_state(self) -> PaintState:
        return self._state.copy()

    @property
    def fill_style(self) -> str:
        return str(self._state.attributes["fill"])

    @fill_style.setter
    def fill_style(self, style: str) -> None:
        self.set_fill_style(style)

    @property
    def stroke_style(self) -> str:
        return str(self._state.attributes["stroke"])

    @stroke_style.setter
    def stroke_style(self, style: str) -> None:
        self.set_stroke_style(style)

    def set_fill_style(self, style: str) -> "SceneRenderContext":
        self._state.attributes["fill"] = style
        return self

    def set_background_fill_style(self, style: str) -> "SceneRenderContext":
        self._background_fill = style
        return self

    def set_stroke_style(self, style: str) -> "SceneRenderContext":
        self._state.attributes["stroke"] = style
        return self

    def set_line_width(self, width: float) -> "SceneRenderContext":
        self._state.attributes["stroke-width"] = width
        return self

    def set_line_cap(self, cap: str) -> "SceneRenderContext":
        self._state.attributes["stroke-linecap"] = cap
        return self

    def set_line_dash(self, dash: Sequence[float]) -> "SceneRenderContext":
        if isinstance(dash, (list, tuple)):
            self._state.attributes["stroke-dasharray"] = ",".join(format_number(v) for v in dash) or "none"
        return self

    def set_shadow_color(self, color: str) -> "SceneRenderContext":
        LOGGER.debug("shadow color %r ignored; shadows are not represented in the scene", color)
        return self

    def set_shadow_blur(self, blur: float) -> "SceneRenderContext":
        LOGGER.debug("shadow blur %r ignored; shadows are not represented in the scene", blur)
        return self

    def set_font(
        self,
        font: str | FontSpec | Mapping[str, object] | None = None,
        size: str | int | float | None = None,
        weight: str | int | None = None,
        style: str | None = None,
    ) -> "SceneRenderContext":
        spec = normalize_font(describe_font(font, size, weight, style), defaults=self._default_font)
        self._state.font = spec
        self._state.attributes.update(spec.as_attributes())
        return self

    def get_font(self) -> str:
        return self._state.font.to_css()

    def save(self) -> "SceneRenderContext":
        self._saved.push(self._state)
        return self

    def restore(self) -> "SceneRenderContext":
        saved = self._saved.pop()
        if saved is not None:
            self._state = saved
        return self

    # -- rectangles and text ----------------------------------------------

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        attributes: Mapping[str, AttrValue] | None = None,
    ) -> "SceneRenderContext":
        if height < 0:
            y += height
            height = -height
        merged: dict[str, AttrValue] = {
            "fill": "none",
            "stroke-width": self._state.attributes["stroke-width"],
            "stroke": "black",
            **(attributes or {}),
        }
        node = SceneNode(
            "rect",
            attributes={
                "x": self._round(x),
                "y": self._round(y),
                "width": self._round(width),
                "height": self._round(height),
            },
        )
        node.attributes.update(elide_inherited("rect", merged, self._groups.effective))
        self._append(node)
        return self

    def fill_rect(self, x: float, y: float, width: float, height: float) -> "SceneRenderContext":
        return self.rect(x, y, width, height, {"fill": self._state.attributes["fill"], "stroke": "none"})

    def clear_rect(self, x: float, y: float, width: float, height: float) -> "SceneRenderContext":
        return self.rect(x, y, width, height, {"fill": self._background_fill, "stroke": "none"})

    def pointer_rect(self, x: float, y: float, width: float, height: float) -> "SceneRenderContext":
        """Invisible rectangle that still receives pointer input."""

        return self.rect(x, y, width, height, {"opacity": 0, "pointer-events": "auto"})

    def fill_text(self, text: str, x: float, y: float) -> "SceneRenderContext":
        if not text:
            return self
        node = SceneNode("text", attributes={"x": self._round(x), "y": self._round(y)}, text=text)
        attributes = {**self._state.attributes, "stroke": "none"}
        node.attributes.update(elide_inherited("text", attributes, self._groups.effective))
        self._append(node)
        return self

    def measure_text(self, text: str) -> TextMeasure:
        return text_box(self._measurer.measure(text, self._state.font))

    # -- paths -----------------------------------------------------------

    @property
    def pen(self) -> Pen:
        return self._path.pen

    @property
    def path_data(self) -> str:
        return self._path.d

    def begin_path(self) -> "SceneRenderContext":
        self._path.reset()
        return self

    def move_to(self, x: float, y: float) -> "SceneRenderContext":
        self._path.move_to(x, y)
        return self

    def line_to(self, x: float, y: float) -> "SceneRenderContext":
        self._path.line_to(x, y)
        return self

    def bezier_curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> "SceneRenderContext":
        self._path.bezier_curve_to(x1, y1, x2, y2, x, y)
        return self

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> "SceneRenderContext":
        self._path.quadratic_curve_to(x1, y1, x, y)
        return self

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> "SceneRenderContext":
        self._path.arc(x, y, radius, start_angle, end_angle, counterclockwise)
        return self

    def close_path(self) -> "SceneRenderContext":
        self._path.close_path()
        return self

    def fill(self, attributes: Mapping[str, AttrValue] | None = None) -> "SceneRenderContext":
        """Append the pending path as a filled node; the path itself is kept."""

        if attributes is None:
            merged = {**self._state.attributes, "stroke": "none"}
        else:
            merged = dict(attributes)
        return self._append_path(merged)

    def stroke(self, attributes: Mapping[str, AttrValue] | None = None) -> "SceneRenderContext":
        if attributes is None:
            merged = {**self._state.attributes, "fill": "none"}
        else:
            merged = dict(attributes)
        return self._append_path(merged)

    # -- groups ----------------------------------------------------------

    def open_group(self, category: str | None = None, node_id: str | None = None) -> SceneNode:
        group = SceneNode("g")
        if category:
            group.category = namespaced(category, self._label_prefix)
            group.attributes["class"] = group.category
        if node_id:
            group.node_id = namespaced(node_id, self._label_prefix)
            group.attributes["id"] = group.node_id
        group.attributes.update(elide_inherited("g", self._state.attributes, self._groups.effective))
        self._groups.push(group, self._state.attributes)
        self._registry.register(group)
        return group

    def close_group(self) -> None:
        self._groups.pop()

    def open_rotation(self, angle_degrees: float, x: float, y: float) -> SceneNode:
        group = self.open_group()
        group.attributes["transform"] = (
            f"translate({format_number(x)},{format_number(y)}) "
            f"rotate({format_number(angle_degrees)}) "
            f"translate({format_number(-x)},{format_number(-y)})"
        )
        return group

    def close_rotation(self) -> None:
        self.close_group()

    def add(self, node: SceneNode) -> None:
        """Append a prebuilt subtree under the current group as-is."""

        self._groups.current.children.append(node)
        for descendant in node.walk():
            self._registry.register(descendant)

    # -- internals -------------------------------------------------------

    def _append_path(self, attributes: dict[str, AttrValue]) -> "SceneRenderContext":
        attributes["d"] = self._path.d
        node = SceneNode("path", attributes=elide_inherited("path", attributes, self._groups.effective))
        self._append(node)
        return self

    def _append(self, node: SceneNode) -> None:
        self._groups.current.children.append(node)
        self._registry.register(node)

    def _update_view_box(self) -> None:
        self.set_view_box(
            0,
            0,
            _divide(self._width, self._state.scale_x),
            _divide(self._height, self._state.scale_y),
        )

    def _round(self, value: float) -> float:
        return round_to_precision(value, self._places)


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
