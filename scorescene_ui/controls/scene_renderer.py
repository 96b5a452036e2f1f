from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Protocol

from scorescene_core.render.scene import AttrValue, NodeKind, SceneNode

if TYPE_CHECKING:
    from scorescene_core.core.context import SceneRenderContext


StyleOverrides = Mapping[str, Mapping[str, AttrValue]]

CAMEL_CASE_PROPS: Mapping[str, str] = {
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-weight": "fontWeight",
    "font-style": "fontStyle",
    "stroke-width": "strokeWidth",
    "stroke-dasharray": "strokeDasharray",
    "stroke-linecap": "strokeLinecap",
    "pointer-events": "pointerEvents",
    "class": "className",
}


@dataclass(frozen=True)
class SceneElement:
    """Renderer-facing view of one scene node.

    `props` already use the renderer's naming convention and include any style
    overrides. `interactive` is set for nodes carrying an id or category so a
    host can attach press handlers to them.
    """

    kind: NodeKind
    key: int
    props: Mapping[str, AttrValue]
    children: tuple["SceneElement", ...] = ()
    text: str | None = None
    node_id: str | None = None
    category: str | None = None

    @property
    def interactive(self) -> bool:
        return bool(self.node_id or self.category)


class SceneRenderer(Protocol):
    """Backend that paints a finished scene in one call."""

    def draw_scene(self, element: SceneElement) -> None:
        ...


def translate_props(
    attributes: Mapping[str, AttrValue],
    prop_names: Mapping[str, str] = CAMEL_CASE_PROPS,
) -> dict[str, AttrValue]:
    return {prop_names.get(name, name): value for name, value in attributes.items()}


def build_scene_elements(
    node: SceneNode,
    *,
    element_styles: StyleOverrides | None = None,
    class_styles: StyleOverrides | None = None,
    prop_names: Mapping[str, str] = CAMEL_CASE_PROPS,
) -> SceneElement:
    """Convert a scene tree into SceneElements.

    Category styles apply first and id styles last, so an id override wins.
    Both are keyed by the namespaced label stored on the node.
    """

    attributes: dict[str, AttrValue] = dict(node.attributes)
    if class_styles and node.category and node.category in class_styles:
        attributes.update(class_styles[node.category])
    if element_styles and node.node_id and node.node_id in element_styles:
        attributes.update(element_styles[node.node_id])
    children = tuple(
        build_scene_elements(
            child,
            element_styles=element_styles,
            class_styles=class_styles,
            prop_names=prop_names,
        )
        for child in node.children
    )
    return SceneElement(
        kind=node.kind,
        key=node.key,
        props=translate_props(attributes, prop_names),
        children=children,
        text=node.text,
        node_id=node.node_id,
        category=node.category,
    )


def render_scene(
    context: "SceneRenderContext",
    renderer: SceneRenderer,
    *,
    element_styles: StyleOverrides | None = None,
    class_styles: StyleOverrides | None = None,
    prop_names: Mapping[str, str] = CAMEL_CASE_PROPS,
) -> SceneElement:
    element = build_scene_elements(
        context.root,
        element_styles=element_styles,
        class_styles=class_styles,
        prop_names=prop_names,
    )
    renderer.draw_scene(element)
    return element
