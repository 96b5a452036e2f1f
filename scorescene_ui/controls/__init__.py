from .scene_renderer import (
    CAMEL_CASE_PROPS,
    SceneElement,
    SceneRenderer,
    build_scene_elements,
    render_scene,
    translate_props,
)

__all__ = [
    "CAMEL_CASE_PROPS",
    "SceneElement",
    "SceneRenderer",
    "build_scene_elements",
    "render_scene",
    "translate_props",
]
