"""Scene-graph drawing context for notation layout engines."""

from .render.path import PathBuilder, Pen, format_number, normalize_angle, round_to_precision
from .render.scene import DEFAULT_LABEL_PREFIX, SceneNode, SceneRegistry, namespaced, next_node_key
from .core.config import ContextConfig, apply_env_overrides, load_context_config
from .core.context import SceneRenderContext
from .core.state import GroupStackError, PaintState

__all__ = [
    "ContextConfig",
    "DEFAULT_LABEL_PREFIX",
    "GroupStackError",
    "PaintState",
    "PathBuilder",
    "Pen",
    "SceneNode",
    "SceneRegistry",
    "SceneRenderContext",
    "apply_env_overrides",
    "format_number",
    "load_context_config",
    "namespaced",
    "next_node_key",
    "normalize_angle",
    "round_to_precision",
]
