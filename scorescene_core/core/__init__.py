from .config import ContextConfig, apply_env_overrides, config_from_mapping, load_context_config
from .context import SceneRenderContext
from .state import (
    GroupFrame,
    GroupStack,
    GroupStackError,
    IGNORED_ATTRIBUTES,
    PaintState,
    PaintStateStack,
    elide_inherited,
)

__all__ = [
    "ContextConfig",
    "GroupFrame",
    "GroupStack",
    "GroupStackError",
    "IGNORED_ATTRIBUTES",
    "PaintState",
    "PaintStateStack",
    "SceneRenderContext",
    "apply_env_overrides",
    "config_from_mapping",
    "elide_inherited",
    "load_context_config",
]
