from .path import DEFAULT_PRECISION_PLACES, TWO_PI, PathBuilder, Pen, format_number, normalize_angle, round_to_precision
from .scene import AttrValue, DEFAULT_LABEL_PREFIX, NodeKind, SceneNode, SceneRegistry, namespaced, next_node_key

__all__ = [
    "AttrValue",
    "DEFAULT_LABEL_PREFIX",
    "DEFAULT_PRECISION_PLACES",
    "NodeKind",
    "PathBuilder",
    "Pen",
    "SceneNode",
    "SceneRegistry",
    "TWO_PI",
    "format_number",
    "namespaced",
    "next_node_key",
    "normalize_angle",
    "round_to_precision",
]
