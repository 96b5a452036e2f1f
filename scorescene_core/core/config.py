from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import os
from pathlib import Path
import tomllib
from typing import Mapping

from scorescene_core.render.path import DEFAULT_PRECISION_PLACES
from scorescene_core.render.scene import DEFAULT_LABEL_PREFIX
from scorescene_ui.text.catalog import DEFAULT_MUSIC_FONT, DEFAULT_TEXT_FONT, FontSelection
from scorescene_ui.text.font import DEFAULT_FONT_SIZE


LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "SCORESCENE_"


@dataclass(frozen=True)
class ContextConfig:
    width: float = 500.0
    height: float = 200.0
    precision_places: int = DEFAULT_PRECISION_PLACES
    background_fill: str = "white"
    music_font: str = DEFAULT_MUSIC_FONT
    text_font: str = DEFAULT_TEXT_FONT
    font_size: str = DEFAULT_FONT_SIZE
    label_prefix: str = DEFAULT_LABEL_PREFIX

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("context width and height must be > 0")
        if self.precision_places < 0:
            raise ValueError("precision_places must be >= 0")
        FontSelection(self.music_font, self.text_font)

    @property
    def font_family(self) -> str:
        return FontSelection(self.music_font, self.text_font).family_stack


def load_context_config(path: str | Path) -> ContextConfig:
    """Read the `[context]` table of a TOML file into a ContextConfig."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"context config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("context", {})
    if not isinstance(table, dict):
        raise ValueError("`context` must be a table")
    return config_from_mapping(table)


def config_from_mapping(raw: Mapping[str, object]) -> ContextConfig:
    known = {f.name for f in fields(ContextConfig)}
    for key in raw:
        if key not in known:
            LOGGER.warning("ignoring unknown context config key: %s", key)
    defaults = ContextConfig()
    return ContextConfig(
        width=_coerce_number(raw.get("width", defaults.width), "width"),
        height=_coerce_number(raw.get("height", defaults.height), "height"),
        precision_places=_coerce_int(raw.get("precision_places", defaults.precision_places), "precision_places"),
        background_fill=_coerce_str(raw.get("background_fill", defaults.background_fill), "background_fill"),
        music_font=_coerce_str(raw.get("music_font", defaults.music_font), "music_font"),
        text_font=_coerce_str(raw.get("text_font", defaults.text_font), "text_font"),
        font_size=_coerce_str(raw.get("font_size", defaults.font_size), "font_size"),
        label_prefix=_coerce_str(raw.get("label_prefix", defaults.label_prefix), "label_prefix"),
    )


def apply_env_overrides(config: ContextConfig, environ: Mapping[str, str] | None = None) -> ContextConfig:
    env = os.environ if environ is None else environ
    changes: dict[str, object] = {}
    for name, parse in (("width", float), ("height", float), ("precision_places", int)):
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        try:
            changes[name] = parse(raw)
        except ValueError:
            LOGGER.warning("ignoring unparseable %s%s=%r", ENV_PREFIX, name.upper(), raw)
    background = env.get(f"{ENV_PREFIX}BACKGROUND_FILL")
    if background:
        changes["background_fill"] = background
    if not changes:
        return config
    return replace(config, **changes)


def _coerce_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value
