from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path

from scorescene_core.core import ContextConfig, apply_env_overrides, load_context_config
from scorescene_core.core.context import SceneRenderContext
from scorescene_ui.text import (
    MUSIC_FONTS,
    TEXT_FONTS,
    FontSelection,
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scorescene")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [context] table.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    measure = sub.add_parser("measure", help="Estimate text metrics for a font.")
    measure.add_argument("text")
    measure.add_argument(
        "--font",
        default=None,
        help='CSS font shorthand, e.g. "italic 12pt Arial". Default: the configured font stack.',
    )

    sub.add_parser("fonts", help="List the known music and text fonts.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    config = _resolve_config(args.config)

    if args.command == "measure":
        ctx = SceneRenderContext(config=config)
        if args.font:
            ctx.set_font(args.font)
        box = ctx.measure_text(args.text)
        print(json.dumps({"font": ctx.get_font(), **asdict(box)}, indent=2, sort_keys=True))
        return

    if args.command == "fonts":
        selection = FontSelection(config.music_font, config.text_font)
        payload = {
            "music": dict(MUSIC_FONTS),
            "text": dict(TEXT_FONTS),
            "selected": {
                "music_font": selection.music_font,
                "text_font": selection.text_font,
                "family_stack": selection.family_stack,
            },
        }
        print(json.dumps(payload, indent=2))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _resolve_config(path: Path | None) -> ContextConfig:
    config = load_context_config(path) if path is not None else ContextConfig()
    return apply_env_overrides(config)


if __name__ == "__main__":
    main()
