from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


MUSIC_FONTS: Mapping[str, str] = {
    "Bravura": "bravura/bravura.woff2",
    "Gonville": "gonville/gonville.woff2",
    "Petaluma": "petaluma/petaluma.woff2",
    "Gootville": "gootville/gootville.woff2",
    "Leland": "leland/leland.woff2",
    "Leipzig": "leipzig/leipzig.woff2",
    "Sebastian": "sebastian/sebastian.woff2",
    "Finale Ash": "finaleash/finaleash.woff2",
    "Finale Broadway": "finalebroadway/finalebroadway.woff2",
    "Finale Jazz": "finalejazz/finalejazz.woff2",
    "Finale Maestro": "finalemaestro/finalemaestro.woff2",
    "MuseJazz": "musejazz/musejazz.woff2",
    "Nepomuk": "nepomuk/nepomuk.woff2",
}

TEXT_FONTS: Mapping[str, str] = {
    "Academico": "academico/academico.woff2",
    "Edwin": "edwin/edwin-roman.woff2",
    "Roboto Slab": "robotoslab/robotoslab-regular-400.woff2",
    "Bravura Text": "bravuratext/bravuratext.woff2",
    "Petaluma Text": "petalumatext/petalumatext.woff2",
    "Petaluma Script": "petalumascript/petalumascript.woff2",
    "Gootville Text": "gootvilletext/gootvilletext.woff2",
    "Leland Text": "lelandtext/lelandtext.woff2",
    "Sebastian Text": "sebastiantext/sebastiantext.woff2",
    "MuseJazz Text": "musejazztext/musejazztext.woff2",
}

DEFAULT_MUSIC_FONT = "Bravura"
DEFAULT_TEXT_FONT = "Academico"
GENERIC_FALLBACK_FAMILY = "serif"


def available_music_fonts() -> list[str]:
    return list(MUSIC_FONTS)


def available_text_fonts() -> list[str]:
    return list(TEXT_FONTS)


@dataclass(frozen=True)
class FontSelection:
    """Music + text font pair used to build the default family stack."""

    music_font: str = DEFAULT_MUSIC_FONT
    text_font: str = DEFAULT_TEXT_FONT

    def __post_init__(self) -> None:
        if self.music_font not in MUSIC_FONTS:
            raise ValueError(f"Unknown music font: {self.music_font}")
        if self.text_font not in TEXT_FONTS:
            raise ValueError(f"Unknown text font: {self.text_font}")

    @property
    def family_stack(self) -> str:
        return f"{self.music_font}, {self.text_font}, {GENERIC_FALLBACK_FAMILY}"

    def asset_paths(self) -> tuple[str, str]:
        return (MUSIC_FONTS[self.music_font], TEXT_FONTS[self.text_font])
