from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Mapping, Union


DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_SIZE = "10pt"
NORMAL = "normal"

PT_TO_PX = 1.333
EM_BASE_PX = 16.0
FALLBACK_SIZE_PX = 10.0

_SIZE_TOKEN = re.compile(r"^(\d+(?:\.\d+)?)(pt|px|em|%|rem|vh|vw)$", re.IGNORECASE)
_SIZE_SEARCH = re.compile(r"(\d+(?:\.\d+)?)\s*(px|pt|em|rem|%)?", re.IGNORECASE)
_NUMERIC_WEIGHT = re.compile(r"^\d{3}$")


@dataclass(frozen=True)
class FontSpec:
    """Canonical font record every other component consumes.

    `size` keeps its unit (`"12pt"`, `"16px"`, `"1em"`); use `size_px` for
    arithmetic.
    """

    family: str = DEFAULT_FONT_FAMILY
    size: str = DEFAULT_FONT_SIZE
    weight: str = NORMAL
    style: str = NORMAL

    def __post_init__(self) -> None:
        if not self.family.strip():
            raise ValueError("FontSpec requires a non-empty `family`")
        if not self.size.strip():
            raise ValueError("FontSpec requires a non-empty `size`")

    @property
    def size_px(self) -> float:
        return parse_font_size_px(self.size)

    @property
    def primary_family(self) -> str:
        return self.family.split(",")[0].strip().strip("\"'")

    def to_css(self) -> str:
        parts: list[str] = []
        if self.style and self.style != NORMAL:
            parts.append(self.style.strip())
        if self.weight and self.weight != NORMAL:
            parts.append(self.weight.strip())
        parts.append(self.size.strip())
        parts.append(self.family)
        return " ".join(parts)

    def as_attributes(self) -> dict[str, str]:
        return {
            "font-family": self.family,
            "font-size": self.size,
            "font-weight": self.weight,
            "font-style": self.style,
        }


@dataclass(frozen=True)
class FontShorthand:
    """CSS `font` shorthand, e.g. `italic bold 12pt "Times New Roman"`."""

    css: str


@dataclass(frozen=True)
class FontFields:
    family: str | None = None
    size: str | int | float | None = None
    weight: str | int | None = None
    style: str | None = None


FontDescription = Union[FontShorthand, FontFields, FontSpec]


def describe_font(
    font: str | FontSpec | Mapping[str, object] | None = None,
    size: str | int | float | None = None,
    weight: str | int | None = None,
    style: str | None = None,
) -> FontDescription:
    """Turn the loosely typed setter arguments into one tagged variant."""

    if isinstance(font, FontSpec) and size is None and weight is None and style is None:
        return font
    if isinstance(font, str) and size is None and weight is None and style is None:
        return FontShorthand(font)
    if isinstance(font, FontSpec):
        return FontFields(font.family, size or font.size, weight or font.weight, style or font.style)
    if isinstance(font, Mapping):
        return FontFields(
            family=_opt_str(font.get("family")),
            size=font.get("size") if size is None else size,  # type: ignore[arg-type]
            weight=font.get("weight") if weight is None else weight,  # type: ignore[arg-type]
            style=_opt_str(font.get("style")) if style is None else style,
        )
    return FontFields(family=font, size=size, weight=weight, style=style)


def normalize_font(description: FontDescription, defaults: FontSpec | None = None) -> FontSpec:
    defaults = defaults or FontSpec()
    if isinstance(description, FontSpec):
        return description
    if isinstance(description, FontShorthand):
        return parse_font_string(description.css, defaults=defaults)
    family = description.family if description.family and description.family.strip() else defaults.family
    size = description.size
    if size is None or size == "":
        size_text = defaults.size
    elif isinstance(size, (int, float)):
        size_text = f"{_trim_number(size)}pt"
    else:
        size_text = str(size)
    weight = NORMAL if description.weight in (None, "") else str(description.weight)
    style = description.style or NORMAL
    return FontSpec(family=family, size=size_text, weight=weight, style=style)


def parse_font_string(css: str, defaults: FontSpec | None = None) -> FontSpec:
    """Parse a CSS font shorthand without a DOM.

    Tokens before the size may set style and weight; tokens after it form the
    family. A string without a size token is taken as a bare family name.
    """

    defaults = defaults or FontSpec()
    trimmed = css.strip()
    if not trimmed:
        return FontSpec(family=defaults.family, size=defaults.size)

    parts = _split_outside_quotes(trimmed)
    size_index = next((i for i, part in enumerate(parts) if _SIZE_TOKEN.match(part)), -1)
    if size_index < 0:
        return FontSpec(family=_unquote(trimmed) or defaults.family, size=defaults.size)

    weight = NORMAL
    style = NORMAL
    for part in parts[:size_index]:
        lowered = part.lower()
        if lowered in ("italic", "oblique"):
            style = lowered
        elif lowered == "bold" or _NUMERIC_WEIGHT.match(part):
            weight = part
    family = _unquote(" ".join(parts[size_index + 1 :])) or defaults.family
    return FontSpec(family=family, size=parts[size_index], weight=weight, style=style)


def parse_font_size_px(size: str | int | float) -> float:
    """Convert a size with unit into pixels; unitless values are points."""

    if isinstance(size, (int, float)):
        return float(size) * PT_TO_PX
    match = _SIZE_SEARCH.search(size)
    if match is None:
        return FALLBACK_SIZE_PX
    value = float(match.group(1))
    unit = (match.group(2) or "pt").lower()
    if unit == "px":
        return value
    if unit == "pt":
        return value * PT_TO_PX
    if unit in ("em", "rem"):
        return value * EM_BASE_PX
    if unit == "%":
        return value / 100.0 * EM_BASE_PX
    return value


def _split_outside_quotes(text: str) -> list[str]:
    parts: list[str] = []
    current = ""
    quote = ""
    for char in text:
        if char in ("'", '"') and not quote:
            quote = char
            current += char
        elif quote and char == quote:
            quote = ""
            current += char
        elif char == " " and not quote:
            if current:
                parts.append(current)
                current = ""
        else:
            current += char
    if current:
        parts.append(current)
    return parts


def _unquote(text: str) -> str:
    return text.replace('"', "").replace("'", "").strip()


def _opt_str(value: object) -> str | None:
    return None if value is None else str(value)


def _trim_number(value: int | float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
