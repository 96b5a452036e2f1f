from __future__ import annotations

from dataclasses import dataclass
import math


TWO_PI = 2.0 * math.pi
DEFAULT_PRECISION_PLACES = 3


def normalize_angle(angle: float) -> float:
    """Map an angle in radians into [0, 2*pi)."""

    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle += TWO_PI
    return angle


def round_to_precision(value: float, places: int = DEFAULT_PRECISION_PLACES) -> float:
    """Round half-up to `places` decimals; NaN and infinities pass through."""

    if not math.isfinite(value):
        return value
    scale = 10.0**places
    return math.floor(value * scale + 0.5) / scale


def format_number(value: float) -> str:
    """Shortest text form used inside path, transform and view-box strings."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Pen:
    x: float = math.nan
    y: float = math.nan

    @property
    def placed(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y))


class PathBuilder:
    """Accumulates SVG path commands and tracks the running pen position.

    Operands are rounded before they are embedded so equal float inputs always
    produce equal strings. Nothing here clears the accumulator except `reset()`,
    so one accumulated path can be stroked and then filled.
    """

    def __init__(self, precision_places: int = DEFAULT_PRECISION_PLACES) -> None:
        if precision_places < 0:
            raise ValueError("precision_places must be >= 0")
        self._places = precision_places
        self._parts: list[str] = []
        self._pen = Pen()

    @property
    def precision_places(self) -> int:
        return self._places

    @property
    def d(self) -> str:
        return "".join(self._parts)

    @property
    def pen(self) -> Pen:
        return self._pen

    def reset(self) -> None:
        self._parts = []
        self._pen = Pen()

    def move_to(self, x: float, y: float) -> None:
        x, y = self._round(x), self._round(y)
        self._parts.append(f"M{_n(x)} {_n(y)}")
        self._pen = Pen(x, y)

    def line_to(self, x: float, y: float) -> None:
        x, y = self._round(x), self._round(y)
        self._parts.append(f"L{_n(x)} {_n(y)}")
        self._pen = Pen(x, y)

    def bezier_curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        x1, y1 = self._round(x1), self._round(y1)
        x2, y2 = self._round(x2), self._round(y2)
        x, y = self._round(x), self._round(y)
        self._parts.append(f"C{_n(x1)} {_n(y1)},{_n(x2)} {_n(y2)},{_n(x)} {_n(y)}")
        self._pen = Pen(x, y)

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> None:
        x1, y1 = self._round(x1), self._round(y1)
        x, y = self._round(x), self._round(y)
        self._parts.append(f"Q{_n(x1)} {_n(y1)},{_n(x)} {_n(y)}")
        self._pen = Pen(x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        x0 = self._round(cx + radius * math.cos(start_angle))
        y0 = self._round(cy + radius * math.sin(start_angle))
        norm_start = normalize_angle(start_angle)
        norm_end = normalize_angle(end_angle)
        sweep = 0 if counterclockwise else 1

        if _is_full_turn(start_angle, end_angle, counterclockwise) or norm_start == norm_end:
            # One elliptical-arc command cannot start and end on the same point.
            x1 = self._round(cx + radius * math.cos(start_angle + math.pi))
            y1 = self._round(cy + radius * math.sin(start_angle + math.pi))
            r = self._round(radius)
            self._parts.append(
                f"M{_n(x0)} {_n(y0)} A{_n(r)} {_n(r)} 0 0 {sweep} {_n(x1)} {_n(y1)} "
                f"A{_n(r)} {_n(r)} 0 0 {sweep} {_n(x0)} {_n(y0)}"
            )
            self._pen = Pen(x0, y0)
            return

        x1 = self._round(cx + radius * math.cos(end_angle))
        y1 = self._round(cy + radius * math.sin(end_angle))
        if abs(norm_end - norm_start) < math.pi:
            large = counterclockwise
        else:
            large = not counterclockwise
        if norm_start > norm_end:
            large = not large
        r = self._round(radius)
        self._parts.append(
            f"M{_n(x0)} {_n(y0)} A{_n(r)} {_n(r)} 0 {int(large)} {sweep} {_n(x1)} {_n(y1)}"
        )
        self._pen = Pen(x1, y1)

    def close_path(self) -> None:
        self._parts.append("Z")

    def _round(self, value: float) -> float:
        return round_to_precision(value, self._places)


def _is_full_turn(start_angle: float, end_angle: float, counterclockwise: bool) -> bool:
    if counterclockwise:
        return start_angle - end_angle >= TWO_PI
    return end_angle - start_angle >= TWO_PI


_n = format_number
