from __future__ import annotations

"""
Terminal colors and their curses color numbers.

A `Color` is one of:
  TerminalDefault()      the terminal's own foreground/background
  Dark(BaseColor.RED)    one of the 8 base colors
  Light(BaseColor.RED)   its bright variant
  Rgb(r, g, b)           true color, 0..255 per channel
  RgbLowRes(r, g, b)     xterm 6x6x6 cube, 0..5 per channel

The layout code never imports this module; only the backend does.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

from .error_codes import AppError


class BaseColor(IntEnum):
    # Same numbering as curses.COLOR_*
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class TerminalDefault:
    pass


@dataclass(frozen=True)
class Dark:
    base: BaseColor


@dataclass(frozen=True)
class Light:
    base: BaseColor


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class RgbLowRes:
    r: int
    g: int
    b: int


Color = Union[TerminalDefault, Dark, Light, Rgb, RgbLowRes]

# Approximate RGB of the 8 base colors, for nearest-color fallback
_BASE_RGB: dict[BaseColor, Tuple[int, int, int]] = {
    BaseColor.BLACK: (0, 0, 0),
    BaseColor.RED: (205, 0, 0),
    BaseColor.GREEN: (0, 205, 0),
    BaseColor.YELLOW: (205, 205, 0),
    BaseColor.BLUE: (0, 0, 238),
    BaseColor.MAGENTA: (205, 0, 205),
    BaseColor.CYAN: (0, 205, 205),
    BaseColor.WHITE: (229, 229, 229),
}


def _low_res(v: int) -> int:
    return max(0, min(5, round(v * 5 / 255)))


def _nearest_base(r: int, g: int, b: int) -> BaseColor:
    def dist(c: BaseColor) -> int:
        br, bg, bb = _BASE_RGB[c]
        return (br - r) ** 2 + (bg - g) ** 2 + (bb - b) ** 2
    return min(BaseColor, key=dist)


def to_curses(color: Color, colors: int = 256) -> int:
    """Map `color` to a curses color number on a terminal with `colors` colors."""
    if isinstance(color, TerminalDefault):
        return -1
    if isinstance(color, Dark):
        return int(color.base)
    if isinstance(color, Light):
        return int(color.base) + 8 if colors >= 16 else int(color.base)
    if isinstance(color, Rgb):
        color = RgbLowRes(_low_res(color.r), _low_res(color.g), _low_res(color.b))
    if isinstance(color, RgbLowRes):
        if colors >= 256:
            return 16 + 36 * color.r + 6 * color.g + color.b
        return int(_nearest_base(color.r * 51, color.g * 51, color.b * 51))
    raise AppError('E005', 'colors.to_curses', repr(color))


_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_LOW_RE = re.compile(r"^([0-5])/([0-5])/([0-5])$")


def parse_color(text: str) -> Color:
    """Parse `default`, `red`, `light red`, `#f00`, `#ff0000` or `5/0/0`."""
    value = (text or "").strip().lower()
    if value in ("", "default"):
        return TerminalDefault()
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    m = _LOW_RE.match(value)
    if m:
        return RgbLowRes(*(int(x) for x in m.groups()))
    light = value.startswith("light ")
    name = value[len("light "):].strip() if light else value
    try:
        base = BaseColor[name.upper()]
    except KeyError:
        raise AppError('E005', 'colors.parse', repr(text)) from None
    return Light(base) if light else Dark(base)


__all__ = [
    "BaseColor",
    "Color",
    "Dark",
    "Light",
    "Rgb",
    "RgbLowRes",
    "TerminalDefault",
    "parse_color",
    "to_curses",
]
