"""RGBA pixels and conversion between RGB and HSL colour spaces."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(eq=False)
class RGBAPixel:
    """A pixel with 8-bit red, green and blue channels and an alpha in [0, 1].

    The default pixel is opaque white. Any two fully transparent pixels are
    equal, whatever their colour channels hold.
    """

    r: int = 255
    g: int = 255
    b: int = 255
    a: float = 1.0

    def __post_init__(self) -> None:
        self.r = int(self.r) & 0xFF
        self.g = int(self.g) & 0xFF
        self.b = int(self.b) & 0xFF
        self.a = float(self.a)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBAPixel):
            return NotImplemented
        if self.a == 0 and other.a == 0:
            return True
        return (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)


@dataclass(frozen=True)
class RGBAColor:
    """A colour with four 8-bit channels, alpha included."""

    r: int
    g: int
    b: int
    a: int


@dataclass(frozen=True)
class HSLAColor:
    """A colour as hue in degrees [0, 360], saturation, lightness and alpha in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741
    a: float


def _round_byte(value: float) -> int:
    """Round half away from zero and keep the result within a byte."""
    rounded = math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)
    return min(255, max(0, int(rounded)))


def rgb2hsl(rgba: RGBAColor) -> HSLAColor:
    """Convert an 8-bit RGBA colour to HSLA."""
    r, g, b = rgba.r / 255.0, rgba.g / 255.0, rgba.b / 255.0
    low = min(r, g, b)
    high = max(r, g, b)
    chroma = high - low
    alpha = rgba.a / 255.0
    lightness = 0.5 * (high + low)

    # Greys have no defined hue; also avoids dividing by zero below.
    if chroma < 0.0001 or high < 0.0001:
        return HSLAColor(0.0, 0.0, lightness, alpha)

    saturation = chroma / (1 - abs(2 * lightness - 1))

    if high == r:
        hue = math.fmod((g - b) / chroma, 6)
    elif high == g:
        hue = (b - r) / chroma + 2
    else:
        hue = (r - g) / chroma + 4

    hue *= 60
    if hue < 0:
        hue += 360
    return HSLAColor(hue, saturation, lightness, alpha)


def hsl2rgb(hsla: HSLAColor) -> RGBAColor:
    """Convert an HSLA colour to 8-bit RGBA."""
    if hsla.s <= 0.001:
        grey = _round_byte(hsla.l * 255)
        return RGBAColor(grey, grey, grey, _round_byte(hsla.a * 255))

    c = (1 - abs(2 * hsla.l - 1)) * hsla.s
    hh = hsla.h / 60
    x = c * (1 - abs(math.fmod(hh, 2) - 1))

    if hh <= 1:
        r, g, b = c, x, 0.0
    elif hh <= 2:
        r, g, b = x, c, 0.0
    elif hh <= 3:
        r, g, b = 0.0, c, x
    elif hh <= 4:
        r, g, b = 0.0, x, c
    elif hh <= 5:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    m = hsla.l - 0.5 * c
    return RGBAColor(
        _round_byte((r + m) * 255),
        _round_byte((g + m) * 255),
        _round_byte((b + m) * 255),
        _round_byte(hsla.a * 255),
    )