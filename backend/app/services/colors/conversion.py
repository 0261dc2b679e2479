"""
Palette Studio - Color Space Conversion

Bidirectional conversion between RGB triples, #rrggbb hex strings and HSL
triples. All functions are pure; values are immutable dataclasses.

Conventions:
    RGB channels are integers in [0, 255].
    Hex output is always lowercase and prefixed with '#'.
    HSL hue is in degrees [0, 360); saturation and lightness are percentages [0, 100].
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidFormatError, InvalidInputError


HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class RGB:
    """An RGB color with integer channels in [0, 255]."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSL:
    """An HSL color: hue in degrees [0, 360), saturation/lightness in percent."""
    h: float
    s: float
    l: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.h, self.s, self.l)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (Python's round() goes to even)."""
    return int(math.floor(value + 0.5))


def normalize_hue(h: float) -> float:
    """
    Wrap a hue in degrees into [0, 360).

    Args:
        h: Hue in degrees, any sign or magnitude

    Returns:
        Equivalent hue in [0, 360)
    """
    wrapped = h % 360.0
    # -1e-17 % 360 gives 360.0 in floating point
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Convert RGB channels to a hex color string.

    Args:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]

    Returns:
        Hex color string in format #rrggbb (lowercase)

    Raises:
        InvalidInputError: If a channel is not an integer or lies outside [0, 255]
    """
    for name, value in (("r", r), ("g", g), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Channel {name} must be an integer, got {value!r}")
        if not 0 <= value <= 255:
            raise InvalidInputError(f"Channel {name} out of range [0, 255]: {value}")

    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color string into RGB channels.

    Accepts 6 hex digits with an optional leading '#', in any case.
    Three-digit shorthand and alpha channels are not supported.

    Raises:
        InvalidFormatError: If the string does not match the 6-digit pattern
    """
    if not isinstance(hex_color, str):
        raise InvalidFormatError(hex_color)

    match = HEX_PATTERN.fullmatch(hex_color)
    if match is None:
        raise InvalidFormatError(hex_color)

    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def normalize_hex(hex_color: str) -> str:
    """Return the canonical lowercase #rrggbb form of a valid hex color."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert a hex color to HSL.

    Achromatic colors (r == g == b) have hue and saturation of exactly 0.
    Hue is returned already wrapped into [0, 360).

    Args:
        hex_color: Color in format #rrggbb or rrggbb

    Returns:
        HSL with h in degrees and s, l in percent

    Raises:
        InvalidFormatError: Propagated from hex_to_rgb
    """
    rgb = hex_to_rgb(hex_color)
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        h = s = 0.0
    else:
        d = max_c - min_c
        # Denominator switches at l = 0.5 so it never reaches zero
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

        if max_c == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4

        h = normalize_hue(h * 60)

    return HSL(h, s * 100, l * 100)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to a hex color string.

    Hue is wrapped modulo 360; saturation and lightness are clamped into
    [0, 100] before conversion, so any finite input yields a valid color.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        Hex color string in format #rrggbb (lowercase)

    Raises:
        InvalidInputError: If any component is NaN or infinite
    """
    for name, value in (("h", h), ("s", s), ("l", l)):
        if not math.isfinite(value):
            raise InvalidInputError(f"HSL component {name} must be finite, got {value!r}")

    h = normalize_hue(h)
    s = max(0.0, min(100.0, s)) / 100
    l = max(0.0, min(100.0, l)) / 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return rgb_to_hex(
        _to_channel(r + m),
        _to_channel(g + m),
        _to_channel(b + m),
    )


def _to_channel(value: float) -> int:
    # Float error can push 1.0 * 255 a hair past the bounds
    return max(0, min(255, round_half_up(value * 255)))


@dataclass(frozen=True)
class Color:
    """
    A single color carrying its canonical hex form.

    RGB and HSL views are derived on access; all three denote the same point
    in color space (up to HSL rounding).
    """
    hex: str

    def __post_init__(self):
        object.__setattr__(self, "hex", normalize_hex(self.hex))

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        return cls(hex_color)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(rgb_to_hex(r, g, b))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        return cls(hsl_to_hex(h, s, l))

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    @property
    def hsl(self) -> HSL:
        return hex_to_hsl(self.hex)


def describe_color(hex_color: str) -> Color:
    """Validate a hex color and return it with its RGB and HSL views."""
    return Color.from_hex(hex_color)
