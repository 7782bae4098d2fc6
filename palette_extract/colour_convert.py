# palette_extract/colour_convert.py
from __future__ import annotations

"""
Colour conversions between 8-bit sRGB, integer HSL and hex strings.

Exports:
  round_half_up(x)
  rgb_to_hex(r, g, b)
  hex_to_rgb(hex_str)
  rgb_to_hsl(r, g, b)
  hsl_to_rgb(h, s, l)
  hsl_to_hex(h, s, l)

All rounding is half-up (0.5 -> 1), not Python's round-half-to-even, so
results match the usual web colour tools bit for bit.
"""

import math

from .core_types import HexStr, Hsl, RGBTuple, clamp_value
from .errors import InvalidInputError


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties towards +inf."""
    return int(math.floor(x + 0.5))


# RGB <-> hex


def rgb_to_hex(r: float, g: float, b: float) -> HexStr:
    """
    RGB channels to '#RRGGBB' (upper case).
    Channels are clamped to [0, 255] and rounded first, so any real input works.
    """

    def channel(v: float) -> str:
        return f"{round_half_up(clamp_value(float(v), 0.0, 255.0)):02X}"

    return f"#{channel(r)}{channel(g)}{channel(b)}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise InvalidInputError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise InvalidInputError("hex must be '#rrggbb' or '#rgb'")
    try:
        return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))
    except ValueError as exc:
        raise InvalidInputError(f"invalid hex colour {hex_str!r}") from exc


# RGB <-> HSL


def rgb_to_hsl(r: float, g: float, b: float) -> Hsl:
    """
    sRGB (0..255) to integer HSL.

    Achromatic input (max == min) gives h = s = 0. Hue is taken from the
    largest channel, checking red, then green, then blue. A hue that rounds
    to 360 wraps to 0.
    """
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    mx = max(rn, gn, bn)
    mn = min(rn, gn, bn)
    diff = mx - mn
    total = mx + mn
    lightness = total / 2.0

    hue = 0.0
    sat = 0.0
    if diff != 0:
        sat = diff / (2.0 - total) if lightness > 0.5 else diff / total
        if mx == rn:
            hue = (gn - bn) / diff + (6.0 if gn < bn else 0.0)
        elif mx == gn:
            hue = (bn - rn) / diff + 2.0
        else:
            hue = (rn - gn) / diff + 4.0
        hue /= 6.0

    return Hsl(
        round_half_up(hue * 360.0) % 360,
        round_half_up(sat * 100.0),
        round_half_up(lightness * 100.0),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:  # noqa: E741
    """
    HSL to 8-bit sRGB.

    h is wrapped into [0, 360) (negative values allowed); s and l are clamped
    to [0, 100]. Sextants are half-open: [0,60), [60,120), ... [300,360).
    """
    hue = float(h) % 360.0
    sat = clamp_value(float(s), 0.0, 100.0) / 100.0
    lig = clamp_value(float(l), 0.0, 100.0) / 100.0

    chroma = (1.0 - abs(2.0 * lig - 1.0)) * sat
    second = chroma * (1.0 - abs((hue / 60.0) % 2.0 - 1.0))
    offset = lig - chroma / 2.0

    if hue < 60.0:
        rf, gf, bf = chroma, second, 0.0
    elif hue < 120.0:
        rf, gf, bf = second, chroma, 0.0
    elif hue < 180.0:
        rf, gf, bf = 0.0, chroma, second
    elif hue < 240.0:
        rf, gf, bf = 0.0, second, chroma
    elif hue < 300.0:
        rf, gf, bf = second, 0.0, chroma
    else:
        rf, gf, bf = chroma, 0.0, second

    return (
        round_half_up((rf + offset) * 255.0),
        round_half_up((gf + offset) * 255.0),
        round_half_up((bf + offset) * 255.0),
    )


def hsl_to_hex(h: float, s: float, l: float) -> HexStr:  # noqa: E741
    """HSL straight to '#RRGGBB'."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


__all__ = [
    "round_half_up",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
]
