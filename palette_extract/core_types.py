from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Tuple

import numpy as np
from numpy.typing import NDArray

from . import constants as C
from .errors import InvalidInputError

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8Pixels = NDArray[np.uint8]  # (N, 4) RGBA rows
U8Rgb = NDArray[np.uint8]  # (N, 3) RGB rows
Histogram = Dict[int, int]  # packed rgb -> count, in first-encounter order
ThemeMap = Dict[str, List[HexStr]]  # theme name -> 5 hex strings


class Hsl(NamedTuple):
    """Integer HSL view: h in [0, 360), s and l in [0, 100]."""

    h: int
    s: int
    l: int  # noqa: E741


# Value objects


@dataclass(frozen=True)
class ColorCount:
    """Quantised colour and how many opaque samples landed on it."""

    rgb: RGBTuple
    frequency: int


@dataclass(frozen=True)
class ScoredColor:
    """Dominant palette entry: quantised colour, frequency and visual impact."""

    rgb: RGBTuple
    frequency: int
    impact: float

    @property
    def hex(self) -> HexStr:
        from .colour_convert import rgb_to_hex

        return rgb_to_hex(*self.rgb)

    def to_dict(self) -> Dict[str, Any]:
        r, g, b = self.rgb
        return {
            "r": r,
            "g": g,
            "b": b,
            "frequency": self.frequency,
            "impact": self.impact,
            "hex": self.hex,
        }


@dataclass(frozen=True)
class ExtractOptions:
    """Pipeline tunables. Defaults come from constants.py."""

    factor: int = C.QUANT_FACTOR
    max_samples: int = C.MAX_SAMPLES
    alpha_threshold: int = C.ALPHA_THRESHOLD
    top_colours: int = C.TOP_COLOURS
    similarity_threshold: float = C.SIMILARITY_THRESHOLD
    palette_size: int = C.PALETTE_SIZE

    def __post_init__(self) -> None:
        if int(self.factor) <= 0:
            raise InvalidInputError("factor must be a positive integer")
        if int(self.max_samples) <= 0:
            raise InvalidInputError("max_samples must be positive")
        if not 0 <= int(self.alpha_threshold) <= 256:
            raise InvalidInputError("alpha_threshold must be in [0, 256]")
        if int(self.top_colours) <= 0 or int(self.palette_size) <= 0:
            raise InvalidInputError("top_colours and palette_size must be positive")
        if float(self.similarity_threshold) < 0.0:
            raise InvalidInputError("similarity_threshold must be non-negative")


@dataclass(frozen=True)
class PaletteResult:
    """Dominant palette plus the theme palettes derived from its first entry."""

    dominant: List[ScoredColor]
    themes: ThemeMap = field(default_factory=dict)
    sample_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dominant": [c.to_dict() for c in self.dominant],
            "themes": {name: list(hexes) for name, hexes in self.themes.items()},
            "samples": self.sample_count,
        }


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack an RGB triple into a single 24-bit integer key."""
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(key: int) -> RGBTuple:
    """Inverse of pack_rgb."""
    key = int(key)
    return ((key >> 16) & 0xFF, (key >> 8) & 0xFF, key & 0xFF)


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HexStr",
    "U8Pixels",
    "U8Rgb",
    "Histogram",
    "ThemeMap",
    "Hsl",
    # value objects
    "ColorCount",
    "ScoredColor",
    "ExtractOptions",
    "PaletteResult",
    # helpers
    "clamp_value",
    "pack_rgb",
    "unpack_rgb",
]
