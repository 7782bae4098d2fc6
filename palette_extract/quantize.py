# palette_extract/quantize.py
from __future__ import annotations

"""
Coarse grid quantisation of RGB colours.

Each channel snaps to the nearest multiple of `factor` (ties round up) and is
clamped to [0, 255], so 255 with factor 24 stays 255 rather than 264.
"""

import numpy as np

from . import constants as C
from .colour_convert import round_half_up
from .core_types import RGBTuple, U8Rgb
from .errors import InvalidInputError


def _check_factor(factor: int) -> int:
    if isinstance(factor, bool) or int(factor) != factor or int(factor) <= 0:
        raise InvalidInputError(f"factor must be a positive integer, got {factor!r}")
    return int(factor)


def quantize_color(r: int, g: int, b: int, factor: int = C.QUANT_FACTOR) -> RGBTuple:
    """Snap one RGB triple onto the quantisation grid."""
    f = _check_factor(factor)

    def snap(v: int) -> int:
        return min(255, max(0, round_half_up(v / f) * f))

    return (snap(r), snap(g), snap(b))


def quantize_rgb(rgb: np.ndarray, factor: int = C.QUANT_FACTOR) -> U8Rgb:
    """
    Vectorised quantize_color over an (..., 3) array.
    Returns uint8 with the input shape.
    """
    f = _check_factor(factor)
    steps = np.floor(rgb.astype(np.float64) / f + 0.5)
    return np.clip(steps * f, 0, 255).astype(np.uint8)


__all__ = ["quantize_color", "quantize_rgb"]
