# palette_extract/sampling.py
from __future__ import annotations

"""
Strided pixel sampling over an RGBA buffer.

Exports:
- as_rgba_pixels(pixels, width, height) -> U8Pixels
- sample_stride(pixel_count, max_samples=MAX_SAMPLES) -> int
- sample_opaque_pixels(pixels, width, height, ...) -> U8Pixels
- iter_opaque_pixels(pixels, width, height, ...) -> Iterator[RGBATuple]

Notes:
- The buffer is row-major RGBA, 4 bytes per pixel, already downscaled so the
  longer side is at most MAX_IMAGE_SIDE.
- Pixels 0, stride, 2*stride, ... are visited; those with alpha below the
  threshold are dropped.
"""

from typing import Iterator, Union

import numpy as np

from . import constants as C
from .core_types import RGBATuple, U8Pixels
from .errors import InvalidInputError

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{name} must be an integer, got {type(value).__name__}")
    if int(value) <= 0:
        raise InvalidInputError(f"{name} must be > 0, got {value}")
    return int(value)


def as_rgba_pixels(pixels: PixelBuffer, width: int, height: int) -> U8Pixels:
    """
    View a bytes-like or uint8 array buffer as (width*height, 4) RGBA rows.
    Raises InvalidInputError when the length does not match the dimensions.
    """
    w = _check_dimension("width", width)
    h = _check_dimension("height", height)
    expected = w * h * 4

    if isinstance(pixels, np.ndarray):
        if pixels.dtype != np.uint8:
            raise InvalidInputError(f"expected uint8 pixels, got {pixels.dtype}")
        flat = np.ascontiguousarray(pixels).reshape(-1)
    else:
        flat = np.frombuffer(pixels, dtype=np.uint8)

    if flat.size != expected:
        raise InvalidInputError(
            f"buffer holds {flat.size} bytes, expected {expected} for {w}x{h} RGBA"
        )
    return flat.reshape(-1, 4)


def sample_stride(pixel_count: int, max_samples: int = C.MAX_SAMPLES) -> int:
    """Pixel step that keeps the number of visited pixels near max_samples."""
    return max(1, int(pixel_count) // int(max_samples))


def sample_opaque_pixels(
    pixels: PixelBuffer,
    width: int,
    height: int,
    *,
    max_samples: int = C.MAX_SAMPLES,
    alpha_threshold: int = C.ALPHA_THRESHOLD,
) -> U8Pixels:
    """Visited pixels with alpha >= alpha_threshold, as (N, 4) uint8 rows."""
    rows = as_rgba_pixels(pixels, width, height)
    visited = rows[:: sample_stride(rows.shape[0], max_samples)]
    return visited[visited[:, 3] >= alpha_threshold]


def iter_opaque_pixels(
    pixels: PixelBuffer,
    width: int,
    height: int,
    *,
    max_samples: int = C.MAX_SAMPLES,
    alpha_threshold: int = C.ALPHA_THRESHOLD,
) -> Iterator[RGBATuple]:
    """
    Lazy counterpart of sample_opaque_pixels yielding (r, g, b, a) tuples.
    Validation happens on the first next() call.
    """
    rows = as_rgba_pixels(pixels, width, height)
    stride = sample_stride(rows.shape[0], max_samples)
    for i in range(0, rows.shape[0], stride):
        r, g, b, a = rows[i].tolist()
        if a < alpha_threshold:
            continue
        yield (r, g, b, a)


__all__ = [
    "PixelBuffer",
    "as_rgba_pixels",
    "sample_stride",
    "sample_opaque_pixels",
    "iter_opaque_pixels",
]
