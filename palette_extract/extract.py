# palette_extract/extract.py
from __future__ import annotations

"""
Dominant palette extraction.

Pipeline (strictly in this order):
  1. build_histogram       : quantise opaque samples and count them per colour
  2. top_colors            : frequency-descending, first-encountered wins ties, top 12
  3. filter_similar_colors : greedy dedup, Euclidean RGB distance >= 30 to every kept colour
  4. visual_impact         : frequency * (1 + s/100) * (1 + |l-50|/50)
  5. enhance_palette       : impact-descending, top 8

Exports:
  build_histogram, top_colors, colour_distance, filter_similar_colors,
  visual_impact, enhance_palette, palette_from_samples, extract_palette
"""

import math
import time
from typing import Iterable, List, Optional, Sequence

import numpy as np

from . import constants as C
from .colour_convert import rgb_to_hsl
from .core_types import (
    ColorCount,
    ExtractOptions,
    Histogram,
    RGBTuple,
    ScoredColor,
    unpack_rgb,
)
from .errors import EmptyInputError, InvalidInputError
from .quantize import quantize_rgb
from .sampling import PixelBuffer, sample_opaque_pixels
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


# Histogram / ranking


def build_histogram(samples: np.ndarray, factor: int = C.QUANT_FACTOR) -> Histogram:
    """
    Count quantised colours over sampled pixels.

    Args:
      samples: (N, 3) or (N, 4) uint8 rows; only the RGB channels are read.
               Rows are assumed opaque already.
      factor:  quantisation grid size
    Returns:
      dict packed_rgb -> count, ordered by first encounter in `samples`.
    """
    arr = np.asarray(samples, dtype=np.uint8)
    if arr.size == 0:
        return {}
    arr = arr.reshape(-1, arr.shape[-1])
    if arr.shape[1] < 3:
        raise InvalidInputError(f"expected RGB(A) rows, got shape {arr.shape}")

    q = quantize_rgb(arr[:, :3], factor).astype(np.uint32)
    keys = (q[:, 0] << 16) | (q[:, 1] << 8) | q[:, 2]
    uniq, first_idx, counts = np.unique(keys, return_index=True, return_counts=True)
    order = np.argsort(first_idx, kind="stable")
    return {
        int(k): int(n) for k, n in zip(uniq[order].tolist(), counts[order].tolist())
    }


def top_colors(histogram: Histogram, count: int = C.TOP_COLOURS) -> List[ColorCount]:
    """Most frequent entries first; sorted() is stable so ties keep histogram order."""
    ranked = sorted(histogram.items(), key=lambda kv: -kv[1])[: max(0, int(count))]
    return [ColorCount(unpack_rgb(key), n) for key, n in ranked]


# Dedup / scoring


def colour_distance(a: RGBTuple, b: RGBTuple) -> float:
    """Euclidean distance in RGB space."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def filter_similar_colors(
    colors: Sequence[ColorCount], threshold: float = C.SIMILARITY_THRESHOLD
) -> List[ColorCount]:
    """
    Greedy perceptual dedup in rank order.

    colors[0] is always kept; each later colour is kept only when it is at
    least `threshold` away from every colour kept so far.
    """
    if not colors:
        return []
    kept: List[ColorCount] = [colors[0]]
    for candidate in colors[1:]:
        if all(colour_distance(candidate.rgb, k.rgb) >= threshold for k in kept):
            kept.append(candidate)
    return kept


def visual_impact(color: ColorCount) -> float:
    """Frequency boosted by saturation and by distance from mid lightness."""
    _h, s, l = rgb_to_hsl(*color.rgb)  # noqa: E741
    return color.frequency * (1.0 + s / 100.0) * (1.0 + abs(l - 50) / 50.0)


def enhance_palette(
    colors: Iterable[ColorCount],
    *,
    threshold: float = C.SIMILARITY_THRESHOLD,
    palette_size: int = C.PALETTE_SIZE,
) -> List[ScoredColor]:
    """Dedup, score and keep the `palette_size` highest-impact colours."""
    survivors = filter_similar_colors(list(colors), threshold)
    scored = [ScoredColor(c.rgb, c.frequency, visual_impact(c)) for c in survivors]
    scored.sort(key=lambda sc: -sc.impact)
    return scored[: max(0, int(palette_size))]


# Entry points


def palette_from_samples(
    samples: np.ndarray,
    options: Optional[ExtractOptions] = None,
    *,
    debug: bool = False,
) -> List[ScoredColor]:
    """
    Run steps 1-5 over already-sampled opaque pixels.
    Raises EmptyInputError when `samples` is empty.
    """
    opts = options or ExtractOptions()
    t0 = time.perf_counter()

    histogram = build_histogram(samples, opts.factor)
    if not histogram:
        raise EmptyInputError()

    ranked = top_colors(histogram, opts.top_colours)
    palette = enhance_palette(
        ranked,
        threshold=opts.similarity_threshold,
        palette_size=opts.palette_size,
    )

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Samples", int(np.asarray(samples).shape[0])),
                    ("Histogram", len(histogram)),
                    ("Ranked", len(ranked)),
                    ("Palette", len(palette)),
                    ("Time", format_seconds_compact(time.perf_counter() - t0)),
                ]
            )
        )
    return palette


def extract_palette(
    pixels: PixelBuffer,
    width: int,
    height: int,
    options: Optional[ExtractOptions] = None,
    *,
    debug: bool = False,
) -> List[ScoredColor]:
    """
    Dominant palette of an RGBA buffer, highest impact first.

    Raises:
      InvalidInputError: buffer length / dimension mismatch
      EmptyInputError:   no opaque pixel among the samples
    """
    opts = options or ExtractOptions()
    samples = sample_opaque_pixels(
        pixels,
        width,
        height,
        max_samples=opts.max_samples,
        alpha_threshold=opts.alpha_threshold,
    )
    return palette_from_samples(samples, opts, debug=debug)


__all__ = [
    "build_histogram",
    "top_colors",
    "colour_distance",
    "filter_similar_colors",
    "visual_impact",
    "enhance_palette",
    "palette_from_samples",
    "extract_palette",
]
