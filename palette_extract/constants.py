"""
Tunables used across the project.

- Sampling (MAX_SAMPLES, ALPHA_THRESHOLD, MAX_IMAGE_SIDE)
- Quantisation and ranking (QUANT_FACTOR, TOP_COLOURS, SIMILARITY_THRESHOLD, PALETTE_SIZE)
- Theme offsets (MONO_*, ANALOGOUS_*, COMPLEMENTARY_*, TRIADIC_*, SPLIT_*)
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Sampling
# =========================
MAX_SAMPLES: int = 10_000  # upper bound on visited pixels per image
ALPHA_THRESHOLD: int = 128  # alpha below this is treated as transparent
MAX_IMAGE_SIDE: int = 300  # longer side after downscaling, in px

# =========================
# Quantisation / ranking
# =========================
QUANT_FACTOR: int = 24
TOP_COLOURS: int = 12  # histogram entries kept before dedup
SIMILARITY_THRESHOLD: float = 30.0  # Euclidean RGB distance
PALETTE_SIZE: int = 8  # dominant palette length cap

# =========================
# Themes
# =========================
MONO_LIGHTNESS_OFFSETS: Tuple[int, ...] = (-40, -20, 0, 20, 40)
ANALOGOUS_HUE_OFFSETS: Tuple[int, ...] = (-60, -30, 0, 30, 60)
COMPLEMENTARY_BASE_LIGHTNESS: Tuple[int, ...] = (-20, 0, 20)
COMPLEMENTARY_COMP_LIGHTNESS: Tuple[int, ...] = (-10, 0)
TRIADIC_HUE_OFFSETS: Tuple[int, ...] = (0, 120, 240)
TRIADIC_MUTED_SATURATION: int = 30  # subtracted for the two muted entries
SPLIT_HUE_OFFSETS: Tuple[int, ...] = (-30, 30)  # around the complement
SPLIT_MUTED_SATURATION: int = 20
SPLIT_LIGHTNESS_OFFSETS: Tuple[int, ...] = (-15, 15)

THEME_PALETTE_SIZE: int = 5

# Filenames accepted by the CLI.
SUPPORTED_EXTENSIONS: Tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".bmp",
    ".webp",
    ".svg",
    ".tiff",
    ".ico",
)
