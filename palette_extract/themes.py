# palette_extract/themes.py
from __future__ import annotations

"""
Colour-theory theme palettes derived from a single base colour.

Every generator takes the base as integer HSL and returns five '#RRGGBB'
strings. Position is meaningful (e.g. dark to light for Monochromatic).
Offsets are applied and clamped in HSL before conversion to hex.
"""

from typing import Callable, Dict, List, Sequence, Tuple, Union

from . import constants as C
from .colour_convert import hsl_to_hex, rgb_to_hsl
from .core_types import HexStr, Hsl, RGBTuple, ThemeMap


def _clamp_pct(v: int) -> int:
    return max(0, min(100, v))


def _wrap_hue(h: int) -> int:
    return (h + 360) % 360


def generate_monochromatic(base: Hsl) -> List[HexStr]:
    """Same hue and saturation, lightness stepped -40..+40."""
    h, s, l = base  # noqa: E741
    return [hsl_to_hex(h, s, _clamp_pct(l + d)) for d in C.MONO_LIGHTNESS_OFFSETS]


def generate_analogous(base: Hsl) -> List[HexStr]:
    """Neighbouring hues -60..+60 degrees."""
    h, s, l = base  # noqa: E741
    return [hsl_to_hex(_wrap_hue(h + a), s, l) for a in C.ANALOGOUS_HUE_OFFSETS]


def generate_complementary(base: Hsl) -> List[HexStr]:
    """Three lightness steps of the base hue, then two of its complement."""
    h, s, l = base  # noqa: E741
    comp = (h + 180) % 360
    out = [hsl_to_hex(h, s, _clamp_pct(l + d)) for d in C.COMPLEMENTARY_BASE_LIGHTNESS]
    out += [
        hsl_to_hex(comp, s, _clamp_pct(l + d)) for d in C.COMPLEMENTARY_COMP_LIGHTNESS
    ]
    return out


def generate_triadic(base: Hsl) -> List[HexStr]:
    """Hues 0/120/240 apart, plus muted versions of the first two."""
    h, s, l = base  # noqa: E741
    muted = max(0, s - C.TRIADIC_MUTED_SATURATION)
    out = [hsl_to_hex((h + a) % 360, s, l) for a in C.TRIADIC_HUE_OFFSETS]
    out.append(hsl_to_hex(h, muted, l))
    out.append(hsl_to_hex((h + 120) % 360, muted, l))
    return out


def generate_split_complementary(base: Hsl) -> List[HexStr]:
    """Base, the two hues flanking its complement, and a darker/lighter muted base."""
    h, s, l = base  # noqa: E741
    comp = (h + 180) % 360
    muted = max(0, s - C.SPLIT_MUTED_SATURATION)
    out = [hsl_to_hex(h, s, l)]
    out += [hsl_to_hex(_wrap_hue(comp + a), s, l) for a in C.SPLIT_HUE_OFFSETS]
    out += [hsl_to_hex(h, muted, _clamp_pct(l + d)) for d in C.SPLIT_LIGHTNESS_OFFSETS]
    return out


THEME_GENERATORS: Tuple[Tuple[str, Callable[[Hsl], List[HexStr]]], ...] = (
    ("Monochromatic", generate_monochromatic),
    ("Analogous", generate_analogous),
    ("Complementary", generate_complementary),
    ("Triadic", generate_triadic),
    ("Split Complementary", generate_split_complementary),
)

THEME_NAMES: Tuple[str, ...] = tuple(name for name, _fn in THEME_GENERATORS)


def as_hsl(base: Union[Hsl, RGBTuple, Sequence[int]]) -> Hsl:
    """Accept an Hsl as is; treat any other triple as RGB."""
    if isinstance(base, Hsl):
        return base
    r, g, b = (int(v) for v in base)
    return rgb_to_hsl(r, g, b)


def generate_themes(base: Union[Hsl, RGBTuple]) -> ThemeMap:
    """
    All five theme palettes for one base colour, keyed by THEME_NAMES.

    `base` is an Hsl, or an RGB triple (e.g. ScoredColor.rgb) which is
    converted first.
    """
    hsl = as_hsl(base)
    themes: Dict[str, List[HexStr]] = {}
    for name, generator in THEME_GENERATORS:
        themes[name] = generator(hsl)
    return themes


__all__ = [
    "generate_monochromatic",
    "generate_analogous",
    "generate_complementary",
    "generate_triadic",
    "generate_split_complementary",
    "THEME_GENERATORS",
    "THEME_NAMES",
    "as_hsl",
    "generate_themes",
]
