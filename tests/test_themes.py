"""Tests for theme palette generation."""

import re

import pytest

from palette_extract.colour_convert import hex_to_rgb, hsl_to_hex, rgb_to_hsl
from palette_extract.core_types import Hsl
from palette_extract.themes import (
    THEME_NAMES,
    generate_analogous,
    generate_complementary,
    generate_monochromatic,
    generate_split_complementary,
    generate_themes,
    generate_triadic,
)

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def _hue_gap(a: int, b: int) -> int:
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_monochromatic_of_pure_red() -> None:
    assert generate_monochromatic(Hsl(0, 100, 50)) == [
        "#330000",
        "#990000",
        "#FF0000",
        "#FF6666",
        "#FFCCCC",
    ]


def test_monochromatic_clamps_lightness() -> None:
    palette = generate_monochromatic(Hsl(0, 100, 90))
    assert palette[3] == palette[4] == "#FFFFFF"


def test_analogous_wraps_hue() -> None:
    palette = generate_analogous(Hsl(10, 50, 50))
    assert palette == [hsl_to_hex(h, 50, 50) for h in (310, 340, 10, 40, 70)]


def test_complementary_of_hsl_200_50_50() -> None:
    palette = generate_complementary(Hsl(200, 50, 50))
    assert palette == ["#265973", "#4095BF", "#8CBFD9", "#995533", "#BF6A40"]
    assert palette == [
        hsl_to_hex(200, 50, 30),
        hsl_to_hex(200, 50, 50),
        hsl_to_hex(200, 50, 70),
        hsl_to_hex(20, 50, 40),
        hsl_to_hex(20, 50, 50),
    ]
    expected = [(200, 30), (200, 50), (200, 70), (20, 40), (20, 50)]
    for hex_str, (h, l) in zip(palette, expected):  # noqa: E741
        back = rgb_to_hsl(*hex_to_rgb(hex_str))
        assert _hue_gap(back.h, h) <= 1
        assert abs(back.l - l) <= 1
        assert abs(back.s - 50) <= 1


def test_triadic_muted_entries_floor_saturation() -> None:
    palette = generate_triadic(Hsl(0, 20, 50))
    assert palette[:3] == [hsl_to_hex(h, 20, 50) for h in (0, 120, 240)]
    assert palette[3] == palette[4] == "#808080"


def test_triadic_muted_entries() -> None:
    palette = generate_triadic(Hsl(30, 80, 40))
    assert palette[3] == hsl_to_hex(30, 50, 40)
    assert palette[4] == hsl_to_hex(150, 50, 40)


def test_split_complementary() -> None:
    palette = generate_split_complementary(Hsl(100, 60, 50))
    assert palette == [
        hsl_to_hex(100, 60, 50),
        hsl_to_hex(250, 60, 50),
        hsl_to_hex(310, 60, 50),
        hsl_to_hex(100, 40, 35),
        hsl_to_hex(100, 40, 65),
    ]


def test_split_complementary_clamps() -> None:
    palette = generate_split_complementary(Hsl(0, 10, 95))
    assert palette[4] == "#FFFFFF"
    assert palette[3] == hsl_to_hex(0, 0, 80)


@pytest.mark.parametrize(
    "base", [Hsl(0, 0, 0), Hsl(0, 100, 50), Hsl(359, 5, 100), Hsl(200, 50, 50)]
)
def test_every_theme_has_five_hex_colours(base: Hsl) -> None:
    themes = generate_themes(base)
    assert tuple(themes) == THEME_NAMES
    for palette in themes.values():
        assert len(palette) == 5
        assert all(HEX_RE.match(h) for h in palette)


def test_generate_themes_accepts_rgb() -> None:
    assert generate_themes((255, 0, 0)) == generate_themes(Hsl(0, 100, 50))


def test_solid_red_monochromatic_variants_are_distinct() -> None:
    mono = generate_themes((255, 0, 0))["Monochromatic"]
    assert len(set(mono)) == 5
    assert all(rgb_to_hsl(*hex_to_rgb(h)).h == 0 for h in mono)
