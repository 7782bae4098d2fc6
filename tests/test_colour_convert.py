"""Tests for RGB / HSL / hex conversions."""

import re

import pytest

from palette_extract.colour_convert import (
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from palette_extract.core_types import Hsl
from palette_extract.errors import InvalidInputError

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(1.49) == 1


def test_rgb_to_hex_basic() -> None:
    assert rgb_to_hex(255, 0, 0) == "#FF0000"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(18, 52, 171) == "#1234AB"


def test_rgb_to_hex_clamps_and_rounds() -> None:
    assert rgb_to_hex(-5, 300, 127.5) == "#00FF80"


def test_rgb_to_hex_format_over_grid() -> None:
    for r in range(0, 256, 15):
        for g in range(0, 256, 51):
            for b in (0, 1, 128, 255):
                assert HEX_RE.match(rgb_to_hex(r, g, b))


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((255, 0, 0), Hsl(0, 100, 50)),
        ((0, 255, 0), Hsl(120, 100, 50)),
        ((0, 0, 255), Hsl(240, 100, 50)),
        ((128, 128, 128), Hsl(0, 0, 50)),
        ((255, 255, 255), Hsl(0, 0, 100)),
        ((0, 0, 0), Hsl(0, 0, 0)),
    ],
)
def test_rgb_to_hsl_known_values(rgb, expected) -> None:
    assert rgb_to_hsl(*rgb) == expected


def test_rgb_to_hsl_hue_never_reaches_360() -> None:
    # (255, 0, 1) has hue 359.76 which rounds to 360 and wraps.
    assert rgb_to_hsl(255, 0, 1) == Hsl(0, 100, 50)


@pytest.mark.parametrize(
    "hsl, expected",
    [
        ((0, 100, 50), "#FF0000"),
        ((60, 100, 50), "#FFFF00"),
        ((120, 100, 50), "#00FF00"),
        ((240, 100, 50), "#0000FF"),
        ((200, 50, 50), "#4095BF"),
        ((0, 0, 50), "#808080"),
    ],
)
def test_hsl_to_hex_known_values(hsl, expected) -> None:
    assert hsl_to_hex(*hsl) == expected


def test_hsl_to_hex_wraps_hue() -> None:
    assert hsl_to_hex(-120, 100, 50) == "#0000FF"
    assert hsl_to_hex(360, 100, 50) == hsl_to_hex(0, 100, 50)
    assert hsl_to_hex(480, 100, 50) == hsl_to_hex(120, 100, 50)


def test_hsl_to_hex_clamps_saturation_and_lightness() -> None:
    assert hsl_to_hex(0, 150, 50) == hsl_to_hex(0, 100, 50)
    assert hsl_to_hex(0, 100, -10) == "#000000"
    assert hsl_to_hex(0, 100, 110) == "#FFFFFF"


def _hue_gap(a: int, b: int) -> int:
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.mark.parametrize("s", [60, 80, 100])
@pytest.mark.parametrize("l", [35, 50, 65])
def test_hsl_hex_near_round_trip(s: int, l: int) -> None:  # noqa: E741
    for h in range(0, 360, 10):
        back = rgb_to_hsl(*hex_to_rgb(hsl_to_hex(h, s, l)))
        assert _hue_gap(back.h, h) <= 1
        assert abs(back.s - s) <= 1
        assert abs(back.l - l) <= 1


def test_hsl_to_rgb_channels_in_range() -> None:
    for h in range(0, 360, 30):
        for s in (0, 50, 100):
            for l in (0, 25, 50, 75, 100):  # noqa: E741
                assert all(0 <= c <= 255 for c in hsl_to_rgb(h, s, l))


def test_hex_to_rgb_parses_short_and_long_forms() -> None:
    assert hex_to_rgb("#fc0") == (255, 204, 0)
    assert hex_to_rgb("#4095BF") == (64, 149, 191)


@pytest.mark.parametrize("bad", ["4095BF", "#12345", "#GGHHII"])
def test_hex_to_rgb_rejects_bad_input(bad: str) -> None:
    with pytest.raises(InvalidInputError):
        hex_to_rgb(bad)
