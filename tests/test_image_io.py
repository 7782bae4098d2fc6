"""Tests for decoding and downscaling."""

import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from palette_extract.errors import ImageDecodeError, InvalidInputError
from palette_extract.image_io import (
    fit_within,
    is_supported_image_name,
    load_image_rgba,
    load_pixels_for_analysis,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        ((600, 300), (300, 150)),
        ((300, 900), (100, 300)),
        ((100, 50), (100, 50)),
        ((1000, 2), (300, 1)),
    ],
)
def test_fit_within(size, expected) -> None:
    assert fit_within(Image.new("RGBA", size)).size == expected


def test_fit_within_rejects_bad_side() -> None:
    with pytest.raises(InvalidInputError):
        fit_within(Image.new("RGBA", (10, 10)), 0)


def test_load_converts_to_rgba(tmp_path: Path) -> None:
    path = tmp_path / "rgb.jpg"
    Image.new("RGB", (8, 6), (10, 200, 30)).save(path)
    im = load_image_rgba(path)
    assert im.mode == "RGBA"
    assert im.size == (8, 6)


def test_load_pixels_for_analysis(image_file) -> None:
    path = image_file("half.png", size=(600, 30), rgba=(0, 0, 255, 128))
    data, width, height = load_pixels_for_analysis(path)
    assert (width, height) == (300, 15)
    assert len(data) == width * height * 4


def test_garbage_file_raises_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(ImageDecodeError):
        load_image_rgba(path)


def test_missing_file_raises_decode_error(tmp_path: Path) -> None:
    with pytest.raises(ImageDecodeError):
        load_image_rgba(tmp_path / "missing.png")


@pytest.mark.parametrize(
    "name, ok",
    [("a.PNG", True), ("b.jpeg", True), ("c.webp", True), ("d.txt", False), ("e", False)],
)
def test_supported_names(name: str, ok: bool) -> None:
    assert is_supported_image_name(Path(name)) is ok


def _png_header_only(path: Path, width: int, height: int) -> Path:
    def chunk(kind: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(kind + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b""))
    return path


def test_oversized_header_raises_decode_error(tmp_path: Path) -> None:
    path = _png_header_only(tmp_path / "huge.png", 20000, 20000)
    with pytest.raises(ImageDecodeError):
        load_image_rgba(path)
