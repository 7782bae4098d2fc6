"""Shared fixtures: small RGBA buffers and image files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def solid_buffer() -> Callable[[int, int, Tuple[int, int, int, int]], bytes]:
    def build(width: int, height: int, rgba: Tuple[int, int, int, int]) -> bytes:
        arr = np.zeros((height, width, 4), dtype=np.uint8)
        arr[...] = rgba
        return arr.tobytes()

    return build


@pytest.fixture
def image_file(tmp_path: Path) -> Callable[..., Path]:
    def build(
        name: str,
        size: Tuple[int, int] = (40, 20),
        rgba: Tuple[int, int, int, int] = (255, 0, 0, 255),
    ) -> Path:
        path = tmp_path / name
        Image.new("RGBA", size, rgba).save(path)
        return path

    return build
