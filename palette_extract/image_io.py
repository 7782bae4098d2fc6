# palette_extract/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from . import constants as C
from .errors import ImageDecodeError, InvalidInputError

"""
Image decoding for analysis: RGBA in sRGB, downscaled to fit MAX_IMAGE_SIDE.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def is_supported_image_name(path: Path) -> bool:
    """Extension check only; decoding may still fail."""
    return path.suffix.lower() in C.SUPPORTED_EXTENSIONS


def pillow_resample_from_name(name: str) -> Image.Resampling:
    """Map a string to a Pillow resampling filter enum."""
    if name == "nearest":
        return Image.Resampling.NEAREST
    if name == "bicubic":
        return Image.Resampling.BICUBIC
    if name == "lanczos":
        return Image.Resampling.LANCZOS
    return Image.Resampling.BILINEAR  # default


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def load_image_rgba(path: Path) -> Image.Image:
    """
    Open an image, apply EXIF orientation and ICC->sRGB, return RGBA.
    Animated images use their first frame.
    """
    try:
        with Image.open(path) as im0:
            im0.seek(0)
            im = _convert_to_srgb_rgba(im0)
            im.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise ImageDecodeError(f"cannot decode {path}: {exc}") from exc
    return im


def fit_within(
    im: Image.Image,
    max_side: int = C.MAX_IMAGE_SIDE,
    resample: Image.Resampling = Image.Resampling.BILINEAR,
) -> Image.Image:
    """
    Shrink so the longer side is <= max_side, keeping aspect ratio and at
    least 1 px per side. Never upscales, so images already within max_side
    are sampled at their native size rather than enlarged to max_side.
    """
    if int(max_side) <= 0:
        raise InvalidInputError(f"max_side must be > 0, got {max_side}")
    w0, h0 = im.size
    ratio = min(max_side / w0, max_side / h0)
    if ratio >= 1.0:
        return im
    dst = (max(1, int(w0 * ratio)), max(1, int(h0 * ratio)))
    return im.resize(dst, resample=resample)


def load_pixels_for_analysis(
    path: Path,
    max_side: int = C.MAX_IMAGE_SIDE,
    resample: str = "bilinear",
) -> Tuple[bytes, int, int]:
    """Decoded, downscaled RGBA bytes plus (width, height)."""
    im = fit_within(load_image_rgba(path), max_side, pillow_resample_from_name(resample))
    if im.mode != "RGBA":
        im = im.convert("RGBA")
    width, height = im.size
    return im.tobytes(), width, height


__all__ = [
    "is_supported_image_name",
    "pillow_resample_from_name",
    "load_image_rgba",
    "fit_within",
    "load_pixels_for_analysis",
]
