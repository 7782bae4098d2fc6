from __future__ import annotations

"""
Exception types raised by palette_extract.

Callers branch on these; the pipeline itself never catches them.
"""


class PaletteError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(PaletteError, ValueError):
    """Caller contract violation: bad buffer length, dimensions or tunables."""


class EmptyInputError(PaletteError):
    """No opaque pixel was sampled, so no colour can be produced."""

    def __init__(self, message: str = "image is fully transparent") -> None:
        super().__init__(message)


class ImageDecodeError(PaletteError):
    """The image file could not be read or decoded."""


class ExtractionBusyError(PaletteError):
    """Another extraction is already in flight on this session."""


class ExtractionCancelledError(PaletteError):
    """The extraction was cancelled or superseded before it finished."""


__all__ = [
    "PaletteError",
    "InvalidInputError",
    "EmptyInputError",
    "ImageDecodeError",
    "ExtractionBusyError",
    "ExtractionCancelledError",
]
