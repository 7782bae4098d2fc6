# palette_extract/__init__.py
"""
palette_extract package.

Purpose:
  Dominant colour palette extraction from RGBA images, plus five colour-theory
  theme palettes derived from the most prominent colour. See extract_palette.py for CLI.

Public API:
  analyze_pixels   : pixels -> PaletteResult (dominant palette + themes).
  extract_palette  : pixels -> dominant palette only.
  generate_themes  : base colour -> {theme name: 5 hex strings}.
  ExtractionSession: single in-flight guard with cancellation.
  colour_convert   : rgb_to_hex, rgb_to_hsl, hsl_to_hex, ...
  core_types       : value objects (ScoredColor, PaletteResult, ExtractOptions, Hsl).
  errors           : InvalidInputError, EmptyInputError, ImageDecodeError, ...
  image_io         : Pillow decoding and downscaling for analysis.

Quick start:
  from palette_extract import ExtractionSession
  result = ExtractionSession().analyze_file(Path("photo.jpg"))
  print([c.hex for c in result.dominant], result.themes["Triadic"])
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import constants
from . import core_types
from . import errors
from . import image_io
from . import utils

from .core_types import ExtractOptions, Hsl, PaletteResult, ScoredColor  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    EmptyInputError,
    ExtractionBusyError,
    ExtractionCancelledError,
    ImageDecodeError,
    InvalidInputError,
    PaletteError,
)
from .extract import extract_palette  # noqa: E402,F401
from .session import ExtractionSession, analyze_pixels  # noqa: E402,F401
from .themes import THEME_NAMES, generate_themes  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "constants",
    "core_types",
    "errors",
    "image_io",
    "utils",
    "ExtractOptions",
    "Hsl",
    "PaletteResult",
    "ScoredColor",
    "PaletteError",
    "InvalidInputError",
    "EmptyInputError",
    "ImageDecodeError",
    "ExtractionBusyError",
    "ExtractionCancelledError",
    "extract_palette",
    "analyze_pixels",
    "ExtractionSession",
    "THEME_NAMES",
    "generate_themes",
]
