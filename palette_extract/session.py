# palette_extract/session.py
from __future__ import annotations

"""
Orchestration around the pure pipeline.

analyze_pixels() is the stateless entry point: pixels in, PaletteResult out.
ExtractionSession is the caller-owned context that tracks one in-flight
extraction at a time:

  - a second request while one is running is rejected (ExtractionBusyError);
  - cancel() marks the running request stale; a stale request never returns
    a result and raises ExtractionCancelledError instead;
  - failures while acquiring pixels propagate unchanged.
"""

import threading
import time
from pathlib import Path
from typing import Callable, Optional, Tuple

from . import constants as C
from .core_types import ExtractOptions, PaletteResult
from .errors import ExtractionBusyError, ExtractionCancelledError
from .extract import palette_from_samples
from .image_io import load_pixels_for_analysis
from .sampling import PixelBuffer, sample_opaque_pixels
from .themes import generate_themes
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string

PixelSource = Callable[[], Tuple[PixelBuffer, int, int]]


def analyze_pixels(
    pixels: PixelBuffer,
    width: int,
    height: int,
    options: Optional[ExtractOptions] = None,
    *,
    debug: bool = False,
) -> PaletteResult:
    """
    Dominant palette and the five theme palettes of an RGBA buffer.
    Themes are derived from the highest-impact dominant colour.
    """
    opts = options or ExtractOptions()
    samples = sample_opaque_pixels(
        pixels,
        width,
        height,
        max_samples=opts.max_samples,
        alpha_threshold=opts.alpha_threshold,
    )
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Buffer", f"{width}x{height}"), ("Opaque samples", int(samples.shape[0]))]
            )
        )
    dominant = palette_from_samples(samples, opts, debug=debug)
    return PaletteResult(
        dominant=dominant,
        themes=generate_themes(dominant[0].rgb),
        sample_count=int(samples.shape[0]),
    )


class ExtractionSession:
    """Single in-flight extraction guard with cooperative cancellation."""

    def __init__(self, options: Optional[ExtractOptions] = None, debug: bool = False):
        self.options = options or ExtractOptions()
        self.debug = debug
        self._guard = threading.Lock()
        self._state_lock = threading.Lock()
        self._generation = 0

    @property
    def in_flight(self) -> bool:
        return self._guard.locked()

    def cancel(self) -> None:
        """Abandon the running extraction, if any. Safe to call from another thread."""
        with self._state_lock:
            self._generation += 1

    def _current(self) -> int:
        with self._state_lock:
            return self._generation

    def _check_live(self, ticket: int) -> None:
        if self._current() != ticket:
            raise ExtractionCancelledError("extraction was cancelled")

    def run(self, acquire: PixelSource) -> PaletteResult:
        """
        Acquire pixels via `acquire()` then analyse them.

        Raises:
          ExtractionBusyError: another run() is in flight
          ExtractionCancelledError: cancel() was called before completion
        """
        with self._state_lock:
            if not self._guard.acquire(blocking=False):
                raise ExtractionBusyError("an extraction is already in progress")
            ticket = self._generation
        try:
            t0 = time.perf_counter()
            pixels, width, height = acquire()
            self._check_live(ticket)
            result = analyze_pixels(
                pixels, width, height, self.options, debug=self.debug
            )
            self._check_live(ticket)
            if self.debug:
                debug_log(f"extraction took {format_seconds_compact(time.perf_counter() - t0)}")
            return result
        finally:
            self._guard.release()

    def analyze_file(
        self,
        path: Path,
        max_side: int = C.MAX_IMAGE_SIDE,
        resample: str = "bilinear",
    ) -> PaletteResult:
        """Decode and downscale `path`, then run the pipeline on it."""
        return self.run(lambda: load_pixels_for_analysis(path, max_side, resample))

    def analyze_pixels(self, pixels: PixelBuffer, width: int, height: int) -> PaletteResult:
        """Guarded analysis of an already-decoded buffer."""
        return self.run(lambda: (pixels, width, height))


__all__ = ["PixelSource", "analyze_pixels", "ExtractionSession"]
