#!/usr/bin/env python3
"""
extract_palette.py
Extract a dominant colour palette from image(s) and derive five theme palettes.

Usage:
  python extract_palette.py SRC [--json] [--out FILE] [--factor N] [--threshold D]
                            [--max-colours K] [--max-side PX] [--resample NAME]
                            [--no-swatches] [--debug]

Input:
  An image file or a folder of images (jpg, jpeg, png, gif, bmp, webp, svg, tiff, ico).
  Pixels with alpha < 128 are ignored.

Output:
  Human-readable palettes on stdout, or a JSON document keyed by file name
  with --json (written to --out when given).

Exit codes:
  0 all files analysed, 1 at least one file failed, 2 SRC not found.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from palette_extract import constants as C
from palette_extract.colour_convert import hex_to_rgb
from palette_extract.core_types import ExtractOptions, PaletteResult
from palette_extract.errors import EmptyInputError, ImageDecodeError, PaletteError
from palette_extract.image_io import is_supported_image_name
from palette_extract.session import ExtractionSession
from palette_extract.themes import THEME_NAMES
from palette_extract.utils import (
    ansi_swatch,
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    log,
    print_banner,
    print_config_line,
    stdout_supports_colour,
)

INVALID_FILE_MESSAGE = (
    "Please select a valid image file (PNG, JPG, WEBP, GIF, BMP, SVG, TIFF, ICO)"
)


# CLI args


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for palette extraction.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        json: bool, emit JSON instead of text
        out: optional Path for the JSON document
        factor / threshold / max_colours / max_side: pipeline tunables
        resample: downscale filter name
        swatches: bool, print truecolour swatches (TTY only)
        debug: bool for verbose pipeline details
    """
    parser = argparse.ArgumentParser(
        prog="extract_palette",
        description="Extract dominant colours and theme palettes from image(s).",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--out", type=Path, default=None, help="Write JSON to this file (implies --json)"
    )
    parser.add_argument(
        "--factor",
        type=int,
        default=C.QUANT_FACTOR,
        help="Quantisation grid size per channel.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=C.SIMILARITY_THRESHOLD,
        help="Minimum RGB distance between dominant colours.",
    )
    parser.add_argument(
        "--max-colours",
        type=int,
        default=C.PALETTE_SIZE,
        help="Dominant palette size cap.",
    )
    parser.add_argument(
        "--max-side",
        type=int,
        default=C.MAX_IMAGE_SIDE,
        help="Downscale so the longer side is at most this many pixels.",
    )
    parser.add_argument(
        "--resample",
        choices=["nearest", "bilinear", "bicubic", "lanczos"],
        default="bilinear",
        help="Downscale filter.",
    )
    parser.add_argument(
        "--no-swatches",
        dest="swatches",
        action="store_false",
        help="Do not print colour swatches.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose pipeline details")
    return parser.parse_args(argv)


# Rendering


def _render_text(result: PaletteResult, swatches: bool) -> None:
    """Print the dominant palette then each theme, one colour per line."""
    log("Dominant colours:")
    for colour in result.dominant:
        block = f"{ansi_swatch(colour.rgb)} " if swatches else ""
        log(
            f"  {block}{colour.hex}  frequency={colour.frequency:,}  impact={colour.impact:.1f}"
        )
    for name in THEME_NAMES:
        hexes = result.themes[name]
        if swatches:
            row = "".join(ansi_swatch(hex_to_rgb(h)) for h in hexes)
            log(f"{name}: {row}")
            log(f"  {'  '.join(hexes)}")
        else:
            log(f"{name}: {'  '.join(hexes)}")


# Per-file processing


def _process_single_image(
    path: Path,
    session: ExtractionSession,
    args: argparse.Namespace,
    swatches: bool,
) -> Optional[PaletteResult]:
    """
    Analyse one file and print its report unless JSON output was requested.
    Returns None when the file could not be analysed.
    """
    emit_text = not args.json
    if emit_text:
        print_banner(path.name)

    if not is_supported_image_name(path):
        error(f"{path.name}: {INVALID_FILE_MESSAGE}")
        return None

    t_start = time.perf_counter()
    try:
        result = session.analyze_file(path, args.max_side, args.resample)
    except EmptyInputError:
        error(f"{path.name}: image is fully transparent, no colours to extract")
        return None
    except ImageDecodeError as exc:
        error(f"{path.name}: error processing image ({exc})")
        return None
    except PaletteError as exc:
        error(f"{path.name}: error analysing image ({exc})")
        return None

    if emit_text:
        _render_text(result, swatches)
        log(f"Total time {format_seconds_compact(time.perf_counter() - t_start)}")
    return result


def _collect_files(src: Path) -> List[Path]:
    if not src.is_dir():
        return [src]
    files = [p for p in src.iterdir() if p.is_file() and is_supported_image_name(p)]
    files.sort(key=lambda p: p.name.lower())
    return files


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Handles a single file or a folder; returns the process exit code.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)
    if args.out is not None:
        args.json = True

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    try:
        options = ExtractOptions(
            factor=args.factor,
            similarity_threshold=args.threshold,
            palette_size=args.max_colours,
        )
    except PaletteError as exc:
        error(str(exc))
        return 2

    if args.debug:
        print_config_line(
            "extract",
            [
                ("Factor", options.factor),
                ("Threshold", options.similarity_threshold),
                ("Colours", options.palette_size),
                ("Max side", args.max_side),
                ("Resample", args.resample),
            ],
            debug=True,
        )

    files = _collect_files(src)
    if src.is_dir() and args.debug:
        debug_log(f"{len(files)} image(s) in {src}")

    session = ExtractionSession(options, debug=args.debug)
    swatches = bool(args.swatches) and stdout_supports_colour()

    report: Dict[str, Any] = {}
    failures = 0
    for path in files:
        result = _process_single_image(path, session, args, swatches)
        if result is None:
            failures += 1
            continue
        report[path.name] = result.to_dict()

    if args.json:
        text = json.dumps(report, indent=2)
        if args.out is not None:
            args.out.parent.mkdir(parents=True, exist_ok=True)
            args.out.write_text(text + "\n", encoding="utf-8")
            log(f"Wrote {args.out}")
        else:
            print(text, flush=True)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
