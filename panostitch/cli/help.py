# panostitch/cli/help.py
# Usage text. Pure rendering over Limits and the supported-format list.

from __future__ import annotations

import logging
from typing import List, Sequence

from panostitch.imaging.formats import SUPPORTED_EXTENSIONS
from panostitch.models.limits import APP_NAME, DEFAULT_LIMITS, VERSION, VERSION_NOTE, Limits


def format_version() -> str:
    return f"{APP_NAME} v{VERSION} - {VERSION_NOTE}"


def format_help(limits: Limits = DEFAULT_LIMITS,
                extensions: Sequence[str] = SUPPORTED_EXTENSIONS) -> List[str]:
    lim = limits
    return [
        format_version(),
        "",
        f"Usage: {APP_NAME} [<input files or directories>] [options]",
        "",
        "Options:",
        "  --output=<path>          Output file path",
        "  --gui                    Launch GUI mode",
        "  --help                   Show this help message",
        "  --version                Show version",
        "",
        "Projection:",
        f"  --projection=<type>      Projection type (default: {lim.default_projection.value})",
        "                           Types: perspective, cylindrical, spherical,",
        "                           fisheye, stereographic, rectilinear, panini,",
        "                           mercator, transverse-mercator",
        "",
        "Matching:",
        f"  --matching-type=<type>   Matching mode (default: {lim.default_matching_type.value})",
        "                           Types: auto, single, none",
        "                           auto: pairwise matching, recommended",
        "                           single: assume all images form one pano",
        "                           none: skip matching",
        f"  --match-threshold=<N>    Match threshold, {lim.min_match_threshold} - {lim.max_match_threshold}"
        f" (default: {lim.default_match_threshold})",
        f"  --min-shift=<F>          Min shift filter, {lim.min_shift} - {lim.max_shift}"
        f" (default: {lim.default_shift})",
        "",
        "Export:",
        f"  --jpeg-quality=<N>       JPEG quality, 0 - {lim.max_jpeg_quality} (default: {lim.default_jpeg_quality})",
        f"  --png-compression=<N>    PNG compression, 0 - {lim.max_png_compression}"
        f" (default: {lim.default_png_compression})",
        "  --copy-metadata          Copy EXIF from first image",
        "  --no-copy-metadata       Don't copy EXIF metadata",
        "",
        "Stitching:",
        f"  --wave-correction=<type> Wave correction (default: {lim.default_wave_correction.value})",
        "                           Types: off, auto, horizontal, vertical",
        f"  --max-pano-mpx=<N>       Max panorama size in megapixels, {lim.min_pano_mpx} - {lim.max_pano_mpx}"
        f" (default: {lim.default_pano_mpx})",
        "",
        f"Supported formats: {', '.join(extensions)}",
    ]


def print_help(logger: logging.Logger, limits: Limits = DEFAULT_LIMITS) -> None:
    for line in format_help(limits):
        logger.info(line)
