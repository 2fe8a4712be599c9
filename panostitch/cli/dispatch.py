# panostitch/cli/dispatch.py
# Token-by-token flag dispatch. Each token either sets one field on the
# Args value or becomes an input path. Unknown flags are not rejected:
# they end up as (probably nonexistent) input files and are caught later
# by the supported-image check.

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from panostitch.cli.coerce import (
    matching_type_names,
    parse_float,
    parse_int,
    parse_matching_type,
    parse_projection,
    parse_wave_correction,
)
from panostitch.models.args import Args

log = logging.getLogger("panostitch.cli")

GUI_FLAG = "--gui"
HELP_FLAG = "--help"
VERSION_FLAG = "--version"
OUTPUT_FLAG = "--output="
PROJECTION_FLAG = "--projection="
MATCHING_TYPE_FLAG = "--matching-type="
MATCH_THRESHOLD_FLAG = "--match-threshold="
MIN_SHIFT_FLAG = "--min-shift="
JPEG_QUALITY_FLAG = "--jpeg-quality="
PNG_COMPRESSION_FLAG = "--png-compression="
COPY_METADATA_FLAG = "--copy-metadata"
NO_COPY_METADATA_FLAG = "--no-copy-metadata"
WAVE_CORRECTION_FLAG = "--wave-correction="
MAX_PANO_MPX_FLAG = "--max-pano-mpx="

# exact literals -> (field, value)
SWITCHES: Dict[str, Tuple[str, Any]] = {
    GUI_FLAG: ("run_gui", True),
    HELP_FLAG: ("print_help", True),
    VERSION_FLAG: ("print_version", True),
    COPY_METADATA_FLAG: ("copy_metadata", True),
    NO_COPY_METADATA_FLAG: ("copy_metadata", False),
}


def _parse_matching_type_noisy(text: str):
    value = parse_matching_type(text)
    if value is None:
        log.warning(
            "Invalid --matching-type '%s', using default (auto). Valid: %s",
            text, matching_type_names(),
        )
    return value


# "--flag=" prefixes, tried in order; first match wins
VALUE_FLAGS: Tuple[Tuple[str, str, Callable[[str], Optional[Any]]], ...] = (
    (OUTPUT_FLAG, "output_path", Path),
    (PROJECTION_FLAG, "projection", parse_projection),
    (MATCHING_TYPE_FLAG, "matching_type", _parse_matching_type_noisy),
    (MATCH_THRESHOLD_FLAG, "match_threshold", parse_int),
    (MIN_SHIFT_FLAG, "min_shift", parse_float),
    (JPEG_QUALITY_FLAG, "jpeg_quality", parse_int),
    (PNG_COMPRESSION_FLAG, "png_compression", parse_int),
    (WAVE_CORRECTION_FLAG, "wave_correction", parse_wave_correction),
    (MAX_PANO_MPX_FLAG, "max_pano_mpx", parse_int),
)


def parse_arg(args: Args, token: str) -> Args:
    """Return a copy of ``args`` with ``token`` applied.

    A later occurrence of a flag overwrites an earlier one, including
    when the later value fails to parse (the field goes back to unset).
    """
    if token in SWITCHES:
        field, value = SWITCHES[token]
        return replace(args, **{field: value})
    for prefix, field, convert in VALUE_FLAGS:
        if token.startswith(prefix):
            return replace(args, **{field: convert(token[len(prefix):])})
    # kept as the raw string: Path("") would mean the current directory
    return replace(args, input_paths=args.input_paths + (token,))


def parse_args_raw(argv: Iterable[str]) -> Args:
    """Fold every token into a fresh Args. ``argv`` excludes the program name."""
    result = Args()
    for token in argv:
        result = parse_arg(result, token)
    return result
