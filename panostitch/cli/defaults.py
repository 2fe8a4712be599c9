# panostitch/cli/defaults.py
# Fill unset Args fields with the defaults the GUI and batch runner expect.

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from panostitch.models.args import Args
from panostitch.models.enums import MatchingType, ProjectionType, WaveCorrectionType
from panostitch.models.limits import DEFAULT_LIMITS, Limits


@dataclass(frozen=True)
class ResolvedOptions:
    input_paths: Tuple[Path, ...]
    output_path: Optional[Path]
    projection: ProjectionType
    matching_type: MatchingType
    match_threshold: int
    min_shift: float
    jpeg_quality: int
    png_compression: int
    copy_metadata: bool
    wave_correction: WaveCorrectionType
    max_pano_mpx: int


def _pick(value, default):
    return default if value is None else value


def resolve_options(args: Args, limits: Limits = DEFAULT_LIMITS) -> ResolvedOptions:
    return ResolvedOptions(
        input_paths=args.input_paths,
        output_path=args.output_path,
        projection=_pick(args.projection, limits.default_projection),
        matching_type=_pick(args.matching_type, limits.default_matching_type),
        match_threshold=_pick(args.match_threshold, limits.default_match_threshold),
        min_shift=_pick(args.min_shift, limits.default_shift),
        jpeg_quality=_pick(args.jpeg_quality, limits.default_jpeg_quality),
        png_compression=_pick(args.png_compression, limits.default_png_compression),
        copy_metadata=_pick(args.copy_metadata, limits.default_copy_metadata),
        wave_correction=_pick(args.wave_correction, limits.default_wave_correction),
        max_pano_mpx=_pick(args.max_pano_mpx, limits.default_pano_mpx),
    )
