from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union
from .enums import ProjectionType, MatchingType, WaveCorrectionType

@dataclass(frozen=True)
class Args:
    run_gui: bool = False
    print_help: bool = False
    print_version: bool = False
    # raw positional tokens while dispatching, sorted Paths once parsed
    input_paths: Tuple[Union[str, Path], ...] = ()
    output_path: Optional[Path] = None

    # Projection
    projection: Optional[ProjectionType] = None

    # Matching
    matching_type: Optional[MatchingType] = None
    match_threshold: Optional[int] = None
    min_shift: Optional[float] = None

    # Export
    jpeg_quality: Optional[int] = None
    png_compression: Optional[int] = None
    copy_metadata: Optional[bool] = None

    # Stitching
    wave_correction: Optional[WaveCorrectionType] = None
    max_pano_mpx: Optional[int] = None
