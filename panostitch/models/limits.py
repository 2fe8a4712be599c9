from __future__ import annotations
from dataclasses import dataclass
from .enums import ProjectionType, MatchingType, WaveCorrectionType

APP_NAME = "Xpano"
VERSION = "1.3"
VERSION_NOTE = "added matching type flag"

@dataclass(frozen=True)
class Limits:
    """Bounds and defaults for every tunable flag.

    One instance is shared by the validator, the help text and the
    default resolver so the numbers only live here.
    """
    min_match_threshold: int = 6
    max_match_threshold: int = 250
    default_match_threshold: int = 70

    min_shift: float = 0.0
    max_shift: float = 1.0
    default_shift: float = 0.1

    max_jpeg_quality: int = 100
    default_jpeg_quality: int = 95

    max_png_compression: int = 9
    default_png_compression: int = 6

    min_pano_mpx: int = 1
    max_pano_mpx: int = 5000
    default_pano_mpx: int = 400

    default_projection: ProjectionType = ProjectionType.SPHERICAL
    default_matching_type: MatchingType = MatchingType.AUTO
    default_wave_correction: WaveCorrectionType = WaveCorrectionType.AUTO
    default_copy_metadata: bool = True

DEFAULT_LIMITS = Limits()
