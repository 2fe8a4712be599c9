from pathlib import Path

from panostitch.cli.defaults import resolve_options
from panostitch.models.args import Args
from panostitch.models.enums import MatchingType, ProjectionType, WaveCorrectionType
from panostitch.models.limits import DEFAULT_LIMITS

def test_unset_fields_take_defaults():
    opts = resolve_options(Args())
    assert opts.projection is ProjectionType.SPHERICAL
    assert opts.matching_type is MatchingType.AUTO
    assert opts.wave_correction is WaveCorrectionType.AUTO
    assert opts.match_threshold == DEFAULT_LIMITS.default_match_threshold
    assert opts.min_shift == DEFAULT_LIMITS.default_shift
    assert opts.jpeg_quality == DEFAULT_LIMITS.default_jpeg_quality
    assert opts.png_compression == DEFAULT_LIMITS.default_png_compression
    assert opts.max_pano_mpx == DEFAULT_LIMITS.default_pano_mpx
    assert opts.copy_metadata is True
    assert opts.output_path is None

def test_explicit_values_win_including_falsy_ones():
    args = Args(input_paths=(Path("a.jpg"),), copy_metadata=False, jpeg_quality=0,
                min_shift=0.0, projection=ProjectionType.MERCATOR)
    opts = resolve_options(args)
    assert opts.copy_metadata is False
    assert opts.jpeg_quality == 0
    assert opts.min_shift == 0.0
    assert opts.projection is ProjectionType.MERCATOR
    assert opts.input_paths == (Path("a.jpg"),)
