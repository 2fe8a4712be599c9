from panostitch.cli.coerce import (
    parse_float,
    parse_int,
    parse_matching_type,
    parse_projection,
    parse_wave_correction,
)
from panostitch.models.enums import MatchingType, ProjectionType, WaveCorrectionType

def test_parse_int_whole_string_only():
    assert parse_int("42") == 42
    assert parse_int("-7") == -7
    assert parse_int("0") == 0
    for bad in ["", "4x", " 4", "4 ", "+4", "1_000", "4.0", "abc"]:
        assert parse_int(bad) is None, bad

def test_parse_int_rejects_values_beyond_32_bits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("2147483648") is None
    assert parse_int("-2147483649") is None

def test_parse_float_decimal_forms():
    assert parse_float("0.5") == 0.5
    assert parse_float(".5") == 0.5
    assert parse_float("1.") == 1.0
    assert parse_float("-0.25") == -0.25
    assert parse_float("1e-3") == 0.001
    assert parse_float("3") == 3.0

def test_parse_float_rejects_garbage_and_non_finite():
    for bad in ["", "0.5x", " 0.5", "0.5 ", ".", "e5", "inf", "nan", "1e400", "0x1p3"]:
        assert parse_float(bad) is None, bad

def test_projection_vocabulary_is_exact():
    assert parse_projection("spherical") is ProjectionType.SPHERICAL
    assert parse_projection("rectilinear") is ProjectionType.COMPRESSED_RECTILINEAR
    assert parse_projection("transverse-mercator") is ProjectionType.TRANSVERSE_MERCATOR
    assert parse_projection("Spherical") is None
    assert parse_projection("spher") is None
    assert parse_projection("compressed-rectilinear") is None

def test_wave_correction_and_matching_vocabularies():
    assert parse_wave_correction("vertical") is WaveCorrectionType.VERTICAL
    assert parse_wave_correction("on") is None
    assert parse_matching_type("single") is MatchingType.SINGLE_PANO
    assert parse_matching_type("none") is MatchingType.NONE
    assert parse_matching_type("single-pano") is None
