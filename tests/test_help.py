from panostitch.cli.help import format_help, format_version
from panostitch.models.limits import Limits

def test_help_lists_every_flag():
    text = "\n".join(format_help())
    for flag in [
        "--output=", "--gui", "--help", "--version", "--projection=", "--matching-type=",
        "--match-threshold=", "--min-shift=", "--jpeg-quality=", "--png-compression=",
        "--copy-metadata", "--no-copy-metadata", "--wave-correction=", "--max-pano-mpx=",
    ]:
        assert flag in text, flag

def test_help_renders_limits_and_extensions():
    lines = format_help(Limits(max_jpeg_quality=90, default_jpeg_quality=80), extensions=(".jpg", ".png"))
    assert any("JPEG quality, 0 - 90 (default: 80)" in line for line in lines)
    assert lines[-1] == "Supported formats: .jpg, .png"

def test_version_banner():
    assert format_version() == "Xpano v1.3 - added matching type flag"
    assert format_help()[0] == format_version()
