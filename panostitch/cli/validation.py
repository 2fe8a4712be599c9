# panostitch/cli/validation.py
# Cross-field and range checks over a fully populated Args value.
# Detection only: nothing here logs, callers decide how to report.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from panostitch.imaging.formats import is_extension_supported
from panostitch.models.args import Args
from panostitch.models.limits import DEFAULT_LIMITS, Limits


class ViolationKind(Enum):
    NO_SUPPORTED_INPUTS = "no-supported-inputs"
    UNSUPPORTED_OUTPUT = "unsupported-output"
    INCOMPATIBLE_COMBINATION = "incompatible-combination"
    INVALID_VALUE = "invalid-value"
    OUT_OF_RANGE = "out-of-range"
    FILESYSTEM_ERROR = "filesystem-error"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str
    flag: Optional[str] = None


def _out_of_range(flag: str, lo, hi) -> Violation:
    return Violation(ViolationKind.OUT_OF_RANGE, f"{flag} must be between {lo} and {hi}", flag)


def iter_violations(args: Args, limits: Limits = DEFAULT_LIMITS) -> Iterator[Violation]:
    """Yield every problem with ``args``, in the order they are checked."""
    if args.output_path is not None and not args.input_paths:
        yield Violation(ViolationKind.NO_SUPPORTED_INPUTS, "No supported images provided", "--output")
    if args.output_path is not None and not is_extension_supported(args.output_path):
        yield Violation(
            ViolationKind.UNSUPPORTED_OUTPUT,
            f'Unsupported output file extension: "{args.output_path.suffix}"',
            "--output",
        )
    if args.output_path is not None and args.run_gui:
        yield Violation(
            ViolationKind.INCOMPATIBLE_COMBINATION,
            "Specifying --gui and --output together is not yet supported.",
            "--gui",
        )

    # zero is rejected on its own, ahead of the range check
    if args.match_threshold is not None and not args.match_threshold:
        yield Violation(ViolationKind.INVALID_VALUE, "Invalid value for --match-threshold", "--match-threshold")
    if args.match_threshold is not None and not (
        limits.min_match_threshold <= args.match_threshold <= limits.max_match_threshold
    ):
        yield _out_of_range("--match-threshold", limits.min_match_threshold, limits.max_match_threshold)

    if args.min_shift is not None and not (limits.min_shift <= args.min_shift <= limits.max_shift):
        yield _out_of_range("--min-shift", limits.min_shift, limits.max_shift)
    if args.jpeg_quality is not None and not (0 <= args.jpeg_quality <= limits.max_jpeg_quality):
        yield _out_of_range("--jpeg-quality", 0, limits.max_jpeg_quality)
    if args.png_compression is not None and not (0 <= args.png_compression <= limits.max_png_compression):
        yield _out_of_range("--png-compression", 0, limits.max_png_compression)
    if args.max_pano_mpx is not None and not (limits.min_pano_mpx <= args.max_pano_mpx <= limits.max_pano_mpx):
        yield _out_of_range("--max-pano-mpx", limits.min_pano_mpx, limits.max_pano_mpx)


def validate_args(args: Args, limits: Limits = DEFAULT_LIMITS) -> Optional[Violation]:
    """First violation found, or None when ``args`` is valid."""
    return next(iter_violations(args, limits), None)
